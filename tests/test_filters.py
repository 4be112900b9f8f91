"""Tests for glob pattern compilation and resource filters."""

import pytest

from core.filters import ResourceFilter, compile_glob, glob_to_regex


def _matches(pattern: str, path: str) -> bool:
    return compile_glob(pattern).fullmatch(path) is not None


def test_single_asterisk_stays_in_component() -> None:
    assert _matches("*.txt", "a.txt")
    assert not _matches("*.txt", "dir/a.txt")
    assert not _matches("*.txt", ".txt")


def test_double_asterisk_crosses_separators() -> None:
    assert _matches("**.txt", "a.txt")
    assert _matches("**.txt", "dir/a.txt")
    assert _matches("**.txt", "dir/sub/a.txt")


def test_three_asterisks_behave_like_two() -> None:
    assert glob_to_regex("***.txt") == glob_to_regex("**.txt")


def test_question_mark_is_one_non_separator_character() -> None:
    assert _matches("a?c.txt", "abc.txt")
    assert not _matches("a?c.txt", "ac.txt")
    assert not _matches("a?c.txt", "abbc.txt")
    assert not _matches("a?c", "a/c")


def test_backslash_is_path_separator() -> None:
    assert glob_to_regex("sounds\\*.wav") == glob_to_regex("sounds/*.wav")
    assert _matches("sounds\\*.wav", "sounds/boom.wav")


def test_special_characters_are_literal() -> None:
    assert _matches("a+b(1).txt", "a+b(1).txt")
    assert not _matches("a.txt", "abtxt")
    assert not _matches("[ab].txt", "a.txt")
    assert _matches("[ab].txt", "[ab].txt")
    assert _matches("<x>.dat", "<x>.dat")


def test_pattern_is_anchored() -> None:
    assert not _matches("a.txt", "xa.txt")
    assert not _matches("a.txt", "a.txt.bak")
    assert glob_to_regex("abc") == "^abc$"


@pytest.mark.parametrize("pattern, path, expected", [
    ("dir/*", "dir/file.txt", True),
    ("dir/*", "dir/sub/file.txt", False),
    ("dir/**", "dir/sub/file.txt", True),
    ("dir/**", "dir/", False),
    ("*/*.wav", "sounds/boom.wav", True),
])
def test_trailing_and_inner_asterisk_runs(pattern, path, expected) -> None:
    assert _matches(pattern, path) is expected


def test_empty_filter_matches_everything() -> None:
    resource_filter = ResourceFilter()
    assert not resource_filter
    assert resource_filter.matches("anything/at/all.bin")
    assert resource_filter.matches("")


def test_filters_combine_with_or() -> None:
    resource_filter = ResourceFilter(["*.txt", "sounds/**"])
    assert resource_filter
    assert resource_filter.matches("readme.txt")
    assert resource_filter.matches("sounds/music/theme.wav")
    assert not resource_filter.matches("textures/wall.dtx")
