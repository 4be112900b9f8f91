# core/filters.py

"""Glob filters for selecting resources by their path inside the archive."""
import re
from typing import Iterable, List, Pattern

# One asterisk stays inside a path component, two or more cross separators.
SINGLE_ASTERISK_MATCHER = "[^/]+"
MULTIPLE_ASTERISK_MATCHER = ".+"
QUESTION_MARK_MATCHER = "[^/]"

_VERBATIM = frozenset("0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz<>")


def _asterisk_matcher(count: int) -> str:
    if count == 0:
        return ""
    return SINGLE_ASTERISK_MATCHER if count == 1 else MULTIPLE_ASTERISK_MATCHER


def glob_to_regex(glob_pattern: str) -> str:
    """
    Translates a glob pattern into an anchored regular expression.

    Backslashes are treated as path separators, so ``dir\\*.txt`` and
    ``dir/*.txt`` are the same pattern.
    """
    parts = ["^"]
    asterisks = 0

    for char in glob_pattern:
        if char == "*":
            asterisks += 1
            continue
        parts.append(_asterisk_matcher(asterisks))
        asterisks = 0

        if char == "\\":
            parts.append("/")
        elif char == "?":
            parts.append(QUESTION_MARK_MATCHER)
        elif char in _VERBATIM:
            parts.append(char)
        else:
            parts.append(re.escape(char))

    parts.append(_asterisk_matcher(asterisks))
    parts.append("$")
    return "".join(parts)


def compile_glob(glob_pattern: str) -> Pattern:
    return re.compile(glob_to_regex(glob_pattern))


class ResourceFilter:
    """Matches logical paths against any of several glob patterns."""

    def __init__(self, patterns: Iterable[str] = ()):
        self.patterns: List[str] = list(patterns)
        self.compiled: List[Pattern] = [compile_glob(p) for p in self.patterns]

    def __bool__(self) -> bool:
        return bool(self.compiled)

    def matches(self, logical_path: str) -> bool:
        """An empty filter accepts everything."""
        if not self.compiled:
            return True
        return any(regex.fullmatch(logical_path) for regex in self.compiled)
