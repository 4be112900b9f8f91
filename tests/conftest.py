"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add repo root (for 'core.*' and 'utils.*') and the tests dir (for 'rez_fixtures')
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))
sys.path.insert(0, str(Path(__file__).parent))

from rez_fixtures import RezBuilder, directory, resource  # noqa: E402
from utils.i18n import translator  # noqa: E402


@pytest.fixture(autouse=True)
def _english_messages():
    """CLI tests compare English output; keep the shared translator from leaking a language."""
    translator.set_language('en')
    yield
    translator.set_language('en')


@pytest.fixture
def sample_tree():
    """A small tree with a nested directory and resources on two levels."""
    return [
        resource("readme", "TXT", 7, b"hello", description="greeting", keys=(1, 2), time=100),
        directory("sounds", [
            resource("boom", "WAV", 8, b"\x01\x02\x03\x04\x05\x06", time=201),
            directory("music", [
                resource("theme", "WAV", 9, b"la la la", time=301),
            ], time=300),
        ], time=200),
        resource("empty", "DAT", 10, b"", time=400),
    ]


@pytest.fixture
def sample_rez(tmp_path, sample_tree):
    """Writes ``sample_tree`` to a REZ file and returns its path."""
    rez_path = tmp_path / "sample.rez"
    rez_path.write_bytes(RezBuilder(file_type=b"RezMgr Version 1", user_title=b"Sample").build(sample_tree))
    return rez_path
