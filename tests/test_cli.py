"""Tests for the command line entry point."""

import json

import pytest

import main as cli
from core.config import Config


@pytest.fixture
def config(tmp_path):
    return Config(tmp_path / "no_config.json")


def test_list_text(sample_rez, config, capsys) -> None:
    assert cli.main(["list", str(sample_rez)], config) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("readme.TXT [7, greeting] (100, ")
    assert lines[0].endswith("+5 bytes)")
    assert lines[1] == "sounds (200)/"
    assert lines[3] == "  music (300)/"
    assert len(lines) == 6


def test_list_json(sample_rez, config, capsys) -> None:
    assert cli.main(["list", str(sample_rez), "--output", "json"], config) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["user_title"] == "Sample"
    assert [e["name"] for e in data["entries"]] == ["readme", "sounds", "empty"]


def test_info(sample_rez, config, capsys) -> None:
    assert cli.main(["info", str(sample_rez)], config) == 0

    out = capsys.readouterr().out
    assert "RezMgr Version 1" in out
    assert "Resources:" in out
    assert "19 B" in out


def test_info_in_german(sample_rez, config, capsys) -> None:
    assert cli.main(["--lang", "de", "info", str(sample_rez)], config) == 0
    assert "Ressourcen:" in capsys.readouterr().out


def test_extract_with_filter(sample_rez, config, tmp_path, capsys) -> None:
    out = tmp_path / "out"
    argv = ["extract", "--no-progress", "-f", "**.WAV", str(sample_rez), str(out)]

    assert cli.main(argv, config) == 0

    assert (out / "sounds" / "boom.WAV").exists()
    assert (out / "sounds" / "music" / "theme.WAV").read_bytes() == b"la la la"
    assert not (out / "readme.TXT").exists()
    err = capsys.readouterr().err
    assert "extracting sounds/boom.WAV as" in err
    assert "Extracted 2 file(s)" in err


def test_extract_chunk_size_option(sample_rez, config, tmp_path) -> None:
    out = tmp_path / "out"
    argv = ["-q", "extract", "--no-progress", "--chunk-size", "1KB", str(sample_rez), str(out)]
    assert cli.main(argv, config) == 0
    assert (out / "readme.TXT").read_bytes() == b"hello"


def test_invalid_chunk_size_is_usage_error(sample_rez, config, tmp_path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["extract", "--chunk-size", "lots", str(sample_rez), str(tmp_path)], config)
    assert exc_info.value.code == 2


def test_corrupt_file_exits_with_error(tmp_path, config, capsys) -> None:
    bad = tmp_path / "bad.rez"
    bad.write_bytes(b"XX" + b" " * 200)

    assert cli.main(["list", str(bad)], config) == 1

    err = capsys.readouterr().err
    assert "Error: failed to read REZ file" in err
    assert "invalid control byte 0" in err


def test_missing_file_exits_with_error(tmp_path, config, capsys) -> None:
    assert cli.main(["list", str(tmp_path / "missing.rez")], config) == 1
    assert "I/O error" in capsys.readouterr().err


def test_command_is_required(config) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([], config)
    assert exc_info.value.code == 2


def test_interrupt_is_reported_without_traceback(sample_rez, config, capsys, monkeypatch) -> None:
    def interrupted(args, config):
        raise KeyboardInterrupt

    monkeypatch.setitem(cli.COMMANDS, 'list', interrupted)

    assert cli.main(["list", str(sample_rez)], config) == 130
    assert "Interrupted by user." in capsys.readouterr().err
