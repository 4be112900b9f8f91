"""Tests for the JSON configuration file."""

import json

from core.config import Config
from core.extraction import DEFAULT_CHUNK_SIZE


def test_defaults_without_file(tmp_path) -> None:
    config = Config(tmp_path / "missing.json")
    assert config.get('chunk_size') == DEFAULT_CHUNK_SIZE
    assert config.get('max_directory_depth') == 64
    assert config.get('language') == 'en'
    assert config.get('nope', 'fallback') == 'fallback'


def test_file_values_override_defaults(tmp_path) -> None:
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({'chunk_size': 1024, 'language': 'de'}), encoding='utf-8')

    config = Config(config_file)

    assert config.get('chunk_size') == 1024
    assert config.get('language') == 'de'
    assert config.get('show_progress') is True


def test_invalid_file_falls_back_to_defaults(tmp_path) -> None:
    config_file = tmp_path / "config.json"
    config_file.write_text("{not json", encoding='utf-8')
    assert Config(config_file).get('chunk_size') == DEFAULT_CHUNK_SIZE

    config_file.write_text("[1, 2]", encoding='utf-8')
    assert Config(config_file).get('chunk_size') == DEFAULT_CHUNK_SIZE


def test_save_round_trip(tmp_path) -> None:
    config_file = tmp_path / "config.json"
    config = Config(config_file)
    config.set('show_progress', False)
    config.save_config()

    assert Config(config_file).get('show_progress') is False
