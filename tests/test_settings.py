"""Tests for spa-json.yaml settings loading."""

from pathlib import Path

import pytest

from spa_json.engine.settings import SETTINGS_FILENAME, Settings, resolve_settings


def test_defaults_when_no_file(tmp_path: Path):
    settings = Settings.load_from_dir(tmp_path)
    assert settings.output_suffix == ".spa-json"
    assert settings.input_format == "auto"
    assert settings.backup is False
    assert settings.overwrite is True


def test_load_from_dir(tmp_path: Path):
    (tmp_path / SETTINGS_FILENAME).write_text("output_suffix: .spa\nbackup: true\n")
    settings = Settings.load_from_dir(tmp_path)
    assert settings.output_suffix == ".spa"
    assert settings.backup is True


def test_empty_file_gives_defaults(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert Settings.load(path) == Settings()


def test_unknown_key_rejected(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("indent: 4\n")
    with pytest.raises(ValueError, match="Invalid settings"):
        Settings.load(path)


def test_invalid_format_rejected(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("input_format: toml\n")
    with pytest.raises(ValueError):
        Settings.load(path)


def test_non_mapping_rejected(tmp_path: Path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="mapping"):
        Settings.load(path)


def test_explicit_config_wins(tmp_path: Path):
    (tmp_path / SETTINGS_FILENAME).write_text("output_suffix: .dir\n")
    explicit = tmp_path / "other.yaml"
    explicit.write_text("output_suffix: .explicit\n")
    assert resolve_settings(str(explicit), tmp_path).output_suffix == ".explicit"
    assert resolve_settings(None, tmp_path).output_suffix == ".dir"
