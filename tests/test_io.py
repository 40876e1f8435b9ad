"""Tests for IO operations: fingerprint, backup, atomic write, document loading."""

from pathlib import Path

import pytest

from spa_json.contracts.common import MessageError, SpaIOError
from spa_json.contracts.values import TupleVariant
from spa_json.engine.emitter import to_file
from spa_json.io.fileops import (
    atomic_write,
    backup,
    detect_format,
    fingerprint,
    load_document,
    read_text_safe,
    write_text,
)


def test_fingerprint(sample_json: Path):
    fp = fingerprint(sample_json)
    assert fp.startswith("sha256:")
    assert len(fp) == 71  # sha256: + 64 hex chars
    assert fingerprint(sample_json) == fp


def test_backup(sample_json: Path):
    bak_path = backup(sample_json)
    assert Path(bak_path).exists()
    assert ".bak" in bak_path
    assert Path(bak_path).read_bytes() == sample_json.read_bytes()


def test_atomic_write_overwrites(tmp_path: Path):
    target = tmp_path / "output.spa-json"
    target.write_bytes(b"old content")
    atomic_write(target, b"new content")
    assert target.read_bytes() == b"new content"
    assert not list(tmp_path.glob(".spa_tmp_*"))


def test_write_text_is_utf8(tmp_path: Path):
    target = tmp_path / "out.spa-json"
    write_text(target, "Schlämmer")
    assert target.read_bytes() == "Schlämmer".encode("utf-8")


def test_write_text_missing_directory_raises_io_error(tmp_path: Path):
    with pytest.raises(SpaIOError) as exc_info:
        write_text(tmp_path / "missing" / "out.spa-json", "x")
    assert isinstance(exc_info.value.error, OSError)
    assert str(exc_info.value).startswith("IO error: ")


def test_to_file(tmp_path: Path):
    path = to_file(TupleVariant("Tuple", (1, 2)), tmp_path / "t.spa-json")
    assert path.read_text(encoding="utf-8") == "{\n  Tuple = [\n    1\n    2\n  ]\n}"


def test_to_file_does_not_write_on_serialize_error(tmp_path: Path):
    target = tmp_path / "never.spa-json"
    with pytest.raises(MessageError):
        to_file(object(), target)
    assert not target.exists()


def test_read_text_safe_strips_bom(tmp_path: Path):
    path = tmp_path / "bom.json"
    path.write_bytes(b"\xef\xbb\xbf{}")
    assert read_text_safe(path) == "{}"


def test_detect_format():
    assert detect_format("a.json") == "json"
    assert detect_format("a.YML") == "yaml"
    assert detect_format("a.txt", "yaml") == "yaml"
    with pytest.raises(ValueError):
        detect_format("a.txt")


def test_load_document_json_and_yaml_agree(sample_json: Path, sample_yaml: Path):
    assert load_document(sample_json) == load_document(sample_yaml)


def test_load_document_keeps_key_order(tmp_path: Path):
    path = tmp_path / "order.json"
    path.write_text('{"z": 1, "a": 2}', encoding="utf-8")
    assert list(load_document(path)) == ["z", "a"]


def test_load_document_parse_error(bad_json: Path):
    with pytest.raises(ValueError, match="Cannot parse JSON"):
        load_document(bad_json)


def test_load_document_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_document(tmp_path / "nope.json")
