"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


SAMPLE_DOCUMENT = {
    "int": 1,
    "seq": ["a", "b"],
    "str": "string",
}

SAMPLE_TEXT = "{\n  int = 1\n  seq = [\n    a\n    b\n  ]\n  str = string\n}"


@pytest.fixture()
def sample_json(tmp_path: Path) -> Path:
    """A JSON document whose spa-json form is SAMPLE_TEXT."""
    path = tmp_path / "sample.json"
    path.write_text(json.dumps(SAMPLE_DOCUMENT), encoding="utf-8")
    return path


@pytest.fixture()
def sample_yaml(tmp_path: Path) -> Path:
    """The same document as sample_json, written as YAML."""
    path = tmp_path / "sample.yaml"
    path.write_text("int: 1\nseq:\n  - a\n  - b\nstr: string\n", encoding="utf-8")
    return path


@pytest.fixture()
def bad_json(tmp_path: Path) -> Path:
    path = tmp_path / "bad.json"
    path.write_text('{"int": 1,', encoding="utf-8")
    return path


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty directory so no stray spa-json.yaml is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
