"""File operations: fingerprinting, backup, atomic write, input loading."""

from __future__ import annotations

import hashlib
import json
import os
import shutil
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from spa_json.contracts.common import SpaIOError

JSON_SUFFIXES = frozenset({".json"})
YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def fingerprint(path: str | Path) -> str:
    """Compute SHA-256 fingerprint of a file."""
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return f"sha256:{h.hexdigest()}"


def backup(path: str | Path) -> str:
    """Create a timestamped backup of a file. Returns backup path."""
    path = Path(path)
    ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    backup_name = f"{path.stem}.{ts}.bak{path.suffix}"
    backup_path = path.parent / backup_name
    shutil.copy2(path, backup_path)
    return str(backup_path)


def atomic_write(target: str | Path, data: bytes) -> None:
    """Write data to target atomically via temp file + rename."""
    target = Path(target)
    fd, tmp_path = tempfile.mkstemp(
        dir=target.parent, suffix=target.suffix, prefix=".spa_tmp_"
    )
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        shutil.move(tmp_path, target)
    except Exception:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def write_text(target: str | Path, text: str) -> None:
    """Atomically write UTF-8 text, raising :class:`SpaIOError` on failure."""
    try:
        atomic_write(target, text.encode("utf-8"))
    except OSError as e:
        raise SpaIOError(e) from e


def read_text_safe(path: str | Path) -> str:
    """Read a text file with UTF-8 BOM tolerance.

    Uses ``utf-8-sig`` encoding which silently strips a leading BOM when
    present, while reading plain UTF-8 correctly.
    """
    return Path(path).read_text(encoding="utf-8-sig")


def detect_format(path: str | Path, fmt: str = "auto") -> str:
    """Resolve ``auto`` to ``json`` or ``yaml`` from the file suffix."""
    if fmt != "auto":
        return fmt
    suffix = Path(path).suffix.lower()
    if suffix in YAML_SUFFIXES:
        return "yaml"
    if suffix in JSON_SUFFIXES:
        return "json"
    raise ValueError(f"Cannot infer input format from '{suffix or path}'; pass --format.")


def load_document(path: str | Path, fmt: str = "auto") -> Any:
    """Load a JSON or YAML document.

    ``FileNotFoundError`` propagates; parse failures are raised as ``ValueError``.
    """
    resolved = detect_format(path, fmt)
    text = read_text_safe(path)
    try:
        if resolved == "yaml":
            return yaml.safe_load(text)
        return json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Cannot parse {resolved.upper()} input: {e}") from e
