"""Typer CLI application — convert JSON/YAML documents to spa-json text."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Optional

import typer

from spa_json.help import patch_typer_errors

patch_typer_errors()

import spa_json
from spa_json.contracts.common import MessageError, SpaIOError, Target
from spa_json.engine.dispatcher import (
    error_envelope,
    exit_code_for,
    print_response,
    success_envelope,
)
from spa_json.engine.emitter import to_string
from spa_json.engine.settings import Settings, resolve_settings
from spa_json.io.fileops import backup, fingerprint, load_document, write_text
from spa_json.observe.events import EventEmitter, Timer


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

_MAIN_HELP = """\
Convert structured data to **spa-json**, an indentation-based alternative to JSON.

spa-json uses `{ }` for maps and records, `[ ]` for sequences, `key = value`
entries, one entry per line, no commas and no quotes around strings.

**Examples:**

`spa-json convert -f data.json`  — writes `data.spa-json` next to the input

`spa-json convert -f data.yaml --out build/data.spa-json --backup`

`spa-json render -f data.json --raw`  — print the text instead of writing it

**Every command** (except `render --raw`) returns a JSON envelope:
`{"ok": bool, "command": "...", "result": {...}, "errors": [...], "metrics": {"duration_ms": N}}`

**Settings:** an optional `spa-json.yaml` in the working directory sets
`output_suffix`, `input_format`, `backup` and `overwrite`.

**Exit codes:** 0=success, 10=validation, 50=io, 90=internal
"""


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(spa_json.__version__)
        raise typer.Exit()


app = typer.Typer(
    name="spa-json",
    help=_MAIN_HELP,
    no_args_is_help=True,
    rich_markup_mode="markdown",
)


@app.callback(invoke_without_command=True)
def _root(
    version: Annotated[
        bool, typer.Option("--version", "-V", help="Print version and exit.", is_eager=True)
    ] = False,
) -> None:
    if version:
        _version_callback(True)


# Type aliases for common options
InputPath = Annotated[str, typer.Option("--file", "-f", help="Path to a .json, .yaml or .yml input document")]
FormatOpt = Annotated[
    Optional[str],
    typer.Option("--format", help="Input format: auto, json or yaml (default from settings, else auto)"),
]
ConfigOpt = Annotated[
    Optional[str],
    typer.Option("--config", help="Settings file (default: ./spa-json.yaml when present)"),
]
EventsFlag = Annotated[
    bool,
    typer.Option("--events", envvar="SPA_JSON_EVENTS", help="Emit NDJSON lifecycle events to stderr"),
]

_FORMATS = ("auto", "json", "yaml")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _emit(envelope, code=None):
    print_response(envelope)
    raise typer.Exit(code if code is not None else exit_code_for(envelope))


def _settings_or_emit(config: str | None, cmd: str, target: Target) -> Settings:
    try:
        return resolve_settings(config)
    except FileNotFoundError:
        _emit(error_envelope(cmd, "ERR_CONFIG_NOT_FOUND", f"Settings file not found: {config}", target=target))
    except ValueError as e:
        _emit(error_envelope(cmd, "ERR_CONFIG_INVALID", str(e), target=target))


def _load_or_emit(file: str, fmt: str, cmd: str, target: Target) -> Any:
    """Load the input document, or emit an error envelope."""
    if fmt not in _FORMATS:
        _emit(error_envelope(
            cmd, "ERR_INPUT_INVALID",
            f"Unknown format '{fmt}'. Use one of: {', '.join(_FORMATS)}.",
            target=target,
        ))
    try:
        return load_document(file, fmt)
    except FileNotFoundError:
        _emit(error_envelope(cmd, "ERR_INPUT_NOT_FOUND", f"File not found: {file}", target=target))
    except ValueError as e:
        _emit(error_envelope(cmd, "ERR_INPUT_INVALID", str(e), target=target))


def _serialize_or_emit(value: Any, cmd: str, target: Target) -> str:
    try:
        return to_string(value)
    except MessageError as e:
        _emit(error_envelope(cmd, "ERR_SERIALIZE", str(e), target=target))


def _emit_io_failure(emitter: EventEmitter, err: SpaIOError, target: Target) -> None:
    emitter.emit("convert.failed", {"code": "ERR_IO", "message": str(err)})
    _emit(error_envelope("convert", "ERR_IO", str(err), target=target))


def _default_output(file: str, suffix: str) -> Path:
    p = Path(file)
    return p.with_name(p.stem + suffix)


def _line_count(text: str) -> int:
    return text.count("\n") + 1 if text else 0


# ---------------------------------------------------------------------------
# spa-json version
# ---------------------------------------------------------------------------
@app.command()
def version():
    """Print the spa-json version.

    Example: `spa-json version`
    """
    env = success_envelope("version", {"version": spa_json.__version__})
    _emit(env)


# ---------------------------------------------------------------------------
# spa-json convert
# ---------------------------------------------------------------------------
@app.command("convert")
def convert_cmd(
    file: InputPath,
    out: Annotated[Optional[str], typer.Option("--out", "-o", help="Output path (default: <input stem><output_suffix>)")] = None,
    fmt: FormatOpt = None,
    make_backup: Annotated[Optional[bool], typer.Option("--backup/--no-backup", help="Copy an existing output file to a timestamped .bak first")] = None,
    force: Annotated[Optional[bool], typer.Option("--force/--no-force", help="Overwrite an existing output file")] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Serialize and return the text without writing")] = False,
    config: ConfigOpt = None,
    events: EventsFlag = False,
):
    """Convert a JSON or YAML document to a .spa-json file.

    The document is serialized in memory first; the output file is written
    in a single atomic step only when serialization succeeds.

    Example: `spa-json convert -f data.json`

    Example: `spa-json convert -f config.yaml --out config.spa-json --backup`
    """
    target = Target(file=file, out=out)
    settings = _settings_or_emit(config, "convert", target)
    emitter = EventEmitter(enabled=events)
    out_path = Path(out) if out else _default_output(file, settings.output_suffix)
    target.out = str(out_path)
    overwrite = settings.overwrite if force is None else force
    do_backup = settings.backup if make_backup is None else make_backup
    backup_path = None

    with Timer() as t:
        emitter.emit("convert.start", {"file": file, "out": str(out_path)})
        data = _load_or_emit(file, fmt or settings.input_format, "convert", target)
        try:
            text = to_string(data)
        except MessageError as e:
            emitter.emit("convert.failed", {"code": "ERR_SERIALIZE", "message": str(e)})
            _emit(error_envelope("convert", "ERR_SERIALIZE", str(e), target=target))
        emitter.emit("convert.serialized", {"chars": len(text)})

        if not dry_run:
            if out_path.exists() and not overwrite:
                _emit(error_envelope(
                    "convert", "ERR_FILE_EXISTS",
                    f"Output already exists: {out_path}. Use --force to overwrite.",
                    target=target,
                ))
            try:
                if do_backup and out_path.exists():
                    backup_path = backup(out_path)
                write_text(out_path, text)
            except OSError as e:
                _emit_io_failure(emitter, SpaIOError(e), target)
            except SpaIOError as e:
                _emit_io_failure(emitter, e, target)
            emitter.emit("convert.written", {"path": str(out_path)})

    if dry_run:
        result = {
            "path": str(out_path),
            "dry_run": True,
            "lines": _line_count(text),
            "text": text,
        }
        _emit(success_envelope("convert", result, target=target, duration_ms=t.elapsed_ms))

    result = {
        "path": str(out_path),
        "bytes": out_path.stat().st_size,
        "lines": _line_count(text),
        "fingerprint": fingerprint(out_path),
    }
    if backup_path:
        result["backup"] = backup_path
    env = success_envelope("convert", result, target=target, duration_ms=t.elapsed_ms)
    _emit(env)


# ---------------------------------------------------------------------------
# spa-json render
# ---------------------------------------------------------------------------
@app.command("render")
def render_cmd(
    file: InputPath,
    fmt: FormatOpt = None,
    raw: Annotated[bool, typer.Option("--raw", help="Print the spa-json text itself instead of a JSON envelope")] = False,
    config: ConfigOpt = None,
):
    """Serialize a JSON or YAML document and print the result.

    Example: `spa-json render -f data.json`

    Example: `spa-json render -f data.yaml --raw > data.spa-json`
    """
    target = Target(file=file)
    settings = _settings_or_emit(config, "render", target)

    with Timer() as t:
        data = _load_or_emit(file, fmt or settings.input_format, "render", target)
        text = _serialize_or_emit(data, "render", target)

    if raw:
        typer.echo(text)
        raise typer.Exit(0)

    env = success_envelope(
        "render",
        {"lines": _line_count(text), "text": text},
        target=target,
        duration_ms=t.elapsed_ms,
    )
    _emit(env)


# ---------------------------------------------------------------------------
# spa-json demo
# ---------------------------------------------------------------------------
@app.command("demo")
def demo_cmd(
    out: Annotated[str, typer.Option("--out", "-o", help="Output path")] = "a.spa-json",
):
    """Write a sample Person record with a nested friends list.

    Example: `spa-json demo --out person.spa-json`
    """
    from spa_json.demo import sample_person
    from spa_json.engine.emitter import to_file

    target = Target(out=out)
    with Timer() as t:
        try:
            path = to_file(sample_person(), out)
        except SpaIOError as e:
            _emit(error_envelope("demo", "ERR_IO", str(e), target=target))

    result = {"path": str(path), "bytes": path.stat().st_size, "fingerprint": fingerprint(path)}
    _emit(success_envelope("demo", result, target=target, duration_ms=t.elapsed_ms))


# ---------------------------------------------------------------------------
# Entrypoint (for `python -m spa_json`)
# ---------------------------------------------------------------------------
def main() -> None:
    try:
        app()
    except SystemExit:
        raise
    except Exception as exc:
        # Machine consumers never see raw tracebacks.
        env = error_envelope("unknown", "ERR_INTERNAL", str(exc))
        print_response(env)
        raise SystemExit(90) from exc


if __name__ == "__main__":
    main()
