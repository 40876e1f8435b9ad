"""Monkey-patch Typer so usage errors come back as JSON envelopes."""

from __future__ import annotations

import sys

import click


def _usage_error_types() -> tuple[type[BaseException], ...]:
    """Click's UsageError plus any copy Typer bundles under its own package."""
    types: list[type[BaseException]] = [click.exceptions.UsageError]
    for name, module in list(sys.modules.items()):
        if module is None or not name.startswith("typer."):
            continue
        candidate = getattr(module, "UsageError", None)
        if isinstance(candidate, type) and issubclass(candidate, BaseException) and candidate not in types:
            types.append(candidate)
    return tuple(types)


def patch_typer_errors() -> None:
    """Patch TyperGroup.invoke to emit ERR_USAGE envelopes for CLI usage errors."""
    import typer.core

    _orig_invoke = typer.core.TyperGroup.invoke
    usage_errors = _usage_error_types()

    def _json_invoke(self, ctx):
        try:
            return _orig_invoke(self, ctx)
        except usage_errors as e:
            from spa_json.engine.dispatcher import error_envelope, exit_code_for, print_response

            command = ctx.invoked_subcommand or "unknown"
            env = error_envelope(command, "ERR_USAGE", str(e.format_message()))
            print_response(env)
            raise SystemExit(exit_code_for(env)) from e

    typer.core.TyperGroup.invoke = _json_invoke
