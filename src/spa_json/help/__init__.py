from spa_json.help.usage_errors import patch_typer_errors

__all__ = ["patch_typer_errors"]
