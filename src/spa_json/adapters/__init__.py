"""Protocol descriptions for third-party model types."""

from spa_json.adapters import pydantic_models

__all__ = ["pydantic_models"]
