"""String escaping for spa-json text.

Strings are written without surrounding quotes; only these seven characters
are escaped. Non-ASCII text passes through verbatim.
"""

from __future__ import annotations

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}

_TABLE = str.maketrans(_ESCAPES)


def escape_string(s: str) -> str:
    """Return ``s`` with the special characters replaced by escape sequences."""
    return s.translate(_TABLE)
