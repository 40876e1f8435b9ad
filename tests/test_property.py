"""Property-based tests using Hypothesis for emitter invariants.

These tests verify invariants that must hold for *any* value, not just
specific examples:
- escaping is lossless (checked against an unescaper defined here)
- primitives are single tokens that parse back with int()/float()
- closing brackets sit one level left of their children
- indentation bookkeeping returns to zero after a balanced value
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from spa_json.engine.emitter import TextEmitter, to_string
from spa_json.engine.escape import escape_string
from spa_json.engine.producers import serialize_value

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

_UNESCAPES = {'"': '"', "\\": "\\", "n": "\n", "r": "\r", "t": "\t", "b": "\b", "f": "\f"}

special_heavy_text = st.text(
    alphabet=st.one_of(st.sampled_from(list('"\\\n\r\t\b\f')), st.characters()),
    max_size=40,
)

json_like = st.recursive(
    st.one_of(
        st.none(),
        st.booleans(),
        st.integers(),
        st.floats(allow_nan=False),
        st.text(max_size=10),
    ),
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(st.text(max_size=5), children, max_size=4),
    ),
    max_leaves=20,
)


def unescape(text: str) -> str:
    """Reverse escape_string; test oracle only."""
    out: list[str] = []
    chars = iter(text)
    for c in chars:
        if c == "\\":
            out.append(_UNESCAPES[next(chars)])
        else:
            out.append(c)
    return "".join(out)


# ---------------------------------------------------------------------------
# Escaping
# ---------------------------------------------------------------------------
class TestEscaping:
    @given(s=special_heavy_text)
    @settings(max_examples=200)
    def test_escape_round_trips(self, s: str) -> None:
        assert unescape(escape_string(s)) == s

    @given(s=special_heavy_text)
    def test_escaped_text_has_no_raw_newlines(self, s: str) -> None:
        escaped = to_string(s)
        assert "\n" not in escaped
        assert "\r" not in escaped


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------
class TestPrimitives:
    @given(n=st.integers())
    def test_integers_round_trip(self, n: int) -> None:
        text = to_string(n)
        assert int(text) == n
        assert text == text.strip()

    @given(x=st.floats(allow_nan=False, allow_infinity=False))
    def test_floats_round_trip(self, x: float) -> None:
        text = to_string(x)
        assert float(text) == x
        assert not any(c in text for c in " []{}\n")

    @given(b=st.booleans())
    def test_booleans(self, b: bool) -> None:
        assert to_string(b) in ("true", "false")


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
class TestLayout:
    @given(
        items=st.lists(st.integers(), min_size=1, max_size=5),
        depth=st.integers(min_value=0, max_value=6),
    )
    def test_closing_bracket_one_level_left_of_children(self, items: list[int], depth: int) -> None:
        value: object = items
        for _ in range(depth):
            value = [value]
        lines = to_string(value).split("\n")

        child_indent = 2 * (depth + 1)
        children = [line for line in lines if line.strip() not in ("[", "]")]
        assert children
        assert all(len(line) - len(line.lstrip(" ")) == child_indent for line in children)

        closers = [line for line in lines if line.strip() == "]"]
        assert [len(line) - len(line.lstrip(" ")) for line in closers] == [
            2 * level for level in range(depth, -1, -1)
        ]

    @given(value=json_like)
    @settings(max_examples=100)
    def test_indentation_returns_to_start(self, value: object) -> None:
        emitter = TextEmitter()
        serialize_value(value, emitter)
        assert emitter.indent_level == 0
        assert emitter.depth == 0
        assert emitter.finish() == to_string(value)

    @given(value=json_like)
    def test_indentation_is_always_even(self, value: object) -> None:
        for line in to_string(value).split("\n"):
            indent = len(line) - len(line.lstrip(" "))
            # string content may itself start with spaces; only structural lines matter
            if line.strip() in ("]", "}"):
                assert indent % 2 == 0
