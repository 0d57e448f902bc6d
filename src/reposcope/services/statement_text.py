"""Statement rendering — reconstruct a statement's source text from tokens.

javalang has no pretty-printer, so a statement is rendered by locating its
first token, scanning forward for the statement's syntactic extent and
joining the tokens back with Java-like spacing.  Comments are dropped by the
tokenizer and so never appear in the rendering.
"""

from __future__ import annotations

from typing import Sequence

from javalang import tree
from javalang.tokenizer import BasicType, Identifier, JavaToken

from reposcope.services.java_parser import ParsedUnit

_OPENERS = frozenset({"(", "[", "{"})
_CLOSERS = frozenset({")", "]", "}"})
_TYPE_KEYWORDS = frozenset({"class", "interface", "enum"})

_NO_SPACE_BEFORE = frozenset({")", "]", ";", ",", ".", "::"})
_NO_SPACE_AFTER = frozenset({"(", "[", ".", "::", "@", "!", "~"})

_FALLBACK_KEYWORDS: dict[type, str] = {
    tree.IfStatement: "if",
    tree.WhileStatement: "while",
    tree.ForStatement: "for",
    tree.DoStatement: "do",
    tree.SwitchStatement: "switch",
    tree.TryStatement: "try",
}


def render_statement(unit: ParsedUnit, statement: tree.Statement) -> str:
    """Return the source text of ``statement`` as found in ``unit``."""
    start = unit.token_index(getattr(statement, "position", None))
    if start is None:
        return _FALLBACK_KEYWORDS.get(type(statement), type(statement).__name__)
    end = statement_end(unit.tokens, start)
    return join_tokens(unit.tokens[start:end])


def normalize(text: str) -> str:
    """Whitespace-insensitive form of a rendering, for comparisons."""
    return "".join(text.split())


# ── Extent scanning ─────────────────────────────────────────────────────────


def statement_end(tokens: Sequence[JavaToken], start: int) -> int:
    """Index one past the last token of the statement beginning at ``start``."""
    n = len(tokens)
    if start >= n:
        return n
    value = tokens[start].value

    if value == "{":
        return _skip_balanced(tokens, start)

    if value == ";":
        return start + 1

    if value == "if":
        j = _skip_balanced(tokens, start + 1)
        j = statement_end(tokens, j)
        if j < n and tokens[j].value == "else":
            j = statement_end(tokens, j + 1)
        return j

    if value in ("while", "for", "switch", "synchronized"):
        j = _skip_balanced(tokens, start + 1)
        return statement_end(tokens, j)

    if value == "do":
        j = statement_end(tokens, start + 1)
        if j < n and tokens[j].value == "while":
            j = _skip_balanced(tokens, j + 1)
        if j < n and tokens[j].value == ";":
            j += 1
        return j

    if value == "try":
        j = start + 1
        if j < n and tokens[j].value == "(":
            j = _skip_balanced(tokens, j)
        j = _skip_balanced(tokens, j)
        while j < n and tokens[j].value == "catch":
            j = _skip_balanced(tokens, j + 1)
            j = _skip_balanced(tokens, j)
        if j < n and tokens[j].value == "finally":
            j = _skip_balanced(tokens, j + 1)
        return j

    if isinstance(tokens[start], Identifier) and start + 1 < n and tokens[start + 1].value == ":":
        return statement_end(tokens, start + 2)

    return _simple_statement_end(tokens, start)


def _skip_balanced(tokens: Sequence[JavaToken], start: int) -> int:
    """Index one past the bracket that closes the opener at ``start``."""
    n = len(tokens)
    if start >= n or tokens[start].value not in _OPENERS:
        return start
    depth = 0
    for j in range(start, n):
        value = tokens[j].value
        if value in _OPENERS:
            depth += 1
        elif value in _CLOSERS:
            depth -= 1
            if depth == 0:
                return j + 1
    return n


def _simple_statement_end(tokens: Sequence[JavaToken], start: int) -> int:
    """End of a ``;``-terminated statement or of a local type declaration."""
    n = len(tokens)
    depth = 0
    declares_type = False
    for j in range(start, n):
        value = tokens[j].value
        if depth == 0 and value in _TYPE_KEYWORDS and (j == start or tokens[j - 1].value != "."):
            declares_type = True
        if value in _OPENERS:
            depth += 1
        elif value in _CLOSERS:
            if depth == 0:
                # closing brace of the enclosing block
                return j
            depth -= 1
            if depth == 0 and value == "}" and declares_type:
                return j + 1
        elif value == ";" and depth == 0:
            return j + 1
    return n


# ── Joining ─────────────────────────────────────────────────────────────────


def join_tokens(tokens: Sequence[JavaToken]) -> str:
    """Concatenate token values with conventional Java spacing."""
    parts: list[str] = []
    prev: JavaToken | None = None
    prefix_operator = False
    for tok in tokens:
        if prev is not None and not prefix_operator and _space_between(prev, tok):
            parts.append(" ")
        prefix_operator = tok.value in ("++", "--") and not _ends_operand(prev)
        parts.append(tok.value)
        prev = tok
    return "".join(parts)


def _ends_operand(tok: JavaToken | None) -> bool:
    return tok is not None and (isinstance(tok, Identifier) or tok.value in (")", "]"))


def _space_between(prev: JavaToken, tok: JavaToken) -> bool:
    if prev.value in _NO_SPACE_AFTER or tok.value in _NO_SPACE_BEFORE:
        return False
    if tok.value == "(":
        return not (isinstance(prev, Identifier) or prev.value in ("this", "super"))
    if tok.value == "[":
        return not (isinstance(prev, (Identifier, BasicType)) or prev.value in (")", "]"))
    if tok.value in ("++", "--"):
        return not _ends_operand(prev)
    return True
