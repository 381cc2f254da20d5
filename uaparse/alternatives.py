"""Expansion of regular-expression alternatives into separate expressions.

For example ``(Something|Other)/\\d+`` expands to ``(Something)/\\d+`` and
``(Other)/\\d+``.  Optional groups, negative lookaheads and character classes
are kept as they are.
"""

from __future__ import annotations

from .stringutils import get_closing_parenthesis, is_optional_operator

_Span = tuple[int, int]


def expand_alternatives(expression: str) -> list[str]:
    """Return every combination of the alternatives in ``expression``."""
    out: list[str] = []
    _expand(expression, 0, len(expression), "", (), out)
    return out


def _starts_with(text: str, pos: int, end: int, operator: str) -> bool:
    return pos + len(operator) <= end and text.startswith(operator, pos)


def _expand(
    text: str,
    start: int,
    end: int,
    prefix: str,
    pending: tuple[_Span, ...],
    out: list[str],
) -> None:
    while True:
        if _expand_root_alternatives(text, start, end, prefix, pending, out):
            return
        prefix_or_none = _expand_root_parentheses(
            text, start, end, prefix, pending, out
        )
        if prefix_or_none is None:
            return
        prefix = prefix_or_none
        if not pending:
            out.append(prefix)
            return
        (start, end), pending = pending[-1], pending[:-1]


def _expand_root_alternatives(
    text: str,
    start: int,
    end: int,
    prefix: str,
    pending: tuple[_Span, ...],
    out: list[str],
) -> bool:
    level = 0
    escaped = False
    pos = start
    while pos < end:
        char = text[pos]
        if not escaped:
            if char == "(":
                level += 1
            elif char == ")":
                if level > 0:
                    level -= 1
            elif char == "[":
                closing = get_closing_parenthesis(text, pos, end)
                if closing is not None:
                    pos = closing[0]
                    continue
            if level == 0 and char == "|":
                _expand(text, start, pos, prefix, pending, out)
                _expand(text, pos + 1, end, prefix, pending, out)
                return True
        escaped = char == "\\" and not escaped
        pos += 1
    return False


def _expand_root_parentheses(
    text: str,
    start: int,
    end: int,
    prefix: str,
    pending: tuple[_Span, ...],
    out: list[str],
) -> str | None:
    """Expand the first root-level group; return the grown prefix if none."""
    level = 0
    escaped = False
    pos = start
    while pos < end:
        char = text[pos]
        if not escaped:
            if char == "(":
                level += 1
                if level == 1:
                    closing = get_closing_parenthesis(text, pos, end)
                    if closing is None:
                        level -= 1
                        pos += 1
                        continue
                    close = closing[0]
                    if is_optional_operator(text, close + 1, end) or _starts_with(
                        text, pos + 1, end, "?!"
                    ):
                        pos = close
                        continue

                    inner_start = pos + 1
                    if _starts_with(text, inner_start, end, "?:"):
                        inner_start += 2
                    _expand(
                        text,
                        inner_start,
                        close,
                        prefix + text[start:inner_start],
                        pending + ((close, end),),
                        out,
                    )
                    return None
            elif char == ")":
                if level > 0:
                    level -= 1
            elif char == "[":
                closing = get_closing_parenthesis(text, pos, end)
                if closing is not None:
                    pos = closing[0]
                    continue
        escaped = char == "\\" and not escaped
        pos += 1
    return prefix + text[start:pos]