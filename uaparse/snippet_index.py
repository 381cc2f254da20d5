"""Index of the snippets that an expression needs in order to match.

In ``(a)?(bc)+.* /`` the text must contain ``bc`` and `` /`` for the
expression to match, while ``a`` is optional.  A :class:`SnippetIndex`
collects such mandatory snippets from expressions and finds quickly which
of them occur in an input string.
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from itertools import islice

from .stringutils import get_closing_parenthesis, is_optional_operator

_ALNUM = frozenset(string.ascii_letters + string.digits)
_ALWAYS_SNIPPET = frozenset(" _-/,;=%")
_MIN_SNIPPET_LENGTH = 3


@dataclass(eq=False)
class _TrieNode:
    parent: _TrieNode | None = None
    transitions: dict[str, _TrieNode] = field(default_factory=dict)
    snippet_id: int = 0


def _key(char: str) -> str:
    """Fold ASCII upper-case letters, leaving every other character alone."""
    return char.lower() if "A" <= char <= "Z" else char


def _is_snippet_char(char: str, escaped: bool) -> bool:
    if char in _ALNUM:
        # Escaped letters and digits are classes such as \d or \w.
        return not escaped
    if char in _ALWAYS_SNIPPET:
        return True
    # Punctuation counts only when escaped, e.g. \. or \(.
    return escaped


def _skip_block(text: str, pos: int, end: int) -> int:
    """Return the position to continue from when a block can be skipped."""
    char = text[pos]
    if char not in "([{":
        return pos
    closing = get_closing_parenthesis(text, pos, end)
    if closing is None:
        return pos
    close, has_alternatives = closing
    if (
        char == "{"
        or has_alternatives
        or (char == "(" and is_optional_operator(text, close + 1, end))
    ):
        # Count blocks, blocks with alternatives and optional groups
        # contribute no mandatory snippets.
        return close
    return pos


def _has_root_level_alternatives(text: str) -> bool:
    end = len(text)
    level = 0
    escaped = False
    pos = 0
    while pos < end:
        char = text[pos]
        if not escaped:
            if char == "(":
                level += 1
            elif char == ")":
                level -= 1
            elif char == "|" and level == 0:
                return True
            elif char == "[":
                # Character-level alternatives such as [a(b|c] do not count.
                closing = get_closing_parenthesis(text, pos, end)
                if closing is not None:
                    pos = closing[0]
        escaped = text[pos] == "\\" and not escaped
        pos += 1
    return False


class SnippetIndex:
    """Registers mandatory snippets of expressions and finds them in text.

    Snippets are compared case-insensitively for ASCII letters.  Snippet
    identifiers are positive integers handed out in registration order;
    sets of identifiers are returned as sorted tuples.
    """

    def __init__(self) -> None:
        self._root = _TrieNode()
        self._max_snippet_id = 0

    def register_snippets(self, expression: str) -> tuple[int, ...]:
        """Register the mandatory snippets of ``expression``; return their ids.

        An expression with alternatives at its root level has no mandatory
        snippets.  Snippets shorter than three characters are ignored.
        """
        found: set[int] = set()
        if _has_root_level_alternatives(expression):
            return ()

        end = len(expression)
        snippet_start = 0
        node: _TrieNode | None = None
        escaped = False
        pos = 0
        while pos < end:
            char = expression[pos]
            if _is_snippet_char(char, escaped):
                if node is None:
                    snippet_start = pos
                    node = self._root
                key = _key(char)
                next_node = node.transitions.get(key)
                if next_node is None:
                    next_node = _TrieNode(parent=node)
                    node.transitions[key] = next_node
                node = next_node
            elif node is not None:
                snippet_end = pos
                if is_optional_operator(expression, pos, end):
                    # The last character is optional, as in a? or a*.
                    snippet_end -= 1
                    node = node.parent
                self._register(snippet_start, snippet_end, node, found)
                node = None

            if not escaped:
                pos = _skip_block(expression, pos, end)

            escaped = expression[pos] == "\\" and not escaped
            pos += 1

        if node is not None:
            self._register(snippet_start, pos, node, found)

        return tuple(sorted(found))

    def _register(
        self, start: int, end: int, node: _TrieNode | None, found: set[int]
    ) -> None:
        if node is None or end - start < _MIN_SNIPPET_LENGTH:
            return
        if not node.snippet_id:
            self._max_snippet_id += 1
            node.snippet_id = self._max_snippet_id
        found.add(node.snippet_id)

    def get_snippets(self, text: str) -> tuple[int, ...]:
        """Return the ids of all registered snippets that occur in ``text``."""
        found: set[int] = set()
        for start in range(len(text)):
            node = self._root
            for char in islice(text, start, None):
                node = node.transitions.get(_key(char))
                if node is None:
                    break
                if node.snippet_id:
                    found.add(node.snippet_id)
        return tuple(sorted(found))

    def registered_snippets(self) -> dict[int, str]:
        """Map every registered snippet id to its (case-folded) text."""
        result: dict[int, str] = {}
        stack: list[tuple[_TrieNode, str]] = [(self._root, "")]
        while stack:
            node, text = stack.pop()
            if node.snippet_id:
                result[node.snippet_id] = text
            stack.extend(
                (child, text + char) for char, child in node.transitions.items()
            )
        return result