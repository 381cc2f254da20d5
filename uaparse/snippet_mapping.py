"""Mapping from sets of mandatory snippets to the expressions needing them."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

Expression = TypeVar("Expression", bound=Hashable)


@dataclass(eq=False)
class _TrieNode(Generic[Expression]):
    transitions: dict[int, _TrieNode[Expression]] = field(default_factory=dict)
    expressions: set[Expression] = field(default_factory=set)


class SnippetMapping(Generic[Expression]):
    """Finds the expressions whose mandatory snippets are all present."""

    def __init__(self) -> None:
        self._root: _TrieNode[Expression] = _TrieNode()

    def add_mapping(self, snippets: Iterable[int], expression: Expression) -> None:
        """Add ``expression``, which needs every snippet id in ``snippets``."""
        node = self._root
        for snippet in sorted(set(snippets)):
            node = node.transitions.setdefault(snippet, _TrieNode())
        node.expressions.add(expression)

    def get_expressions(self, snippets: Iterable[int]) -> set[Expression]:
        """Return the expressions that need no snippet outside ``snippets``."""
        ordered = tuple(sorted(set(snippets)))
        found: set[Expression] = set()
        self._collect(self._root, ordered, 0, found)
        return found

    def _collect(
        self,
        node: _TrieNode[Expression],
        snippets: tuple[int, ...],
        start: int,
        found: set[Expression],
    ) -> None:
        found.update(node.expressions)
        for next_start, snippet in enumerate(snippets[start:], start + 1):
            child = node.transitions.get(snippet)
            if child is not None:
                self._collect(child, snippets, next_start, found)