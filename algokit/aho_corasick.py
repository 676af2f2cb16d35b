"""Aho-Corasick multi-pattern matching over lowercase text."""

from __future__ import annotations

import string
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

_ALPHABET = frozenset(string.ascii_lowercase)


def _check(text: str) -> None:
    invalid = set(text) - _ALPHABET
    if invalid:
        raise ValueError(f"only lowercase letters a-z are allowed, got {sorted(invalid)}")


@dataclass(eq=False)
class _AcNode:
    children: dict[str, _AcNode] = field(default_factory=dict)
    fail: _AcNode | None = None
    length: int = 0


class AhoCorasick:
    """Automaton that finds every occurrence of a set of patterns in one pass."""

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self._root = _AcNode()
        self._built = False
        for pattern in patterns:
            self.add(pattern)

    def add(self, pattern: str) -> None:
        """Add a non-empty pattern of lowercase letters."""
        if not pattern:
            raise ValueError("pattern is empty")
        _check(pattern)
        node = self._root
        for char in pattern:
            node = node.children.setdefault(char, _AcNode())
        node.length = len(pattern)
        self._built = False

    def build(self) -> None:
        """Compute the failure links, breadth first."""
        root = self._root
        root.fail = None
        queue: deque[_AcNode] = deque([root])
        while queue:
            node = queue.popleft()
            for char, child in node.children.items():
                child.fail = root
                if node is not root:
                    fallback = node.fail
                    while fallback is not None:
                        target = fallback.children.get(char)
                        if target is not None:
                            child.fail = target
                            break
                        fallback = fallback.fail
                queue.append(child)
        self._built = True

    def find_all(self, text: str) -> list[tuple[int, str]]:
        """All matches as ``(start, pattern)``, by end position, longest first."""
        _check(text)
        if not self._built:
            self.build()
        root = self._root
        matches: list[tuple[int, str]] = []
        node = root
        for end, char in enumerate(text):
            while node is not root and char not in node.children:
                assert node.fail is not None
                node = node.fail
            node = node.children.get(char, root)
            candidate = node
            while candidate is not root:
                if candidate.length:
                    start = end - candidate.length + 1
                    matches.append((start, text[start : end + 1]))
                assert candidate.fail is not None
                candidate = candidate.fail
        return matches