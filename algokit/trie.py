"""A trie of lowercase words."""

from __future__ import annotations

import string
from collections import deque
from dataclasses import dataclass, field

_ALPHABET = frozenset(string.ascii_lowercase)


def _check_word(word: str) -> None:
    invalid = set(word) - _ALPHABET
    if invalid:
        raise ValueError(f"only lowercase letters a-z are allowed, got {sorted(invalid)}")


@dataclass(eq=False)
class _TrieNode:
    char: str
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_end: bool = False


class Trie:
    """Prefix tree of words made of the letters ``a`` to ``z``."""

    def __init__(self) -> None:
        self._root = _TrieNode("/")

    def insert(self, word: str) -> None:
        """Add *word* to the trie."""
        _check_word(word)
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode(char))
        node.is_end = True

    def _find(self, text: str) -> _TrieNode | None:
        node: _TrieNode | None = self._root
        for char in text:
            assert node is not None
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._find(word)
        return node is not None and node.is_end

    def has_prefix(self, prefix: str) -> bool:
        """True if some inserted word starts with *prefix*."""
        return self._find(prefix) is not None

    def level_order(self) -> list[str]:
        """Letters of all nodes below the root, level by level, alphabetically."""
        result: list[str] = []
        queue: deque[_TrieNode] = deque([self._root])
        while queue:
            node = queue.popleft()
            for char in sorted(node.children):
                child = node.children[char]
                result.append(child.char)
                queue.append(child)
        return result