"""Substring search and simple string rewriting."""

from __future__ import annotations


def bm_search(text: str, pattern: str) -> int:
    """Find *pattern* in *text* with the bad-character rule; -1 if absent."""
    last_seen = {char: position for position, char in enumerate(pattern)}
    limit = len(text) - len(pattern)
    i = 0
    while i <= limit:
        j = len(pattern) - 1
        while j >= 0 and pattern[j] == text[i + j]:
            j -= 1
        if j < 0:
            return i
        seen = last_seen.get(text[i + j])
        if seen is not None and j - seen > 0:
            i += j - seen
        else:
            i += 1
    return -1


def brute_force_search(text: str, pattern: str) -> int:
    """Find *pattern* in *text* by checking every offset; -1 if absent or empty."""
    if not pattern or len(pattern) > len(text):
        return -1
    for start in range(len(text) - len(pattern) + 1):
        if text.startswith(pattern, start):
            return start
    return -1


def replace_space(text: str) -> str:
    """Replace every space with ``%20``."""
    return text.replace(" ", "%20")