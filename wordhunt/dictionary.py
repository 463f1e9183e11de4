"""Word dictionary stored as a character trie."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from os import PathLike

DEFAULT_DICTIONARY = "/usr/share/dict/words"

_WORD = re.compile(r"[A-Za-z]+")


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    end_of_word: bool = False


class Trie:
    """A set of words that also answers prefix queries."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> bool:
        """Add a word; return False if it was already present."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _Node())
        if node.end_of_word:
            return False
        node.end_of_word = True
        return True

    def _find(self, prefix: str) -> _Node | None:
        node = self._root
        for char in prefix:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def _has_prefix(self, prefix: str) -> bool:
        return self._find(prefix) is not None

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._find(word)
        return node is not None and node.end_of_word

    def words(self) -> Iterator[str]:
        """Yield every stored word, shorter prefixes first, children by character code."""

        def walk(node: _Node, prefix: str) -> Iterator[str]:
            if node.end_of_word:
                yield prefix
            for char in sorted(node.children):
                yield from walk(node.children[char], prefix + char)

        return walk(self._root, "")


def parse_words(text: str) -> list[str]:
    """Split text into runs of ASCII letters; anything else separates words."""
    return _WORD.findall(text)


def load_dictionary(path: str | PathLike[str]) -> Trie:
    """Build a trie from a word-list file. Raises OSError if it cannot be read."""
    with open(path, "rb") as handle:
        text = handle.read().decode("latin-1")
    return Trie(parse_words(text))