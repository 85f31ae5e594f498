"""Character trie with per-word result lists and prefix autocomplete."""

from __future__ import annotations

from typing import Any


class TrieNode:
    """Single labeled node in the trie."""

    __slots__ = ("label", "children", "is_terminal")

    def __init__(self, label: str = ""):
        self.label = label
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False


class Trie:
    """Prefix trie mapping each inserted word to the results stored for it.

    Words are lower-cased on the way in and on lookup.  Every ``insert``
    appends its result to the word's list, so inserting the same word twice
    keeps both results in insertion order.
    """

    def __init__(self):
        self.root = TrieNode()
        self.results_by_word: dict[str, list[Any]] = {}

    def insert(self, word: str, result: Any) -> None:
        word = _normalize(word)
        self.results_by_word.setdefault(word, []).append(result)
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode(ch)
            node = node.children[ch]
        node.is_terminal = True

    def search(self, word: str) -> list[list[Any]]:
        """Results for every inserted word that starts with ``word``.

        Returns one list of results per matching word, in depth-first order.
        A character with no matching child ends the walk with ``[]``; this
        is a prefix lookup, so words that merely contain ``word`` further in
        are not found.  The empty string matches everything.
        """
        word = _normalize(word)
        node = self._walk(word)
        if node is None:
            return []
        found: list[str] = []
        # the reached node contributes the last character itself
        prefix = word[:-1] if word else ""
        self._autocomplete(node, found, prefix)
        return [list(self.results_by_word[w]) for w in found]

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def _autocomplete(self, node: TrieNode, found: list[str], prefix: str) -> None:
        if node.is_terminal:
            found.append(prefix + node.label)
        for child in node.children.values():
            self._autocomplete(child, found, prefix + node.label)

    def __contains__(self, word: str) -> bool:
        node = self._walk(_normalize(word))
        return node is not None and node.is_terminal

    def __len__(self) -> int:
        return len(self.results_by_word)


def _normalize(word: str) -> str:
    if not isinstance(word, str):
        raise TypeError(f"expected str, got {type(word).__name__}")
    return word.lower()
