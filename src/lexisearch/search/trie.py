"""Prefix-tree term dictionary.

Nodes live in a flat arena and refer to each other by index. Each node matches
one character; ``child`` leads to the next character of terms sharing the
prefix, while ``sibling`` links alternative characters at the same depth. A
node that terminates an inserted term owns a :class:`PostingList`.

Lookups follow child links on a matching character and sibling links on a
mismatch, so a lookup costs O(len(term) * alphabet) in the worst case and is
independent of vocabulary size.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from lexisearch.search.postings import PostingList


_ROOT = 0


@dataclass(slots=True)
class TrieNode:
    """One character position shared by every term with the same prefix."""

    value: str | None = None
    child: int | None = None
    sibling: int | None = None
    postings: PostingList | None = None


class Trie:
    """Term dictionary mapping each term to its posting list."""

    def __init__(self) -> None:
        self._nodes: list[TrieNode] = [TrieNode()]
        self._term_count = 0

    def _new_node(self) -> int:
        self._nodes.append(TrieNode())
        return len(self._nodes) - 1

    def insert(self, term: str, doc_id: int) -> None:
        """Record one occurrence of ``term`` in document ``doc_id``."""

        if not term:
            raise ValueError("Cannot index an empty term")

        index = _ROOT
        last = len(term) - 1
        position = 0
        while True:
            node = self._nodes[index]
            char = term[position]
            if node.value is None or node.value == char:
                node.value = char
                if position == last:
                    if node.postings is None:
                        node.postings = PostingList()
                        self._term_count += 1
                    node.postings.add(doc_id)
                    return
                if node.child is None:
                    node.child = self._new_node()
                index = node.child
                position += 1
            else:
                if node.sibling is None:
                    node.sibling = self._new_node()
                index = node.sibling

    def _find(self, term: str) -> TrieNode | None:
        if not term:
            return None

        index: int | None = _ROOT
        last = len(term) - 1
        position = 0
        while index is not None:
            node = self._nodes[index]
            if node.value == term[position]:
                if position == last:
                    return node
                index = node.child
                position += 1
            else:
                index = node.sibling
        return None

    def postings(self, term: str) -> PostingList | None:
        """Return the posting list for ``term`` or ``None`` when it was never indexed."""
        node = self._find(term)
        return node.postings if node is not None else None

    def document_frequency(self, term: str) -> int:
        postings = self.postings(term)
        return postings.document_count() if postings is not None else 0

    def term_frequency(self, doc_id: int, term: str) -> int:
        postings = self.postings(term)
        return postings.frequency_of(doc_id) if postings is not None else 0

    def iter_terms(self) -> Iterator[tuple[str, PostingList]]:
        """Yield every indexed term with its posting list, depth first."""

        stack: list[tuple[int, str]] = [(_ROOT, "")]
        while stack:
            index, prefix = stack.pop()
            node = self._nodes[index]
            if node.value is None:
                continue
            word = prefix + node.value
            if node.postings is not None:
                yield word, node.postings
            if node.sibling is not None:
                stack.append((node.sibling, prefix))
            if node.child is not None:
                stack.append((node.child, word))

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and self.postings(term) is not None

    def __len__(self) -> int:
        return self._term_count
