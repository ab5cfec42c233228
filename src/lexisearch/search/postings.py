"""Posting list for a single term."""

from __future__ import annotations

from collections.abc import Iterator

from lexisearch.search.models import Posting


class PostingList:
    """Ordered mapping from document id to occurrence count.

    Entries keep their first-insertion order. Adding a document id that is
    already present bumps its count instead of appending a duplicate entry.
    """

    __slots__ = ("_counts",)

    def __init__(self) -> None:
        self._counts: dict[int, int] = {}

    def add(self, doc_id: int) -> None:
        """Record one more occurrence of the term in ``doc_id``."""
        self._counts[doc_id] = self._counts.get(doc_id, 0) + 1

    def frequency_of(self, doc_id: int) -> int:
        return self._counts.get(doc_id, 0)

    def document_count(self) -> int:
        return len(self._counts)

    def all_document_ids(self) -> list[int]:
        return list(self._counts)

    def postings(self) -> Iterator[Posting]:
        for doc_id, frequency in self._counts.items():
            yield Posting(doc_id=doc_id, frequency=frequency)

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._counts

    def __repr__(self) -> str:
        return f"PostingList({self._counts!r})"
