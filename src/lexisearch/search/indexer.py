"""Index construction for a fixed document collection.

Indexing runs once, before any query. The resulting :class:`SearchIndex` is
never mutated afterwards, so concurrent readers need no locking.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import time

from lexisearch.search.analyzers import Analyzer, get_analyzer
from lexisearch.search.document_store import DocumentStore
from lexisearch.search.postings import PostingList
from lexisearch.search.stats import CorpusStats
from lexisearch.search.trie import Trie


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchIndex:
    """Term dictionary plus the corpus statistics derived while building it."""

    trie: Trie
    store: DocumentStore
    stats: CorpusStats

    @property
    def document_count(self) -> int:
        return self.stats.document_count

    @property
    def average_length(self) -> float:
        return self.stats.average_length

    @property
    def vocabulary_size(self) -> int:
        return len(self.trie)

    def postings(self, term: str) -> PostingList | None:
        return self.trie.postings(term)

    def document_frequency(self, term: str) -> int:
        return self.trie.document_frequency(term)

    def term_frequency(self, doc_id: int, term: str) -> int:
        return self.trie.term_frequency(doc_id, term)

    def document_length(self, doc_id: int) -> int:
        return self.store.document_length(doc_id)


def build_index(store: DocumentStore, analyzer: Analyzer | None = None) -> SearchIndex:
    """Insert every term occurrence of every document into a new trie."""

    active = analyzer or get_analyzer()
    start = time.perf_counter()
    trie = Trie()
    for doc_id, text in store:
        for token in active(text):
            trie.insert(token.text, doc_id)

    stats = CorpusStats.from_lengths(store.lengths)
    logger.info(
        "Index built: %d documents, %d terms, avgdl=%.3f in %.3fs",
        stats.document_count,
        len(trie),
        stats.average_length,
        time.perf_counter() - start,
        extra={"documents": stats.document_count, "vocabulary": len(trie), "trie_nodes": trie.node_count},
    )
    return SearchIndex(trie=trie, store=store, stats=stats)
