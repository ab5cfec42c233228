"""BM25 query evaluation over a built search index."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import time

from lexisearch.observability.context import query_context
from lexisearch.search.analyzers import Analyzer, get_analyzer
from lexisearch.search.indexer import SearchIndex
from lexisearch.search.models import ScoredDocument
from lexisearch.search.stats import DEFAULT_B, DEFAULT_K1, bm25_score, calculate_idf
from lexisearch.search.topk import BoundedTopK


logger = logging.getLogger(__name__)

DEFAULT_MAX_QUERY_TERMS = 32


@dataclass(frozen=True)
class QueryTerms:
    """Distinct terms from the leading tokens of a query, in first-seen order."""

    terms: tuple[str, ...]
    dropped: int = 0

    @classmethod
    def empty(cls) -> QueryTerms:
        return cls(())

    def is_empty(self) -> bool:
        return not self.terms


class BM25SearchEngine:
    """Rank documents of a :class:`SearchIndex` against keyword queries."""

    def __init__(
        self,
        index: SearchIndex,
        analyzer: Analyzer | None = None,
        *,
        k1: float = DEFAULT_K1,
        b: float = DEFAULT_B,
        max_query_terms: int = DEFAULT_MAX_QUERY_TERMS,
    ) -> None:
        if max_query_terms < 1:
            raise ValueError(f"max_query_terms must be >= 1, got {max_query_terms}")
        self.index = index
        self.analyzer = analyzer or get_analyzer()
        self.k1 = k1
        self.b = b
        self.max_query_terms = max_query_terms

    def tokenize_query(self, text: str) -> QueryTerms:
        """Split query text into terms.

        Only the first ``max_query_terms`` tokens are considered; repeats among
        them collapse into one term, so scoring runs over the set of kept terms.
        """

        terms: list[str] = []
        seen: set[str] = set()
        dropped = 0
        for position, token in enumerate(self.analyzer(text)):
            if position >= self.max_query_terms:
                dropped += 1
                continue
            if token.text in seen:
                continue
            seen.add(token.text)
            terms.append(token.text)

        if dropped:
            logger.info("Query truncated to %d tokens, ignored %d", self.max_query_terms, dropped)
        return QueryTerms(tuple(terms), dropped)

    def idf(self, term: str) -> float:
        return calculate_idf(self.index.document_frequency(term), self.index.document_count)

    def accumulate(self, query: QueryTerms) -> dict[int, float]:
        """Return the BM25 score of every document sharing at least one query term.

        Keys keep candidate discovery order.
        """

        avg_length = self.index.average_length
        idf_by_term: dict[str, float] = {}
        doc_scores: dict[int, float] = {}

        for term in query.terms:
            postings = self.index.postings(term)
            if postings is None:
                continue
            if term not in idf_by_term:
                idf_by_term[term] = self.idf(term)
            idf = idf_by_term[term]
            for posting in postings.postings():
                contribution = bm25_score(
                    idf=idf,
                    tf=posting.frequency,
                    doc_length=self.index.document_length(posting.doc_id),
                    avg_doc_length=avg_length,
                    k1=self.k1,
                    b=self.b,
                )
                doc_scores[posting.doc_id] = doc_scores.get(posting.doc_id, 0.0) + contribution
        return doc_scores

    @staticmethod
    def rank(doc_scores: dict[int, float], *, limit: int) -> list[ScoredDocument]:
        """Select the ``limit`` best candidates in descending score order."""

        if limit <= 0:
            return []
        selector = BoundedTopK(limit)
        for doc_id, doc_score in doc_scores.items():
            selector.insert(doc_score, doc_id)
        return list(selector.drain())

    def score(self, query: QueryTerms, *, limit: int) -> list[ScoredDocument]:
        """Return at most ``limit`` documents in descending BM25 score order."""

        if query.is_empty() or limit <= 0:
            return []
        return self.rank(self.accumulate(query), limit=limit)

    def search(self, text: str, *, limit: int) -> list[ScoredDocument]:
        """Tokenize ``text`` and rank matching documents."""

        with query_context():
            start = time.perf_counter()
            query = self.tokenize_query(text)
            doc_scores = self.accumulate(query) if limit > 0 else {}
            results = self.rank(doc_scores, limit=limit)
            logger.debug(
                "Evaluated query with %d terms: %d candidates, %d results in %.3fms",
                len(query.terms),
                len(doc_scores),
                len(results),
                (time.perf_counter() - start) * 1000,
                extra={
                    "terms": len(query.terms),
                    "dropped_terms": query.dropped,
                    "candidates": len(doc_scores),
                    "limit": limit,
                },
            )
            return results
