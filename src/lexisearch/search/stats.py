"""Statistical helpers for BM25 style scoring.

The functions here stay independent of the term dictionary so they can be
unit tested in isolation and reused by any index implementation.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import math


DEFAULT_K1 = 1.2
DEFAULT_B = 0.75


@dataclass(frozen=True)
class CorpusStats:
    """Aggregated length statistics for the whole document collection."""

    document_count: int
    total_terms: int

    @property
    def average_length(self) -> float:
        return average_document_length(self.document_count, self.total_terms)

    @classmethod
    def from_lengths(cls, lengths: Iterable[int]) -> CorpusStats:
        document_count = 0
        total_terms = 0
        for length in lengths:
            document_count += 1
            total_terms += max(length, 0)
        return cls(document_count=document_count, total_terms=total_terms)


def average_document_length(document_count: int, total_terms: int) -> float:
    """Return the mean document length, or 1.0 when it would be zero."""

    if document_count <= 0 or total_terms <= 0:
        return 1.0
    return total_terms / document_count


def calculate_idf(doc_freq: int, total_docs: int) -> float:
    """Return the inverse document frequency of a term.

    Unseen terms (``doc_freq == 0``) get the maximal weight ``ln(N + 1)``
    instead of hitting the logarithm's domain edge. For terms present in more
    than half of the corpus the value is negative, as in classic BM25.
    """

    if doc_freq <= 0:
        return math.log(total_docs + 1.0)
    return math.log((total_docs - doc_freq + 0.5) / (doc_freq + 0.5))


def bm25(tf: int, doc_length: int, avg_doc_length: float, *, k1: float = DEFAULT_K1, b: float = DEFAULT_B) -> float:
    """Compute the BM25 term weight without IDF."""

    if tf <= 0:
        return 0.0
    avg = avg_doc_length if avg_doc_length > 0 else 1.0
    denominator = tf + k1 * (1 - b + b * (doc_length / avg))
    return (tf * (k1 + 1)) / denominator


def bm25_score(
    *,
    idf: float,
    tf: int,
    doc_length: int,
    avg_doc_length: float,
    k1: float = DEFAULT_K1,
    b: float = DEFAULT_B,
) -> float:
    """Return the full BM25 contribution of one term to one document."""

    if tf <= 0:
        return 0.0
    return idf * bm25(tf, doc_length, avg_doc_length, k1=k1, b=b)
