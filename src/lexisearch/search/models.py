"""Search data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Posting:
    """A posting records how often a term occurs in one document."""

    doc_id: int
    frequency: int = 1


@dataclass(frozen=True)
class ScoredDocument:
    """Represents a scored document produced by the BM25 engine."""

    doc_id: int
    score: float


@dataclass(frozen=True)
class Document:
    """A document as held by the document store."""

    doc_id: int
    text: str
    length: int
