"""Newline-delimited document collection held in memory."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import logging
from pathlib import Path

from lexisearch.errors import CorpusError, DocumentNotFoundError
from lexisearch.search.analyzers import Analyzer, count_tokens, get_analyzer
from lexisearch.search.models import Document


logger = logging.getLogger(__name__)


class DocumentStore:
    """Immutable list of documents addressed by their zero-based line number."""

    def __init__(self, texts: Iterable[str], analyzer: Analyzer | None = None) -> None:
        active = analyzer or get_analyzer()
        self._texts: tuple[str, ...] = tuple(text.strip() for text in texts)
        self._lengths: tuple[int, ...] = tuple(count_tokens(active, text) for text in self._texts)

    @classmethod
    def from_file(cls, path: Path | str, analyzer: Analyzer | None = None) -> DocumentStore:
        """Load one document per newline-terminated line; blank lines become empty documents.

        Raises:
            CorpusError: if the file cannot be read or holds no lines at all.
        """

        source = Path(path)
        try:
            with source.open(encoding="utf-8", newline="") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise CorpusError(f"Cannot open file: {source} ({exc})") from exc

        if not content:
            raise CorpusError(f"File is empty: {source}")

        lines = content.split("\n")
        if lines[-1] == "":
            lines.pop()
        store = cls(lines, analyzer)
        logger.debug("Loaded %d documents from %s", store.document_count(), source)
        return store

    def _check(self, doc_id: int) -> None:
        if not 0 <= doc_id < len(self._texts):
            raise DocumentNotFoundError(doc_id, len(self._texts))

    def document_count(self) -> int:
        return len(self._texts)

    def document_length(self, doc_id: int) -> int:
        self._check(doc_id)
        return self._lengths[doc_id]

    def document_text(self, doc_id: int) -> str:
        self._check(doc_id)
        return self._texts[doc_id]

    def get(self, doc_id: int) -> Document:
        self._check(doc_id)
        return Document(doc_id=doc_id, text=self._texts[doc_id], length=self._lengths[doc_id])

    @property
    def lengths(self) -> tuple[int, ...]:
        return self._lengths

    @property
    def max_line_length(self) -> int:
        """Character length of the longest trimmed document."""
        return max((len(text) for text in self._texts), default=0)

    def __len__(self) -> int:
        return len(self._texts)

    def __iter__(self) -> Iterator[tuple[int, str]]:
        return iter(enumerate(self._texts))
