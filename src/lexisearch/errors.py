"""Exception hierarchy shared by the search engine and its command surface."""


class LexiSearchError(Exception):
    """Base class for all lexisearch errors."""


class CorpusError(LexiSearchError):
    """The document source is missing, unreadable or empty."""


class DocumentNotFoundError(CorpusError, LookupError):
    """A document id outside ``[0, document_count)`` was requested."""

    def __init__(self, doc_id: int, document_count: int) -> None:
        super().__init__(f"Document {doc_id} not found (valid ids: 0..{document_count - 1})")
        self.doc_id = doc_id
        self.document_count = document_count


class CommandError(LexiSearchError, ValueError):
    """Malformed interactive input; reported to the user, never fatal."""
