"""Interactive command grammar: search, df, tf and exit."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import logging
import re

from lexisearch.errors import CommandError
from lexisearch.search.analyzers import TokenCursor, WhitespaceTokenizer
from lexisearch.search.bm25_engine import BM25SearchEngine
from lexisearch.search.indexer import SearchIndex


logger = logging.getLogger(__name__)

COMMANDS = ("search", "df", "tf", "exit")
_DOC_ID_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class CommandResult:
    """Lines to print for one input line, and whether the session should end."""

    output: list[str] = field(default_factory=list)
    exit: bool = False


class CommandProcessor:
    """Parse and execute one line of user input against a built index."""

    def __init__(self, index: SearchIndex, engine: BM25SearchEngine, *, limit: int) -> None:
        self.index = index
        self.engine = engine
        self.limit = limit
        self._tokenizer = WhitespaceTokenizer()
        self._handlers: dict[str, Callable[[TokenCursor], CommandResult]] = {
            "search": self._search,
            "df": self._df,
            "tf": self._tf,
            "exit": self._exit,
        }

    def execute(self, line: str) -> CommandResult:
        """Run one command; input errors become an ``Error:`` line, never an exception."""

        cursor = TokenCursor(self._tokenizer(line))
        command = cursor.next_text()
        if command is None:
            return CommandResult()

        name = command[1:] if command.startswith("/") else command
        handler = self._handlers.get(name)
        if handler is None:
            return CommandResult(
                [f"Unknown command: {command}", f"Available commands: {', '.join(COMMANDS)}"],
            )

        try:
            return handler(cursor)
        except CommandError as exc:
            logger.debug("Rejected %s command: %s", name, exc)
            return CommandResult([f"Error: {exc}"])

    def _search(self, cursor: TokenCursor) -> CommandResult:
        terms = cursor.remaining()
        if not terms:
            raise CommandError("Missing search terms. Usage: search <terms...>")

        results = self.engine.search(" ".join(terms), limit=self.limit)
        if not results:
            return CommandResult(["No results."])

        lines = []
        for rank, result in enumerate(results, start=1):
            document = self.index.store.get(result.doc_id)
            lines.append(f"{rank}. [doc {document.doc_id}] (score {result.score:.4f}) {document.text}")
        return CommandResult(lines)

    def _df(self, cursor: TokenCursor) -> CommandResult:
        term = cursor.next_text()
        if term is None:
            lines = [f"{word} {postings.document_count()}" for word, postings in self.index.trie.iter_terms()]
            return CommandResult(lines)
        return CommandResult([f"{term} {self.index.document_frequency(self._normalize(term))}"])

    def _tf(self, cursor: TokenCursor) -> CommandResult:
        raw_id = cursor.next_text()
        if raw_id is None:
            raise CommandError("Missing document ID. Usage: tf <doc_id> <term>")
        if not _DOC_ID_PATTERN.fullmatch(raw_id):
            raise CommandError(f"Document ID must be a non-negative integer, got '{raw_id}'")
        term = cursor.next_text()
        if term is None:
            raise CommandError("Missing term. Usage: tf <doc_id> <term>")

        doc_id = int(raw_id)
        frequency = self.index.term_frequency(doc_id, self._normalize(term))
        if frequency == 0:
            return CommandResult([f"Term '{term}' not found in document {doc_id}"])
        return CommandResult([f"Term '{term}' appears {frequency} time(s) in document {doc_id}"])

    def _exit(self, cursor: TokenCursor) -> CommandResult:
        return CommandResult(exit=True)

    def _normalize(self, term: str) -> str:
        # Lookups go through the same analyzer the documents were indexed with.
        return self.engine.analyzer(term).next_text() or term
