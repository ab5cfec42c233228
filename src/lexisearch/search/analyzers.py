"""Analyzer utilities for the lexical search stack.

Analyzers turn raw document or query text into terms. The reference analyzer
splits on whitespace and performs no normalization at all; the term dictionary
treats terms as opaque keys, so any case folding has to happen here.

Every call returns a fresh :class:`TokenCursor`, an explicit iterator over the
tokens of one piece of text. Nested tokenizations therefore never share state.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
import re
from typing import Protocol


@dataclass
class Token:
    """Represents a token emitted by analyzers."""

    text: str
    position: int
    start_char: int
    end_char: int

    def copy_with(self, **updates: object) -> Token:
        data = {
            "text": self.text,
            "position": self.position,
            "start_char": self.start_char,
            "end_char": self.end_char,
        }
        data.update(updates)
        return Token(**data)  # type: ignore[arg-type]


class TokenCursor:
    """Explicit cursor over the tokens of one text."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = iter(tokens)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        return next(self._tokens)

    def next_text(self) -> str | None:
        """Return the next token's text, or None when the cursor is exhausted."""
        token = next(self._tokens, None)
        return token.text if token is not None else None

    def remaining(self) -> list[str]:
        """Consume the cursor and return the texts of all tokens left."""
        return [token.text for token in self._tokens]


class Analyzer(Protocol):
    """Protocol implemented by analyzers."""

    def __call__(self, text: str) -> TokenCursor:  # pragma: no cover - interface definition
        ...


class Tokenizer(Protocol):
    """Protocol implemented by tokenizers."""

    def __call__(self, text: str) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class TokenFilter(Protocol):
    """Protocol implemented by token filters."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class WhitespaceTokenizer:
    """Splits text on runs of spaces, tabs and line breaks."""

    def __init__(self, pattern: str = r"[^ \t\r\n]+") -> None:
        self.pattern = re.compile(pattern)

    def __call__(self, text: str) -> Iterator[Token]:
        for position, match in enumerate(self.pattern.finditer(text)):
            yield Token(
                text=match.group(0),
                position=position,
                start_char=match.start(),
                end_char=match.end(),
            )


class LowercaseFilter:
    """Filter that lowercases token text."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if token.text.islower():
                yield token
            else:
                yield token.copy_with(text=token.text.lower())


class AnalyzerPipeline:
    """Composable analyzer pipeline (tokenizer + filters)."""

    def __init__(self, tokenizer: Tokenizer, filters: Sequence[TokenFilter] | None = None) -> None:
        self.tokenizer = tokenizer
        self.filters = list(filters or [])

    def __call__(self, text: str) -> TokenCursor:
        stream: Iterable[Token] = self.tokenizer(text)
        for token_filter in self.filters:
            stream = token_filter(stream)
        return TokenCursor(stream)


def count_tokens(analyzer: Analyzer, text: str) -> int:
    return sum(1 for _ in analyzer(text))


_ANALYZER_FACTORIES: dict[str, Callable[[], Analyzer]] = {
    "whitespace": lambda: AnalyzerPipeline(WhitespaceTokenizer()),
    "lowercase": lambda: AnalyzerPipeline(WhitespaceTokenizer(), [LowercaseFilter()]),
}


def available_analyzers() -> list[str]:
    return sorted(_ANALYZER_FACTORIES)


def get_analyzer(name: str | None = None) -> Analyzer:
    """Return analyzer by name, defaulting to the whitespace analyzer."""

    if name is None:
        return _ANALYZER_FACTORIES["whitespace"]()
    normalized = name.lower()
    if normalized not in _ANALYZER_FACTORIES:
        msg = f"Unknown analyzer '{name}'. Available: {available_analyzers()}"
        raise ValueError(msg)
    return _ANALYZER_FACTORIES[normalized]()
