"""Unit tests for analyzers and token cursors."""

import pytest

from lexisearch.search.analyzers import (
    AnalyzerPipeline,
    LowercaseFilter,
    Token,
    TokenCursor,
    WhitespaceTokenizer,
    available_analyzers,
    count_tokens,
    get_analyzer,
)


@pytest.mark.unit
class TestWhitespaceTokenizer:
    def test_splits_on_spaces_tabs_and_newlines(self):
        tokens = list(WhitespaceTokenizer()("  the\tcat \n sat\r\n"))
        assert [t.text for t in tokens] == ["the", "cat", "sat"]
        assert [t.position for t in tokens] == [0, 1, 2]
        assert (tokens[0].start_char, tokens[0].end_char) == (2, 5)

    def test_keeps_punctuation_and_case(self):
        tokens = list(WhitespaceTokenizer()("Hello, World!"))
        assert [t.text for t in tokens] == ["Hello,", "World!"]

    def test_empty_text(self):
        assert list(WhitespaceTokenizer()("")) == []
        assert list(WhitespaceTokenizer()(" \t ")) == []


@pytest.mark.unit
class TestTokenCursor:
    def test_next_text_and_remaining(self):
        cursor = get_analyzer()("tf 3 cat dog")
        assert cursor.next_text() == "tf"
        assert cursor.next_text() == "3"
        assert cursor.remaining() == ["cat", "dog"]
        assert cursor.next_text() is None

    def test_independent_cursors(self):
        analyzer = get_analyzer()
        outer = analyzer("a b c")
        assert outer.next_text() == "a"
        inner = analyzer("x y")
        assert inner.remaining() == ["x", "y"]
        assert outer.remaining() == ["b", "c"]

    def test_is_an_iterator(self):
        cursor = TokenCursor([Token("a", 0, 0, 1)])
        assert iter(cursor) is cursor
        assert [t.text for t in cursor] == ["a"]


@pytest.mark.unit
class TestAnalyzerRegistry:
    def test_default_is_whitespace_without_normalization(self):
        assert get_analyzer()("The CAT").remaining() == ["The", "CAT"]
        assert get_analyzer(None)("x").remaining() == ["x"]

    def test_lowercase_analyzer(self):
        assert get_analyzer("lowercase")("The CAT sat").remaining() == ["the", "cat", "sat"]

    def test_name_is_case_insensitive(self):
        assert get_analyzer("WhiteSpace")("A").remaining() == ["A"]

    def test_unknown_analyzer(self):
        with pytest.raises(ValueError, match="Unknown analyzer 'stemmed'"):
            get_analyzer("stemmed")

    def test_available_analyzers(self):
        assert available_analyzers() == ["lowercase", "whitespace"]

    def test_pipeline_applies_filters(self):
        pipeline = AnalyzerPipeline(WhitespaceTokenizer(), [LowercaseFilter()])
        tokens = list(pipeline("AbC def"))
        assert [t.text for t in tokens] == ["abc", "def"]
        assert tokens[0].start_char == 0

    def test_count_tokens(self):
        assert count_tokens(get_analyzer(), " one  two three ") == 3
        assert count_tokens(get_analyzer(), "") == 0
