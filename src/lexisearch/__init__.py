"""In-memory lexical search engine with a trie term dictionary and BM25 ranking."""

__version__ = "0.1.0"
