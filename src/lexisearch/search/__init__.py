"""
Search indexing and query engine package.

This package provides a pure-Python search stack:
- analyzers: Whitespace tokenizer, token cursor and optional filters
- postings: Per-term posting lists (doc id -> occurrence count)
- trie: Prefix-tree term dictionary owning the posting lists
- stats: Corpus statistics plus IDF/BM25 scoring helpers
- topk: Bounded top-k selector
- document_store: Newline-delimited document collection
- indexer: Builds the immutable search index from a document store
- bm25_engine: Query evaluation and ranking
"""
