"""Shared test fixtures and configuration."""

from pathlib import Path

import pytest

from lexisearch.search.bm25_engine import BM25SearchEngine
from lexisearch.search.document_store import DocumentStore
from lexisearch.search.indexer import SearchIndex, build_index


SETTINGS_ENV_VARS = (
    "BM25_K1",
    "BM25_B",
    "MAX_QUERY_TERMS",
    "ANALYZER",
    "LOG_LEVEL",
    "LOG_JSON",
)

SAMPLE_CORPUS = [
    "the cat sat",
    "the dog sat",
    "the cat ran",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Keep host environment variables and .env files out of Settings."""
    for key in SETTINGS_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_store() -> DocumentStore:
    return DocumentStore(SAMPLE_CORPUS)


@pytest.fixture
def sample_index(sample_store) -> SearchIndex:
    return build_index(sample_store)


@pytest.fixture
def sample_engine(sample_index) -> BM25SearchEngine:
    return BM25SearchEngine(sample_index)


@pytest.fixture
def corpus_file(tmp_path) -> Path:
    path = tmp_path / "docs.txt"
    path.write_text("\n".join(SAMPLE_CORPUS) + "\n", encoding="utf-8")
    return path
