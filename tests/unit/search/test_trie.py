"""Unit tests for the trie term dictionary."""

import pytest

from lexisearch.search.trie import Trie


@pytest.mark.unit
class TestTrieInsert:
    def test_single_term(self):
        trie = Trie()
        trie.insert("cat", 0)
        assert trie.document_frequency("cat") == 1
        assert trie.term_frequency(0, "cat") == 1
        assert len(trie) == 1

    def test_repeated_insert_counts_occurrences_not_documents(self):
        trie = Trie()
        trie.insert("dog", 1)
        trie.insert("cat", 0)
        for _ in range(4):
            trie.insert("cat", 3)
        trie.insert("cat", 3)
        assert trie.term_frequency(3, "cat") == 5
        assert trie.document_frequency("cat") == 2
        assert trie.document_frequency("dog") == 1

    def test_empty_term_rejected(self):
        with pytest.raises(ValueError):
            Trie().insert("", 0)

    def test_prefix_and_extension_are_distinct_terms(self):
        trie = Trie()
        trie.insert("car", 0)
        trie.insert("ca", 1)
        trie.insert("cart", 2)
        assert trie.document_frequency("ca") == 1
        assert trie.document_frequency("car") == 1
        assert trie.document_frequency("cart") == 1
        assert trie.document_frequency("c") == 0
        assert trie.document_frequency("carts") == 0
        assert trie.term_frequency(1, "car") == 0
        assert len(trie) == 3

    def test_sibling_branches(self):
        trie = Trie()
        for doc_id, term in enumerate(["bat", "cat", "hat", "cab", "cot"]):
            trie.insert(term, doc_id)
        for doc_id, term in enumerate(["bat", "cat", "hat", "cab", "cot"]):
            assert trie.term_frequency(doc_id, term) == 1
            assert trie.document_frequency(term) == 1
        assert trie.document_frequency("cut") == 0
        assert trie.document_frequency("at") == 0

    def test_unrelated_terms_do_not_interfere(self):
        trie = Trie()
        trie.insert("alpha", 0)
        before = (trie.document_frequency("beta"), trie.term_frequency(0, "beta"))
        trie.insert("alphabet", 0)
        trie.insert("alp", 4)
        assert (trie.document_frequency("beta"), trie.term_frequency(0, "beta")) == before == (0, 0)
        assert trie.document_frequency("alpha") == 1

    def test_terms_are_case_sensitive(self):
        trie = Trie()
        trie.insert("Cat", 0)
        assert trie.document_frequency("cat") == 0
        assert trie.document_frequency("Cat") == 1

    def test_non_ascii_terms(self):
        trie = Trie()
        trie.insert("café", 0)
        trie.insert("cafe", 1)
        assert trie.term_frequency(0, "café") == 1
        assert trie.term_frequency(1, "cafe") == 1
        assert trie.document_frequency("caf") == 0


@pytest.mark.unit
class TestTrieLookup:
    def test_lookup_on_empty_trie(self):
        trie = Trie()
        assert trie.document_frequency("anything") == 0
        assert trie.term_frequency(0, "anything") == 0
        assert trie.postings("anything") is None
        assert list(trie.iter_terms()) == []

    def test_empty_lookup_term(self):
        trie = Trie()
        trie.insert("a", 0)
        assert trie.document_frequency("") == 0
        assert "" not in trie

    def test_contains(self):
        trie = Trie()
        trie.insert("sat", 0)
        assert "sat" in trie
        assert "sa" not in trie
        assert 5 not in trie

    def test_unknown_document_has_zero_frequency(self):
        trie = Trie()
        trie.insert("sat", 0)
        assert trie.term_frequency(99, "sat") == 0

    def test_iter_terms_lists_every_term_once(self):
        trie = Trie()
        words = ["the", "cat", "sat", "the", "dog", "sat", "then", "ca"]
        for doc_id, word in enumerate(words):
            trie.insert(word, doc_id)
        listed = dict((term, postings.document_count()) for term, postings in trie.iter_terms())
        assert listed == {"the": 2, "cat": 1, "sat": 2, "dog": 1, "then": 1, "ca": 1}

    def test_iter_terms_is_deterministic(self):
        trie = Trie()
        for doc_id, word in enumerate(["b", "ab", "a", "abc", "c"]):
            trie.insert(word, doc_id)
        first = [term for term, _ in trie.iter_terms()]
        second = [term for term, _ in trie.iter_terms()]
        assert first == second
        assert first == ["b", "a", "ab", "abc", "c"]
