import pytest

from algokit.trie import Trie


@pytest.fixture
def trie():
    t = Trie()
    t.insert("abde")
    t.insert("acde")
    return t


def test_prefix_path_longer_than_word_is_absent(trie):
    assert trie.has_prefix("abdec") is False


def test_prefixes_of_inserted_words_exist(trie):
    assert trie.has_prefix("abd") is True
    assert trie.has_prefix("a") is True
    assert trie.has_prefix("b") is False


def test_contains_only_complete_words(trie):
    assert "abde" in trie
    assert "acde" in trie
    assert "abd" not in trie
    assert "abc" not in trie


def test_level_order(trie):
    assert trie.level_order() == ["a", "b", "c", "d", "d", "e", "e"]


def test_search_cases_from_example():
    t = Trie()
    t.insert("abc")
    t.insert("acd")
    t.insert("ceg")
    assert "abc" in t
    assert "c" not in t
    assert t.level_order() == ["a", "c", "b", "c", "e", "c", "d", "g"]


def test_empty_trie():
    t = Trie()
    assert t.level_order() == []
    assert "a" not in t


def test_rejects_characters_outside_alphabet():
    t = Trie()
    with pytest.raises(ValueError):
        t.insert("Abc")
    with pytest.raises(ValueError):
        t.insert("a1")


def test_non_string_not_contained(trie):
    assert 5 not in trie