import pytest

from algokit.hashing import BoundedHashTable, ChainedHashTable, first_char_hash


def test_first_char_hash_values():
    assert first_char_hash("a", 10) == 7
    assert first_char_hash("abc", 10) == first_char_hash("a", 10)


def test_first_char_hash_empty_key():
    with pytest.raises(ValueError):
        first_char_hash("", 10)


def test_chained_collisions_and_delete():
    table = ChainedHashTable(10)
    table.set("a", 100)
    table.set("k", 200)
    table.set("W", 300)
    table.set("1", 111)
    table.set("2", 222)
    assert len(table) == 5
    table.delete("a")
    assert len(table) == 4
    assert table.get("W") == 300
    assert table.get("k") == 200
    assert table.get("1") == 111
    assert table.get("2") == 222
    with pytest.raises(KeyError):
        table.get("a")


def test_chained_delete_from_chain_middle():
    table = ChainedHashTable(10)
    table.set("a", 100)
    table.set("k", 200)
    table.set("W", 300)
    table.delete("k")
    assert table.get("a") == 100
    assert table.get("W") == 300
    with pytest.raises(KeyError):
        table.get("k")


def test_chained_duplicate_key_shadowing():
    table = ChainedHashTable(10)
    table.set("a", 1)
    table.set("a", 2)
    assert len(table) == 2
    assert table.get("a") == 1
    table.delete("a")
    assert table.get("a") == 2


def test_chained_errors():
    with pytest.raises(ValueError):
        ChainedHashTable(0)
    table = ChainedHashTable(3)
    with pytest.raises(KeyError):
        table.delete("x")
    with pytest.raises(ValueError):
        table.set("", 1)


def test_bounded_source_case():
    table = BoundedHashTable(5)
    table.set("a", "a")
    table.set("a", "aa")
    table.set("b", "b")
    table.set("bb", "bb")
    table.set("bbb", "b")
    table.set("bbbb", "b")
    assert len(table) == 5
    with pytest.raises(OverflowError):
        table.set("bbbbb", "b")
    with pytest.raises(OverflowError):
        table.set("bbbbb", "b")
    assert table.get("a") == "aa"
    assert table.get("b") == "b"
    assert table.get("bb") == "bb"
    with pytest.raises(KeyError):
        table.get("c")


def test_bounded_default_capacity():
    table = BoundedHashTable(0)
    assert table.capacity == 10


def test_bounded_full_blocks_overwrite():
    table = BoundedHashTable(1)
    table.set("a", 1)
    with pytest.raises(OverflowError):
        table.set("a", 2)
    assert table.get("a") == 1