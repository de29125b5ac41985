"""Tests for the clue -> suspect index."""

import pytest

from detective.engine.errors import AllocationError
from detective.engine.suspects import (
    BUCKET_COUNT,
    HASH_SEED,
    SuspectIndex,
    bucket_for,
    clue_hash,
)


def test_hash_reference_values():
    """djb2 starts at 5381 and multiplies by 33 per byte."""
    assert clue_hash("") == HASH_SEED
    assert clue_hash("a") == 5381 * 33 + ord("a")
    assert bucket_for("") == 5381 % BUCKET_COUNT


def test_hash_is_deterministic():
    """The same text always lands in the same bucket."""
    clue = "Pegadas sujas perto da janela"
    assert len({bucket_for(clue) for _ in range(10)}) == 1
    assert 0 <= bucket_for(clue) < BUCKET_COUNT


def test_lookup_bound_clue(index: SuspectIndex):
    """Bound clues resolve to their suspect."""
    assert index.lookup("Chave enferrujada") == "Sr. Black"
    assert index.lookup("Fio de tecido azul") == "Jovem Green"
    assert index.lookup("Livro com anotacoes na margem") == "Prof. Plum"
    assert len(index) == 8


def test_lookup_missing_clue(index: SuspectIndex):
    """Unknown clues are not found."""
    assert index.lookup("Bilhete rasgado") is None
    assert index.lookup("") is None
    assert index.lookup(None) is None
    assert "Bilhete rasgado" not in index


def test_last_write_wins():
    """Re-binding a clue overwrites the suspect without adding an entry."""
    index = SuspectIndex()
    index.insert("Chave enferrujada", "Sr. Black")
    index.insert("Chave enferrujada", "Sra. White")
    assert index.lookup("Chave enferrujada") == "Sra. White"
    assert len(index) == 1


def test_empty_clue_is_ignored():
    """Binding an empty clue does nothing."""
    index = SuspectIndex()
    index.insert("", "Sr. Black")
    index.insert(None, "Sr. Black")
    assert len(index) == 0


def test_repeated_lookups_agree(index: SuspectIndex):
    """Lookups are stable within a session."""
    answers = {index.lookup("Retrato pendurado torto") for _ in range(5)}
    assert answers == {"Sra. White"}
    misses = {index.lookup("Nada") for _ in range(5)}
    assert misses == {None}


def test_chained_buckets():
    """More clues than buckets still resolve through their chains."""
    index = SuspectIndex()
    clues = [f"pista {n}" for n in range(BUCKET_COUNT * 3)]
    for n, clue in enumerate(clues):
        index.insert(clue, f"suspeito {n % 7}")

    assert len(index) == len(clues)
    assert sum(index.chain_length(b) for b in range(BUCKET_COUNT)) == len(clues)
    assert max(index.chain_length(b) for b in range(BUCKET_COUNT)) > 1
    for n, clue in enumerate(clues):
        assert index.lookup(clue) == f"suspeito {n % 7}"


def test_new_entries_go_to_chain_head():
    """A fresh entry lands in the bucket its hash selects."""
    index = SuspectIndex()
    index.insert("Chave enferrujada", "Sr. Black")
    assert index.chain_length(bucket_for("Chave enferrujada")) == 1
    assert list(index.items()) == [("Chave enferrujada", "Sr. Black")]


def test_capacity_raises_allocation_error():
    """A bounded index refuses new clues but still accepts overwrites."""
    index = SuspectIndex(max_entries=1)
    index.insert("a", "Sr. Black")
    index.insert("a", "Prof. Plum")
    with pytest.raises(AllocationError):
        index.insert("b", "Sr. Black")
    assert index.lookup("a") == "Prof. Plum"


def test_release(index: SuspectIndex):
    """Release unlinks every entry."""
    assert index.release() == 8
    assert len(index) == 0
    assert index.lookup("Chave enferrujada") is None
    assert list(index.items()) == []
