import pytest
from autocorrect.candidates import generate
from autocorrect.dedupe import dedupe
from autocorrect.errors import InvalidCharacter
from autocorrect.index import DictionaryIndex
from autocorrect.models import DistanceMode, EngineConfig

WORDS = ["cat", "cats", "cot", "dog"]

def _index(**kwargs) -> DictionaryIndex:
    return DictionaryIndex.build(WORDS, EngineConfig(**kwargs))

def test_short_query_uses_short_word_list():
    pool = generate("cax", _index(gram=2, short_len=3))
    assert pool.mode is DistanceMode.SHORT
    assert pool.threshold == 1
    assert pool.words == ("cat", "cot", "dog")

def test_ngram_query_collects_bucket_contents():
    pool = generate("coat", _index(gram=2, short_len=2))
    assert pool.mode is DistanceMode.FULL
    assert pool.threshold == 2
    # co -> cot, oa -> nothing, at -> cat, cats
    assert pool.words == ("cot", "cat", "cats")

def test_pool_keeps_duplicates():
    pool = generate("cott", _index(gram=2, short_len=2))
    # co -> cot, ot -> cot, tt -> nothing
    assert pool.words == ("cot", "cot")

def test_query_shorter_than_gram_gets_empty_pool():
    pool = generate("cax", _index(gram=4, short_len=2))
    assert pool.words == ()
    assert pool.mode is DistanceMode.FULL

def test_threshold_follows_query_length():
    idx = _index(gram=2, short_len=2)
    assert generate("a" * 8, idx).threshold == 2
    assert generate("a" * 9, idx).threshold == 3
    assert generate("a" * 13, idx).threshold == 4

def test_invalid_query_raises():
    with pytest.raises(InvalidCharacter):
        generate("c0at", _index(gram=2, short_len=2))

def test_dedupe_keeps_first_occurrence_order():
    assert dedupe(["b", "a", "b", "c", "a", "b"]) == ["b", "a", "c"]
    assert dedupe([]) == []
    assert dedupe(iter(["x", "x"])) == ["x"]
