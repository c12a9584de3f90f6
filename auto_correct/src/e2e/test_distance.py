from itertools import product
import pytest
from autocorrect.distance import NOT_COMPARABLE, edit_distance, scorer_for, short_distance
from autocorrect.models import DistanceMode

WORDS = ["", "a", "cat", "cats", "cot", "coat", "dog", "kitten", "sitting", "don't"]

@pytest.mark.parametrize("a,b,expected", [
    ("kitten", "sitting", 3),
    ("", "abc", 3),
    ("abc", "", 3),
    ("cat", "cxt", 1),
    ("cot", "cxt", 1),
    ("cats", "cxt", 2),
    ("dog", "cxt", 3),
    ("flaw", "lawn", 2),
])
def test_edit_distance_known_values(a, b, expected):
    assert edit_distance(a, b) == expected

@pytest.mark.parametrize("w", WORDS)
def test_edit_distance_identity(w):
    assert edit_distance(w, w) == 0

def test_edit_distance_symmetry():
    for a, b in product(WORDS, repeat=2):
        assert edit_distance(a, b) == edit_distance(b, a)

def test_edit_distance_triangle_inequality():
    for a, b, c in product(WORDS, repeat=3):
        assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)

def test_short_distance_counts_differing_positions():
    assert short_distance("cat", "cax") == 1
    assert short_distance("car", "cax") == 1
    assert short_distance("cat", "cog") == 2
    assert short_distance("cat", "cat") == 0

@pytest.mark.parametrize("a,b", [("cat", "cats"), ("", "a"), ("at", "cat")])
def test_short_distance_not_comparable_on_length_mismatch(a, b):
    assert short_distance(a, b) == NOT_COMPARABLE
    assert NOT_COMPARABLE > 1_000_000

def test_scorer_for_modes():
    assert scorer_for(DistanceMode.FULL) is edit_distance
    assert scorer_for(DistanceMode.SHORT) is short_distance
