import pytest

from infoguess.ranking import rank, top_k


def test_ties_keep_input_order():
    ranked = rank([("x", 0.5), ("y", 1.2), ("z", 1.2)])

    assert top_k(ranked, 2) == [("y", 1.2), ("z", 1.2)]
    assert ranked[-1] == ("x", 0.5)


def test_rank_descending():
    ranked = rank([("a", 0.1), ("b", 3.0), ("c", 2.0)])

    assert [w for w, _ in ranked] == ["b", "c", "a"]


def test_empty_input():
    assert rank([]) == []
    assert top_k([], 5) == []


def test_top_k_larger_than_results():
    assert top_k([("a", 1.0)], 10) == [("a", 1.0)]


def test_top_k_rejects_negative():
    with pytest.raises(ValueError):
        top_k([("a", 1.0)], -1)
