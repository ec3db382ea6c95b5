"""Tests for ranking language totals into percentages."""
import pytest

from toplangs.models import RankedEntry
from toplangs.rank import OTHER_LABEL, rank


def test_ranking_without_overflow():
    ranking = rank({"Go": 800, "Rust": 150, "HTML": 50}, 5)

    assert ranking == [
        RankedEntry("Go", 80.0),
        RankedEntry("Rust", 15.0),
        RankedEntry("HTML", 5.0),
    ]


def test_overflow_is_folded_into_other():
    ranking = rank({"A": 60, "B": 20, "C": 10, "D": 10}, 2)

    assert ranking == [
        RankedEntry("A", 60.0),
        RankedEntry("B", 20.0),
        RankedEntry(OTHER_LABEL, 20.0),
    ]


def test_other_is_last_even_when_largest():
    ranking = rank({"A": 30, "B": 25, "C": 25, "D": 20}, 1)

    assert [e.label for e in ranking] == ["A", "Other"]
    assert ranking[-1].percent == 70.0


def test_no_other_when_language_count_equals_top_n():
    ranking = rank({"A": 3, "B": 2, "C": 1}, 3)

    assert OTHER_LABEL not in [e.label for e in ranking]


def test_zero_top_n_yields_single_other_entry():
    assert rank({"Go": 3, "C": 1}, 0) == [RankedEntry(OTHER_LABEL, 100.0)]


@pytest.mark.parametrize("totals", [{}, {"Go": 0}, {"Go": 0, "C": 0}])
@pytest.mark.parametrize("top_n", [0, 1, 5])
def test_no_bytes_yields_empty_ranking(totals, top_n):
    assert rank(totals, top_n) == []


def test_ties_keep_insertion_order():
    ranking = rank({"B": 10, "A": 10, "C": 20}, 3)

    assert [e.label for e in ranking] == ["C", "B", "A"]


@pytest.mark.parametrize("top_n", range(0, 11))
def test_percentages_add_up_to_100(top_n):
    totals = {f"L{i}": i * 37 + 11 for i in range(1, 10)}

    ranking = rank(totals, top_n)

    total = sum(e.percent for e in ranking)
    assert abs(total - 100.0) <= 0.05 * (top_n + 1) + 1e-9
    assert (ranking[-1].label == OTHER_LABEL) == (len(totals) > top_n)


def test_percent_is_rounded_to_one_decimal():
    ranking = rank({"A": 2, "B": 1}, 2)

    assert ranking == [RankedEntry("A", 66.7), RankedEntry("B", 33.3)]


def test_negative_top_n_is_rejected():
    with pytest.raises(ValueError):
        rank({"Go": 1}, -1)
