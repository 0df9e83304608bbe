"""Tests for translating selections between aliases and chart positions."""
import pytest

from teamskills.model.errors import NotFoundError
from teamskills.model.ordering import Ordering
from teamskills.model.selection import from_positions, to_positions
from teamskills.model.skills import SkillDimension


def test_to_positions(crowd):
    ordering = Ordering.sorted_by(crowd, SkillDimension.PROGRAMMING)  # Di, Bo, Ann, Cy, Ed
    assert to_positions(["Ann", "Di"], ordering) == [2, 0]


def test_to_positions_drops_stale_aliases(crowd):
    ordering = Ordering.sorted_by(crowd, SkillDimension.PROGRAMMING)
    assert to_positions(["Zed", "Ed"], ordering) == [4]


def test_to_positions_ignores_duplicates(crowd):
    ordering = Ordering.sorted_by(crowd, SkillDimension.PROGRAMMING)
    assert to_positions(["Ed", "Ed"], ordering) == [4]


def test_from_positions(crowd):
    ordering = Ordering.sorted_by(crowd, SkillDimension.PROGRAMMING)
    assert from_positions([1, 3], ordering) == ["Bo", "Cy"]


def test_from_positions_outside_ordering(crowd):
    ordering = Ordering.sorted_by(crowd, SkillDimension.PROGRAMMING)
    with pytest.raises(NotFoundError):
        from_positions([5], ordering)


def test_selection_survives_resort(crowd):
    selection = {"Ann", "Di"}

    by_programming = Ordering.sorted_by(crowd, SkillDimension.PROGRAMMING)
    p1 = to_positions(selection, by_programming)

    by_maths = Ordering.sorted_by(crowd, SkillDimension.MATHS)
    p2 = to_positions(selection, by_maths)

    assert set(from_positions(p2, by_maths)) == selection
    # The old positions point at other people in the new ordering
    assert sorted(p1) != sorted(p2)
    assert set(from_positions(p1, by_maths)) != selection


def test_ann_bo_scenario(ann_bo):
    by_art = Ordering.sorted_by(ann_bo, SkillDimension.ART)
    assert by_art.aliases == ("Ann", "Bo")
    assert sorted(to_positions({"Ann", "Bo"}, by_art)) == [0, 1]
