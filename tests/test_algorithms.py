"""Behavioural tests for the alternate and lawnmower algorithms."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from altdisks.algorithms import ALGORITHMS, SortResult, get_algorithm, sort_alternate, sort_lawnmower
from altdisks.disks import DiskColor, DiskRow, PreconditionError
from altdisks.experiment import expected_swap_count

SORTS = [sort_alternate, sort_lawnmower]


@pytest.mark.parametrize("sort", SORTS)
def test_single_pair_needs_one_swap(sort) -> None:
    result = sort(DiskRow(1))

    assert result.after.to_display_string() == "D L"
    assert result.swap_count == 1


@pytest.mark.parametrize("sort", SORTS)
def test_four_light_disks(sort) -> None:
    result = sort(DiskRow(4))

    assert result.after.to_display_string() == "D D D D L L L L"
    assert result.swap_count == 10


@pytest.mark.parametrize("sort", SORTS)
@pytest.mark.parametrize("light_count", range(1, 16))
def test_result_is_sorted_and_balanced(sort, light_count: int) -> None:
    result = sort(DiskRow(light_count))

    assert result.after.is_sorted()
    assert result.after.total_count() == 2 * light_count
    assert result.after.count(DiskColor.LIGHT) == light_count
    assert result.after.count(DiskColor.DARK) == light_count
    assert result.swap_count == expected_swap_count(light_count)


@pytest.mark.parametrize("light_count", [1, 2, 5, 9])
def test_both_algorithms_agree_on_final_row(light_count: int) -> None:
    row = DiskRow(light_count)

    assert sort_alternate(row).after == sort_lawnmower(row).after


@pytest.mark.parametrize("sort", SORTS)
def test_input_row_is_left_untouched(sort) -> None:
    row = DiskRow(5)
    result = sort(row)

    assert row.is_initialized()
    assert result.after is not row


@pytest.mark.parametrize("sort", SORTS)
@pytest.mark.parametrize("colors", ["D L", "D D L L", "D D D D D L L L L L"])
def test_sorted_input_needs_no_swaps(sort, colors: str) -> None:
    row = DiskRow.from_colors(colors)
    result = sort(row)

    assert result.swap_count == 0
    assert result.after == row


def test_lawnmower_handles_clustered_input() -> None:
    result = sort_lawnmower(DiskRow.from_colors("L L D D"))

    assert result.after.to_display_string() == "D D L L"
    assert result.swap_count == 4


def test_sort_result_is_immutable() -> None:
    result = sort_alternate(DiskRow(2))

    assert isinstance(result, SortResult)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.swap_count = 0  # type: ignore[misc]


@pytest.mark.parametrize("sort", SORTS)
def test_sort_result_row_cannot_be_swapped(sort) -> None:
    result = sort(DiskRow(1))

    with pytest.raises(PreconditionError):
        result.after.swap(0)
    assert result.after.to_display_string() == "D L"
    assert result.swap_count == 1


def test_sort_result_keeps_its_own_row() -> None:
    row = DiskRow.from_colors("D L")
    result = SortResult(after=row, swap_count=0)
    row.swap(0)

    assert result.after.to_display_string() == "D L"
    assert not row.is_frozen


def test_registry_lookup() -> None:
    assert set(ALGORITHMS) == {"alternate", "lawnmower"}
    assert get_algorithm("lawnmower") is sort_lawnmower
    with pytest.raises(ValueError, match="Unknown algorithm"):
        get_algorithm("quicksort")


def test_sorts_log_swap_counts(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="altdisks.algorithms"):
        sort_alternate(DiskRow(3))
        sort_lawnmower(DiskRow(3))

    assert "alternate sort of 6 disks finished after 6 swaps" in caplog.text
    assert "lawnmower sort of 6 disks finished after 6 swaps" in caplog.text
