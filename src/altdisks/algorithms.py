"""Adjacent-swap sorting algorithms for disk rows."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from .disks import DiskColor, DiskRow

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SortResult:
    after: DiskRow
    swap_count: int

    def __post_init__(self) -> None:
        # the result owns a private row that no caller can swap
        object.__setattr__(self, "after", self.after.copy().freeze())


SortAlgorithm = Callable[[DiskRow], SortResult]


def _is_light_then_dark(row: DiskRow, left_index: int) -> bool:
    return row.get(left_index) is DiskColor.LIGHT and row.get(left_index + 1) is DiskColor.DARK


def sort_alternate(before: DiskRow) -> SortResult:
    """Sort with repeated left-to-right sweeps.

    Pass ``i`` only looks at pairs starting at index ``i``: after ``i``
    passes the first ``i`` disks are already dark.
    """

    row = before.copy()
    total = row.total_count()
    count = 0
    for i in range(total):
        for j in range(1 + i, total):
            if _is_light_then_dark(row, j - 1):
                row.swap(j - 1)
                count += 1
    logger.debug("alternate sort of %d disks finished after %d swaps", total, count)
    return SortResult(after=row, swap_count=count)


def sort_lawnmower(before: DiskRow) -> SortResult:
    """Sort with alternating left-to-right and right-to-left sweeps.

    Each pass settles at least one light disk on the right and one dark
    disk on the left, so ``total_count() // 2`` passes are enough.
    """

    row = before.copy()
    total = row.total_count()
    count = 0
    for i in range(total // 2):
        for j in range(1 + i, total):
            if _is_light_then_dark(row, j - 1):
                row.swap(j - 1)
                count += 1
        # back sweep carries dark disks left
        for k in range(total - 1 - i, 0, -1):
            if _is_light_then_dark(row, k - 1):
                row.swap(k - 1)
                count += 1
    logger.debug("lawnmower sort of %d disks finished after %d swaps", total, count)
    return SortResult(after=row, swap_count=count)


ALGORITHMS: dict[str, SortAlgorithm] = {
    "alternate": sort_alternate,
    "lawnmower": sort_lawnmower,
}


def get_algorithm(name: str) -> SortAlgorithm:
    algorithm = ALGORITHMS.get(name)
    if algorithm is None:
        raise ValueError(f"Unknown algorithm {name!r}; expected one of {', '.join(ALGORITHMS)}")
    return algorithm
