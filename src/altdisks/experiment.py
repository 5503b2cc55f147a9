"""Run both algorithms over a range of row sizes and collect swap counts."""

from __future__ import annotations

import logging
import time
from dataclasses import asdict, dataclass
from typing import Any, Iterable, Sequence

from .algorithms import get_algorithm
from .disks import DiskColor, DiskRow
from .workers import WorkerPool

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TrialRecord:
    algorithm: str
    light_count: int
    swap_count: int
    expected_swaps: int
    elapsed_ms: float
    is_sorted: bool
    before: str
    after: str

    @property
    def matches_expected(self) -> bool:
        return self.swap_count == self.expected_swaps

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["matches_expected"] = self.matches_expected
        return payload


def expected_swap_count(light_count: int) -> int:
    """Swaps needed to sort an alternating row of *light_count* light disks.

    The light disk at index ``2i`` starts ahead of ``light_count - i`` dark
    disks and every adjacent swap removes exactly one such pair.
    """

    return light_count * (light_count + 1) // 2


def run_trial(algorithm: str, light_count: int) -> TrialRecord:
    sort = get_algorithm(algorithm)
    before = DiskRow(light_count)
    start = time.perf_counter()
    result = sort(before)
    elapsed_ms = (time.perf_counter() - start) * 1000
    after = result.after
    balanced = after.count(DiskColor.LIGHT) == light_count and after.count(DiskColor.DARK) == light_count
    return TrialRecord(
        algorithm=algorithm,
        light_count=light_count,
        swap_count=result.swap_count,
        expected_swaps=expected_swap_count(light_count),
        elapsed_ms=elapsed_ms,
        is_sorted=after.is_sorted() and balanced,
        before=before.to_display_string(),
        after=after.to_display_string(),
    )


def run_trials(
    light_counts: Iterable[int],
    algorithms: Sequence[str],
    max_workers: int = 1,
) -> list[TrialRecord]:
    """Run every algorithm against every light count.

    Records come back ordered by algorithm, then light count, whatever
    the number of workers.
    """

    counts = list(light_counts)
    for name in algorithms:
        get_algorithm(name)
    jobs = [(name, count) for name in algorithms for count in counts]
    logger.info("running %d trials on %d worker(s)", len(jobs), max_workers)

    if max_workers <= 1:
        records = [run_trial(name, count) for name, count in jobs]
    else:
        with WorkerPool(max_workers) as pool:
            futures = [pool.submit(run_trial, name, count) for name, count in jobs]
            records = [future.result() for future in futures]

    for record in records:
        if not record.is_sorted:
            logger.warning("%s left %d light disks unsorted: %s", record.algorithm, record.light_count, record.after)
    return records


def summarise(records: Sequence[TrialRecord]) -> str:
    """Render *records* as a fixed-width text table."""

    header = f"{'algorithm':<10} {'lights':>6} {'swaps':>7} {'expected':>8} {'ms':>9} sorted"
    lines = [header, "-" * len(header)]
    for record in records:
        lines.append(
            f"{record.algorithm:<10} {record.light_count:>6} {record.swap_count:>7} "
            f"{record.expected_swaps:>8} {record.elapsed_ms:>9.3f} {'yes' if record.is_sorted else 'no'}"
        )
    return "\n".join(lines)
