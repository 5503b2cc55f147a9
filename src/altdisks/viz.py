"""Visualisation helpers for swap counts."""

from __future__ import annotations

from collections import defaultdict
from pathlib import Path
from typing import Sequence

from matplotlib.figure import Figure

from .experiment import TrialRecord, expected_swap_count


def plot_swap_counts(
    records: Sequence[TrialRecord],
    out_path: Path,
    *,
    width: float = 6.0,
    height: float = 4.0,
    title: str = "Swaps per light count",
) -> Path:
    """Plot swap count against light count for each algorithm in *records*."""

    if not records:
        raise ValueError("No trial records to plot")
    series: dict[str, list[tuple[int, int]]] = defaultdict(list)
    for record in records:
        series[record.algorithm].append((record.light_count, record.swap_count))

    fig = Figure(figsize=(width, height))
    ax = fig.subplots()
    for name, points in series.items():
        points.sort()
        xs = [x for x, _ in points]
        ys = [y for _, y in points]
        ax.plot(xs, ys, marker="o", alpha=0.7, label=name)
    counts = sorted({record.light_count for record in records})
    ax.plot(counts, [expected_swap_count(n) for n in counts], linestyle="--", c="gray", label="n(n+1)/2")
    ax.set_xlabel("light disks")
    ax.set_ylabel("swaps")
    ax.set_title(title)
    ax.legend()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_path)
    return out_path
