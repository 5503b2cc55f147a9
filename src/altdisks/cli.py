"""Command line interface for altdisks."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .algorithms import ALGORITHMS, get_algorithm
from .config import load_config, load_settings
from .disks import DiskRow, PreconditionError
from .experiment import TrialRecord, run_trials, summarise
from .viz import plot_swap_counts

logger = logging.getLogger(__name__)


def _algorithm_names(choice: str | None, cfg: dict[str, Any]) -> list[str]:
    if choice is None:
        return list(cfg.get("algorithms") or ALGORITHMS)
    if choice == "all":
        return list(ALGORITHMS)
    return [choice]


def _resolve_config(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for key in ("max_light_count", "workers", "log_level"):
        value = getattr(args, key, None)
        if value is not None:
            overrides[key] = value
    return load_config(args.config, overrides=overrides, settings=load_settings())


def cmd_sort(args: argparse.Namespace, cfg: dict[str, Any]) -> None:
    light_count = args.light_count if args.light_count is not None else cfg["light_count"]
    before = DiskRow(light_count)
    print(f"{light_count} light disk(s)")
    print(f"before: {before.to_display_string()}")
    for name in _algorithm_names(args.algorithm, cfg):
        result = get_algorithm(name)(before)
        print(f"{name}: {result.after.to_display_string()}  swaps={result.swap_count}")


def _configured_trials(args: argparse.Namespace, cfg: dict[str, Any]) -> list[TrialRecord]:
    return run_trials(
        range(1, int(cfg["max_light_count"]) + 1),
        _algorithm_names(args.algorithm, cfg),
        max_workers=int(cfg["workers"]),
    )


def cmd_compare(args: argparse.Namespace, cfg: dict[str, Any]) -> None:
    records = _configured_trials(args, cfg)
    if args.json:
        print(json.dumps([record.to_dict() for record in records], indent=2))
    else:
        print(summarise(records))


def cmd_plot(args: argparse.Namespace, cfg: dict[str, Any]) -> None:
    records = _configured_trials(args, cfg)
    plot_cfg = cfg.get("plot", {})
    out = plot_swap_counts(
        records,
        Path(args.out),
        width=float(plot_cfg.get("width", 6.0)),
        height=float(plot_cfg.get("height", 4.0)),
        title=str(plot_cfg.get("title", "Swaps per light count")),
    )
    print(f"Plot written to {out}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="altdisks", description="Alternating disks sorting")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--log-level", help="Logging level (default from config)")
    sub = parser.add_subparsers(dest="command", required=True)
    algo_choices = [*ALGORITHMS, "all"]

    p_sort = sub.add_parser("sort", help="Sort one alternating row and show the result")
    p_sort.add_argument("light_count", type=int, nargs="?")
    p_sort.add_argument("--algorithm", choices=algo_choices)
    p_sort.set_defaults(func=cmd_sort)

    p_compare = sub.add_parser("compare", help="Compare swap counts over a range of sizes")
    p_compare.add_argument("--max-light-count", type=int)
    p_compare.add_argument("--workers", type=int)
    p_compare.add_argument("--algorithm", choices=algo_choices)
    p_compare.add_argument("--json", action="store_true", help="Emit JSON instead of a table")
    p_compare.set_defaults(func=cmd_compare)

    p_plot = sub.add_parser("plot", help="Plot swap counts against row size")
    p_plot.add_argument("--out", default="artifacts/swaps.png")
    p_plot.add_argument("--max-light-count", type=int)
    p_plot.add_argument("--workers", type=int)
    p_plot.add_argument("--algorithm", choices=algo_choices)
    p_plot.set_defaults(func=cmd_plot)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        cfg = _resolve_config(args)
        logging.basicConfig(level=str(cfg["log_level"]).upper())
        logger.debug("resolved config: %s", cfg)
        args.func(args, cfg)
    except (PreconditionError, ValidationError, ValueError, OSError, yaml.YAMLError) as exc:
        raise SystemExit(f"altdisks: {exc}") from exc


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:])
