"""altdisks public package exports."""

from .algorithms import ALGORITHMS, SortResult, get_algorithm, sort_alternate, sort_lawnmower
from .config import AltDisksSettings, load_config, load_settings
from .disks import DiskColor, DiskRow, PreconditionError
from .experiment import TrialRecord, expected_swap_count, run_trials

__all__ = [
    "ALGORITHMS",
    "AltDisksSettings",
    "DiskColor",
    "DiskRow",
    "PreconditionError",
    "SortResult",
    "TrialRecord",
    "expected_swap_count",
    "get_algorithm",
    "load_config",
    "load_settings",
    "run_trials",
    "sort_alternate",
    "sort_lawnmower",
]
