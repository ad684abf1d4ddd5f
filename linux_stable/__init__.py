"""
linux-stable - Pull linux-stable updates into a kernel tree.

This package provides tools for:
- Fetching tags from the linux-stable repository
- Calculating the current, latest and target kernel versions
- Cherry-picking or merging a stable version range into the tree
"""

__version__ = "1.0.0"

from linux_stable.config import StableConfig, STABLE_REMOTE_URL
from linux_stable.models import (
    KernelVersion,
    SyncOutcome,
    UpdateMethod,
    UpdateMode,
    UpdateOptions,
    VersionPlan,
)

__all__ = [
    "__version__",
    "StableConfig",
    "STABLE_REMOTE_URL",
    "KernelVersion",
    "SyncOutcome",
    "UpdateMethod",
    "UpdateMode",
    "UpdateOptions",
    "VersionPlan",
]
