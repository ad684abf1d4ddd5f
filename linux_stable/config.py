"""
Configuration constants for the linux-stable updater.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import os


# Upstream stable history
STABLE_REMOTE_URL = "https://git.kernel.org/pub/scm/linux/kernel/git/stable/linux-stable.git/"

# A folder holding this file at its root is treated as a kernel source tree
BUILD_DESCRIPTOR = "Makefile"

# Build target printing the tree's version
KERNELVERSION_TARGET = "kernelversion"


@dataclass
class StableConfig:
    """Environment-level settings for a linux-stable update run."""

    remote_url: str = STABLE_REMOTE_URL
    build_descriptor: str = BUILD_DESCRIPTOR
    make_command: str = "make"
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "StableConfig":
        """Create configuration from environment variables."""
        log_file = os.getenv("LINUX_STABLE_LOG_FILE")
        return cls(
            remote_url=os.getenv("LINUX_STABLE_REMOTE_URL", STABLE_REMOTE_URL),
            make_command=os.getenv("LINUX_STABLE_MAKE", "make"),
            log_file=Path(log_file) if log_file else None,
        )

    def is_kernel_tree(self, folder: Path) -> bool:
        """Check whether a folder looks like a kernel source tree."""
        return (folder / self.build_descriptor).is_file()


# Default global configuration instance
DEFAULT_CONFIG = StableConfig()
