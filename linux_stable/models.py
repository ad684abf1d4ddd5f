"""
Data models for the linux-stable updater using Pydantic for validation.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field
import re


class UpdateMethod(str, Enum):
    """How upstream changes are brought into the kernel tree."""
    CHERRY_PICK = "cherry-pick"
    MERGE = "merge"


class UpdateMode(str, Enum):
    """How the target version is chosen."""
    ONE_STEP = "one-step"
    LATEST = "latest"
    EXPLICIT = "explicit"


class SyncOutcome(str, Enum):
    """Successful terminal branches of an update run."""
    FETCHED = "fetched"
    PRINTED = "printed"
    PICKED = "picked"
    MERGED = "merged"


class KernelVersion(BaseModel):
    """A kernel version split into major, minor and sublevel."""
    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    sublevel: int = Field(default=0, ge=0)

    @classmethod
    def parse(cls, version_str: str, strict: bool = False) -> "KernelVersion":
        """
        Parse a version string like '4.9.100' into a KernelVersion.

        A leading 'v' is accepted. Unless strict, anything trailing the
        numeric part of a field (such as an '-rc1' extraversion) is ignored.

        Raises:
            ValueError: If the major or minor number is missing, or if strict
                and the string is not purely numeric
        """
        text = version_str.strip()
        if text.startswith("v"):
            text = text[1:]

        if strict and not re.fullmatch(r"\d+\.\d+(\.\d+)?", text):
            raise ValueError(f"Invalid kernel version: {version_str!r}")

        parts = text.split(".")
        numbers = []
        for part in parts[:3]:
            match = re.match(r"\d+", part)
            if not match:
                break
            numbers.append(int(match.group(0)))

        if len(numbers) < 2:
            raise ValueError(f"Invalid kernel version: {version_str!r}")

        return cls(
            major=numbers[0],
            minor=numbers[1],
            sublevel=numbers[2] if len(numbers) > 2 else 0,
        )

    def __str__(self) -> str:
        return f"{self.series}.{self.sublevel}"

    @property
    def series(self) -> str:
        """Get the major.minor line (e.g., '4.9' from '4.9.100')."""
        return f"{self.major}.{self.minor}"

    @property
    def tag(self) -> str:
        """Get the linux-stable tag name; '.0' releases are tagged without the sublevel."""
        if self.sublevel == 0:
            return f"v{self.series}"
        return f"v{self}"

    def next_sublevel(self) -> "KernelVersion":
        """Get the version one sublevel above this one."""
        return KernelVersion(major=self.major, minor=self.minor, sublevel=self.sublevel + 1)


@dataclass(frozen=True)
class UpdateOptions:
    """Options for a single update run, as given on the command line."""
    kernel_folder: Path
    update_method: Optional[UpdateMethod] = None
    update_mode: UpdateMode = UpdateMode.ONE_STEP
    target_version: Optional[str] = None
    fetch_only: bool = False
    print_latest_only: bool = False

    @property
    def needs_update_method(self) -> bool:
        """Whether this run goes far enough to apply an update."""
        return not (self.fetch_only or self.print_latest_only)


@dataclass(frozen=True)
class VersionPlan:
    """Current, latest and target versions for an update."""
    current: KernelVersion
    latest: KernelVersion
    target: KernelVersion

    @property
    def range_expression(self) -> str:
        """Get the tag range handed to git cherry-pick."""
        return f"{self.current.tag}..{self.target.tag}"
