"""
Kernel version calculation: current, latest and target versions.
"""

from pathlib import Path
from typing import Optional

from git import Repo
from git.exc import GitCommandError

from linux_stable.common import logger, run_command, warn
from linux_stable.config import DEFAULT_CONFIG, KERNELVERSION_TARGET, StableConfig
from linux_stable.exceptions import KernelTreeError, UsageError, VersionRangeError
from linux_stable.models import KernelVersion, UpdateMode, UpdateOptions, VersionPlan


def get_current_version(
    kernel_folder: Path,
    config: Optional[StableConfig] = None,
) -> KernelVersion:
    """
    Get the kernel tree's version from the build system.

    Args:
        kernel_folder: Kernel source location
        config: Configuration holding the make command

    Returns:
        Version reported by ``make kernelversion``

    Raises:
        KernelTreeError: If make fails or prints no usable version
    """
    config = config or DEFAULT_CONFIG

    returncode, stdout, stderr = run_command(
        [config.make_command, KERNELVERSION_TARGET],
        cwd=kernel_folder,
    )
    if returncode != 0:
        raise KernelTreeError(f"Could not read the kernel version: {stderr.strip()}")

    # make may print directory changes before the version
    lines = [line.strip() for line in stdout.splitlines() if line.strip()]
    if not lines:
        raise KernelTreeError("make kernelversion printed nothing!")

    try:
        return KernelVersion.parse(lines[-1])
    except ValueError as e:
        raise KernelTreeError(f"Could not parse kernel version {lines[-1]!r}", cause=e) from e


def get_latest_version(repo: Repo, series: str) -> KernelVersion:
    """
    Get the newest linux-stable version of a kernel line.

    Tags are ordered by creation date, newest first, not by version number.

    Args:
        repo: Kernel tree repository with linux-stable tags fetched
        series: Kernel line (e.g., "4.9")

    Returns:
        Version of the most recently created matching tag

    Raises:
        VersionRangeError: If no tag of the line exists
    """
    try:
        output = repo.git.tag("--sort=-taggerdate", "-l", f"v{series}", f"v{series}.*")
    except GitCommandError as e:
        raise VersionRangeError(f"Could not list tags for {series}!", cause=e) from e

    tags = [line.strip() for line in output.splitlines() if line.strip()]
    if not tags:
        raise VersionRangeError(f"No linux-stable tags found for {series}!")

    logger.debug(f"Newest tag for {series}: {tags[0]}")
    try:
        return KernelVersion.parse(tags[0])
    except ValueError as e:
        raise VersionRangeError(f"Could not parse tag {tags[0]!r}", cause=e) from e


def compute_target_version(
    current: KernelVersion,
    latest: KernelVersion,
    options: UpdateOptions,
) -> KernelVersion:
    """Pick the target version for the selected update mode."""
    if options.update_mode is UpdateMode.ONE_STEP:
        return current.next_sublevel()

    if options.update_mode is UpdateMode.LATEST:
        return latest

    if options.update_mode is UpdateMode.EXPLICIT:
        if not options.target_version:
            raise UsageError("Please specify a version to update!")
        try:
            target = KernelVersion.parse(options.target_version, strict=True)
        except ValueError as e:
            raise VersionRangeError(f"Invalid target version {options.target_version}!", cause=e) from e
        if target.series != current.series:
            warn(f"{target} is not on the {current.series} line!")
        return target

    raise ValueError(f"Unknown update mode: {options.update_mode}")


def validate_target_version(
    current: KernelVersion,
    latest: KernelVersion,
    target: KernelVersion,
) -> None:
    """
    Make sure the target version is between current and latest.

    Only sublevels are compared; tag listing already restricts the latest
    version to the current line.

    Raises:
        VersionRangeError: If the target is already present or not yet released
    """
    if target.sublevel <= current.sublevel:
        raise VersionRangeError(f"{target} is already present in {current}!")
    if target.sublevel > latest.sublevel:
        raise VersionRangeError(f"{current} is the latest!")


def plan_update(
    current: KernelVersion,
    latest: KernelVersion,
    options: UpdateOptions,
) -> VersionPlan:
    """Compute and validate the target version for an update."""
    target = compute_target_version(current, latest, options)
    validate_target_version(current, latest, target)
    return VersionPlan(current=current, latest=latest, target=target)
