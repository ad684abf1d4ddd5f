"""
Fetching linux-stable tags into a kernel tree.
"""

import os
from pathlib import Path
from typing import Optional

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from linux_stable.common import logger, success
from linux_stable.config import DEFAULT_CONFIG, StableConfig
from linux_stable.exceptions import KernelTreeError, RemoteError


def open_kernel_repo(kernel_folder: Path) -> Repo:
    """
    Open the git repository holding a kernel tree.

    The tree may be a subfolder of the repository.

    Raises:
        KernelTreeError: If the folder is not inside a git repository
    """
    try:
        return Repo(kernel_folder, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise KernelTreeError(f"{kernel_folder} is not a git repository!", cause=e) from e


def update_remote(
    kernel_folder: Path,
    config: Optional[StableConfig] = None,
    repo: Optional[Repo] = None,
) -> Repo:
    """
    Fetch all tags from linux-stable into the kernel tree.

    The process working directory is changed to the kernel folder for the
    rest of the run.

    Args:
        kernel_folder: Kernel source location
        config: Configuration holding the remote URL
        repo: Already opened repository (opened from kernel_folder if None)

    Returns:
        The kernel tree's repository

    Raises:
        KernelTreeError: If the folder cannot be entered or is not a repository
        RemoteError: If the fetch fails
    """
    config = config or DEFAULT_CONFIG

    try:
        os.chdir(kernel_folder)
    except OSError as e:
        raise KernelTreeError(f"Could not change into {kernel_folder}!", cause=e) from e

    if repo is None:
        repo = open_kernel_repo(kernel_folder)

    logger.debug(f"Fetching tags from {config.remote_url}")
    try:
        output = repo.git.fetch("--tags", config.remote_url)
    except GitCommandError as e:
        logger.debug(f"git fetch failed: {e.stderr}")
        raise RemoteError("linux-stable update failed!", cause=e) from e

    if output:
        logger.debug(output)
    success("linux-stable updated successfully!")
    return repo
