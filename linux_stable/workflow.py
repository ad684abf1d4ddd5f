"""
Main linux-stable update workflow orchestration.
"""

from typing import Optional

from git import Repo

from linux_stable.common import console, header, label, logger
from linux_stable.config import DEFAULT_CONFIG, StableConfig
from linux_stable.exceptions import UsageError
from linux_stable.models import SyncOutcome, UpdateOptions
from linux_stable.remote import update_remote
from linux_stable.updater import update_to_target_version
from linux_stable.versions import get_current_version, get_latest_version, plan_update


def run_stable_update(
    options: UpdateOptions,
    config: Optional[StableConfig] = None,
    repo: Optional[Repo] = None,
) -> SyncOutcome:
    """
    Run the complete linux-stable update.

    Steps:
        1. Fetch linux-stable tags (stops here with --fetch-only)
        2. Calculate current and latest versions (stops here with --print-latest)
        3. Compute and validate the target version
        4. Cherry-pick or merge up to the target

    Args:
        options: Options from the command line
        config: Environment-level configuration
        repo: Already opened kernel tree repository

    Returns:
        The terminal branch the run reached

    Raises:
        StableUpdateError: On any failure; nothing here exits the process
    """
    config = config or DEFAULT_CONFIG
    logger.debug(f"Update options: {options}")

    if options.update_method is None and options.needs_update_method:
        raise UsageError("Neither cherry-pick nor merge were specified, please supply one!")

    header("Updating linux-stable")
    repo = update_remote(options.kernel_folder, config, repo)
    if options.fetch_only:
        return SyncOutcome.FETCHED

    header("Calculating versions")
    current = get_current_version(options.kernel_folder, config)
    latest = get_latest_version(repo, current.series)

    label("Current kernel version", str(current))
    console.print()
    label("Latest kernel version", str(latest))
    if options.print_latest_only:
        console.print()
        return SyncOutcome.PRINTED

    plan = plan_update(current, latest, options)

    console.print()
    label("Target kernel version", str(plan.target))
    console.print()

    return update_to_target_version(repo, plan, options.update_method)
