"""
Applying a linux-stable version range to the kernel tree.
"""

from git import Repo
from git.exc import GitCommandError

from linux_stable.common import header, logger
from linux_stable.exceptions import ApplyConflictError
from linux_stable.models import SyncOutcome, UpdateMethod, VersionPlan


CHERRY_PICK_INSTRUCTIONS = (
    "Resolve conflicts then run:\n\n"
    "git add . && git cherry-pick --continue"
)

MERGE_INSTRUCTIONS = "Resolve conflicts then run git commit!"


def _log_git_output(output: str) -> None:
    for line in output.splitlines():
        logger.info(line)


def cherry_pick_range(repo: Repo, plan: VersionPlan) -> SyncOutcome:
    """
    Cherry-pick every commit between the current and target tags.

    Raises:
        ApplyConflictError: If git stops on a conflict; the cherry-pick stays in progress
    """
    range_expression = plan.range_expression
    logger.debug(f"Cherry-picking {range_expression}")
    try:
        _log_git_output(repo.git.cherry_pick(range_expression))
    except GitCommandError as e:
        logger.debug(f"git cherry-pick failed: {e.stderr}")
        raise ApplyConflictError(
            "Cherry-pick needs manual intervention!",
            CHERRY_PICK_INSTRUCTIONS,
            cause=e,
        ) from e

    header(f"{plan.target} PICKED CLEANLY!", "bold green")
    return SyncOutcome.PICKED


def merge_tag(repo: Repo, plan: VersionPlan) -> SyncOutcome:
    """
    Merge the target tag without opening an editor.

    Raises:
        ApplyConflictError: If git stops on a conflict; the merge stays in progress
    """
    tag = plan.target.tag
    logger.debug(f"Merging {tag}")
    try:
        _log_git_output(repo.git.merge("--no-edit", tag, env={"GIT_MERGE_VERBOSITY": "1"}))
    except GitCommandError as e:
        logger.debug(f"git merge failed: {e.stderr}")
        raise ApplyConflictError(
            "Merge needs manual intervention!",
            MERGE_INSTRUCTIONS,
            cause=e,
        ) from e

    header(f"{plan.target} MERGED CLEANLY!", "bold green")
    return SyncOutcome.MERGED


def update_to_target_version(
    repo: Repo,
    plan: VersionPlan,
    method: UpdateMethod,
) -> SyncOutcome:
    """Bring the kernel tree up to the plan's target with the given method."""
    if method is UpdateMethod.CHERRY_PICK:
        return cherry_pick_range(repo, plan)
    if method is UpdateMethod.MERGE:
        return merge_tag(repo, plan)
    raise ValueError(f"Unknown update method: {method}")
