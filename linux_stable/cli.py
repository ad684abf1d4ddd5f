"""
Command-line interface for the linux-stable updater.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from linux_stable.common import console, error, setup_logging
from linux_stable.config import StableConfig
from linux_stable.exceptions import KernelTreeError, StableUpdateError, UsageError
from linux_stable.models import UpdateMethod, UpdateMode, UpdateOptions
from linux_stable.workflow import run_stable_update


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

EPILOG = """\b
Defaults:
    If -l or -v are not specified, ONE version is picked at a time (e.g. 3.18.31 to 3.18.32)
    If -k is not specified, the current directory is assumed to be the kernel source folder
"""


class StableCommand(click.Command):
    """Click command printing parse errors in red and exiting with status 1."""

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            error(e.format_message())
            if e.ctx is not None:
                click.echo()
                click.echo(e.ctx.get_usage())
                click.echo(f"Try '{e.ctx.command_path} -h' for help.")
            raise click.exceptions.Exit(1) from e


def build_options(
    cherry_pick: bool,
    merge: bool,
    fetch_only: bool,
    kernel_folder: Optional[Path],
    latest: bool,
    print_latest: bool,
    target_version: Optional[str],
    config: StableConfig,
) -> UpdateOptions:
    """
    Validate parsed flags and turn them into update options.

    Raises:
        UsageError: If no update method, or both, were given
        KernelTreeError: If the kernel folder is missing or not a kernel tree
    """
    # If kernel source isn't specified, assume we're there
    kernel_folder = (kernel_folder or Path.cwd()).resolve()

    if cherry_pick and merge:
        raise UsageError("Only one of cherry-pick or merge may be specified!")

    update_method = None
    if cherry_pick:
        update_method = UpdateMethod.CHERRY_PICK
    elif merge:
        update_method = UpdateMethod.MERGE

    if target_version:
        update_mode = UpdateMode.EXPLICIT
    elif latest:
        update_mode = UpdateMode.LATEST
    else:
        update_mode = UpdateMode.ONE_STEP

    options = UpdateOptions(
        kernel_folder=kernel_folder,
        update_method=update_method,
        update_mode=update_mode,
        target_version=target_version,
        fetch_only=fetch_only,
        print_latest_only=print_latest,
    )

    if options.update_method is None and options.needs_update_method:
        raise UsageError("Neither cherry-pick nor merge were specified, please supply one!")
    if not kernel_folder.is_dir():
        raise KernelTreeError(
            "Invalid kernel source location specified! Folder does not exist",
            show_help=True,
        )
    if not config.is_kernel_tree(kernel_folder):
        raise KernelTreeError(
            f"Invalid kernel source location specified! No {config.build_descriptor} present",
            show_help=True,
        )

    return options


@click.command(cls=StableCommand, context_settings=CONTEXT_SETTINGS, epilog=EPILOG)
@click.option("--cherry-pick", "-c", is_flag=True,
              help="Call git cherry-pick when updating from upstream")
@click.option("--merge", "-m", is_flag=True,
              help="Call git merge when updating from upstream")
@click.option("--fetch-only", "-f", is_flag=True,
              help="Simply fetches the tags from linux-stable then exits")
@click.option("--kernel-folder", "-k", type=click.Path(path_type=Path),
              help="The kernel source's location, full path or relative to the current directory")
@click.option("--latest", "-l", is_flag=True,
              help="Updates to the latest version available for the current kernel tree")
@click.option("--print-latest", "-p", is_flag=True,
              help="Prints the latest version available for the current kernel tree then exits")
@click.option("--version", "-v", "target_version", metavar="VERSION",
              help="Updates to the specified version (e.g. -v 3.18.78)")
@click.option("--verbose", is_flag=True, help="Enable verbose output")
@click.pass_context
def main(
    ctx,
    cherry_pick: bool,
    merge: bool,
    fetch_only: bool,
    kernel_folder: Optional[Path],
    latest: bool,
    print_latest: bool,
    target_version: Optional[str],
    verbose: bool,
):
    """
    Merges/cherry-picks Linux upstream into a kernel tree.

    One of -c/--cherry-pick or -m/--merge is required unless only fetching
    or printing the latest version.
    """
    config = StableConfig.from_env()
    setup_logging(level=logging.DEBUG if verbose else logging.INFO, log_file=config.log_file)

    try:
        options = build_options(
            cherry_pick=cherry_pick,
            merge=merge,
            fetch_only=fetch_only,
            kernel_folder=kernel_folder,
            latest=latest,
            print_latest=print_latest,
            target_version=target_version,
            config=config,
        )
        run_stable_update(options, config)

    except StableUpdateError as e:
        error(e.message)
        if e.show_help:
            click.echo()
            click.echo(ctx.get_help())
        sys.exit(1)

    except Exception as e:
        error(f"Error: {e}")
        if verbose:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
