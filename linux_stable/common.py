"""
Common utility functions for the linux-stable updater.
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Tuple

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text


# Rich console for output; status lines are never wrapped
console = Console(soft_wrap=True)


def setup_logging(
    name: str = "linux_stable",
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Set up logging with Rich handler."""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    console_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


# Default logger
logger = setup_logging()


def run_command(cmd: List[str], cwd: Optional[Path] = None) -> Tuple[int, str, str]:
    """
    Run a command to completion and capture its output.

    Returns:
        Tuple of (return_code, stdout, stderr); -1 when the command cannot be started
    """
    logger.debug(f"Running: {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True)
    except OSError as e:
        return -1, "", str(e)
    return result.returncode, result.stdout, result.stderr


def header(title: str, style: str = "bold red") -> None:
    """Print a framed header pointing out what is being done."""
    console.print()
    console.print(Panel.fit(Text(title, style=style), border_style=style))


def success(message: str) -> None:
    """Print a statement in bold green."""
    console.print()
    console.print(Text(message, style="bold green"))


def warn(message: str) -> None:
    """Print a warning in bold yellow."""
    console.print()
    console.print(Text(message, style="bold yellow"))


def error(message: str) -> None:
    """Print an error in bold red."""
    console.print()
    console.print(Text(message, style="bold red"))


def label(name: str, value: str) -> None:
    """Print a bold label followed by its value."""
    line = Text()
    line.append(f"{name}:", style="bold")
    line.append(f" {value}")
    console.print(line)
