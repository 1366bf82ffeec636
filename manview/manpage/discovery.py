"""Program discovery and man/help text fetching."""
from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Iterable, List, Optional

from ..config import DEFAULT_BIN_DIRS, HELP_TIMEOUT, MAN_TIMEOUT, MANWIDTH

logger = logging.getLogger(__name__)


def get_all_executables(directories: Optional[Iterable[str]] = None) -> List[str]:
    """Get all unique program names found in the binary directories.

    Args:
        directories: Directories to scan. If None, uses default from config.

    Returns:
        Program names sorted case-insensitively
    """
    if directories is None:
        directories = DEFAULT_BIN_DIRS

    programs = set()
    for directory in directories:
        bin_dir = Path(directory)
        if not bin_dir.is_dir():
            continue

        try:
            for entry in bin_dir.iterdir():
                if entry.is_file():
                    programs.add(entry.name)
        except OSError as e:
            logger.warning("Skipping %s: %s", bin_dir, e)

    return sorted(programs, key=lambda name: (name.lower(), name))


def _run(args: List[str], timeout: float, env: Optional[dict] = None) -> Optional[subprocess.CompletedProcess]:
    try:
        return subprocess.run(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            stdin=subprocess.DEVNULL,
            text=True,
            errors='replace',
            timeout=timeout,
            env=env
        )
    except subprocess.TimeoutExpired:
        logger.warning("%s timed out after %ss", ' '.join(args), timeout)
    except OSError as e:
        logger.warning("Could not run %s: %s", args[0], e)
    return None


def get_man_page(program: str, timeout: float = MAN_TIMEOUT) -> Optional[str]:
    """Run `man <program>` and return its raw output, or None."""
    # Merge environment variables
    env = os.environ.copy()
    env['MANWIDTH'] = MANWIDTH
    env['MANPAGER'] = 'cat'  # Disable pager

    result = _run(['man', program], timeout, env)
    if result is None:
        return None

    if result.returncode != 0 or not result.stdout.strip():
        logger.debug("No man page for %s (exit %s)", program, result.returncode)
        return None

    return result.stdout


def get_help_text(program: str, timeout: float = HELP_TIMEOUT) -> Optional[str]:
    """Run `<program> --help` and return its raw output, or None.

    Many programs print usage to stderr, so it is used when stdout is empty.
    """
    result = _run([program, '--help'], timeout)
    if result is None:
        return None

    output = result.stdout if result.stdout.strip() else result.stderr
    if not output.strip():
        logger.debug("No --help output for %s", program)
        return None

    return output
