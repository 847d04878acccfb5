"""Version-control command runner.

Contains:
- run_command: Run an external command and return its stdout
- run_vcs_command: Run a git or hg subcommand for the detected backend
"""

import subprocess
from pathlib import Path
from typing import Optional, Sequence

from vcs_jump.exceptions import VcsCommandError


def run_command(
    argv: Sequence[str],
    cwd: Optional[Path] = None,
    ok_returncodes: Sequence[int] = (0,),
) -> str:
    """Run a command synchronously and return its output.

    The whole output is buffered in memory; nothing is streamed.

    Args:
        argv: The program followed by its arguments.
        cwd: Directory to run in (defaults to the current directory).
        ok_returncodes: Exit statuses that count as success.

    Returns:
        The stdout of the command, unmodified.

    Raises:
        VcsCommandError: If the program is missing or exits with another status.
    """
    argv = list(argv)
    try:
        result = subprocess.run(
            argv,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            cwd=cwd,
        )
    except FileNotFoundError:
        raise VcsCommandError(f"{argv[0]} is not installed or not in PATH.")

    if result.returncode not in ok_returncodes:
        stderr = (result.stderr or "").strip()
        raise VcsCommandError(
            f"Command failed ({result.returncode}): {' '.join(argv)}\n{stderr}".rstrip()
        )
    return result.stdout


def run_vcs_command(
    vcs,
    args: Sequence[str],
    ok_returncodes: Sequence[int] = (0,),
) -> str:
    """Run a subcommand of the detected VCS tool.

    Args:
        vcs: The VcsInfo of the current invocation.
        args: Arguments after the program name (e.g. ["diff", "--relative"]).
        ok_returncodes: Exit statuses that count as success.

    Returns:
        The stdout of the command.
    """
    return run_command([vcs.kind.value] + list(args), ok_returncodes=ok_returncodes)
