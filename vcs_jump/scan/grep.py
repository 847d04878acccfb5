"""Grep scanner.

Contains:
- scan_grep: Run git grep and collect its matches
- parse_grep: Turn "path:line:text" output into LocationRecords
"""

import re
from typing import Sequence

from vcs_jump.exceptions import UnsupportedOperation
from vcs_jump.scan.models import LocationRecord
from vcs_jump.vcs.locator import VcsInfo, VcsKind
from vcs_jump.vcs.runner import run_vcs_command


_BLANKS_RE = re.compile(r"[ \t]+")
_MATCH_RE = re.compile(r"^(.+?):(\d+):(.*)$")


def parse_grep(grep_output: str) -> list[LocationRecord]:
    """Parse line-numbered grep output.

    Args:
        grep_output: Raw output of "git grep -n".

    Returns:
        LocationRecords for every line that carries a path and line number.
    """
    records = []
    for raw in grep_output.split("\n"):
        line = _BLANKS_RE.sub(" ", raw).lstrip()
        match = _MATCH_RE.match(line)
        if not match:
            continue
        number = int(match.group(2))
        if number < 1:
            continue
        records.append(
            LocationRecord(file=match.group(1), line=number, text=match.group(3).strip())
        )
    return records


def scan_grep(vcs: VcsInfo, args: Sequence[str] = ()) -> list[LocationRecord]:
    """Search tracked files and collect the matches.

    Args:
        vcs: The detected backend.
        args: Pattern and options forwarded to git grep.

    Returns:
        List of LocationRecords. Empty when nothing matches.

    Raises:
        UnsupportedOperation: If the backend is not git.
        VcsCommandError: If git grep fails (bad pattern, etc.).
    """
    if vcs.kind is not VcsKind.GIT:
        raise UnsupportedOperation(f"grep mode is only supported for git, not {vcs.kind.value}.")

    # git grep exits 1 when there is no match
    output = run_vcs_command(vcs, ["grep", "-n"] + list(args), ok_returncodes=(0, 1))
    return parse_grep(output)
