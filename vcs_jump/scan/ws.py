"""Whitespace-error scanner built on "git diff --check"."""

import re
from typing import Sequence

from vcs_jump.exceptions import UnsupportedOperation
from vcs_jump.scan.models import LocationRecord
from vcs_jump.vcs.locator import VcsInfo, VcsKind
from vcs_jump.vcs.runner import run_vcs_command


_CHECK_RE = re.compile(r"^(.+?):(\d+): (.*)$")


def parse_check(check_output: str) -> list[LocationRecord]:
    """Parse "path:line: message" lines, skipping the echoed "+content" lines."""
    records = []
    for line in check_output.split("\n"):
        if line.startswith(("+", "-", " ")):
            continue
        match = _CHECK_RE.match(line)
        if match:
            records.append(
                LocationRecord(file=match.group(1), line=int(match.group(2)), text=match.group(3).strip())
            )
    return records


def scan_ws(vcs: VcsInfo, args: Sequence[str] = ()) -> list[LocationRecord]:
    """Collect whitespace errors introduced by the diff.

    Raises:
        UnsupportedOperation: If the backend is not git.
    """
    if vcs.kind is not VcsKind.GIT:
        raise UnsupportedOperation(f"ws mode is only supported for git, not {vcs.kind.value}.")

    # --check sets bits in the exit status when it finds problems
    output = run_vcs_command(
        vcs,
        ["diff", "--check", "--relative"] + list(args),
        ok_returncodes=(0, 1, 2, 3),
    )
    return parse_check(output)
