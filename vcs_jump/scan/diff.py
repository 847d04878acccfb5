"""Diff scanner.

Contains:
- scan_diff: Run the backend's diff and collect hunk locations
- parse_diff: Turn unified diff text into LocationRecords
"""

import re
from typing import Callable, Optional, Sequence

from vcs_jump.scan.models import LocationRecord
from vcs_jump.vcs.locator import VcsInfo, VcsKind
from vcs_jump.vcs.paths import relativize
from vcs_jump.vcs.runner import run_vcs_command


# Base diff invocation per backend; user arguments are appended.
DIFF_COMMANDS = {
    VcsKind.GIT: ["diff", "--relative"],
    VcsKind.HG: ["diff", "--git"],
}

_NEW_FILE_RE = re.compile(r"^\+\+\+ b/(.*)")
_HUNK_RE = re.compile(r"^@@ .*?\+(\d+)")
_CHANGE_RE = re.compile(r"^[-+](.*)")


def parse_diff(
    diff_output: str,
    relativize_path: Callable[[str], str] = lambda path: path,
) -> list[LocationRecord]:
    """Parse unified diff output into jump locations.

    Only the first changed line after a known line number is reported; the
    number is then forgotten until the next @@ header. Further +/- lines in
    the same hunk are dropped, matching git-jump.

    Args:
        diff_output: Raw output of git/hg diff.
        relativize_path: Maps a "+++ b/" path to a cwd-usable path.

    Returns:
        LocationRecords in diff order. Empty when there are no hunks.
    """
    records: list[LocationRecord] = []
    current_file: Optional[str] = None
    line_number: Optional[int] = None

    for line in diff_output.split("\n"):
        match = _NEW_FILE_RE.match(line)
        if match:
            # git appends a tab to paths containing spaces
            current_file = relativize_path(match.group(1).rstrip("\t"))
            line_number = None
            continue
        if line.startswith("+++ /dev/null"):
            # Deleted file, nothing left to open
            current_file = None
            line_number = None
            continue

        if current_file is None:
            continue

        if line.startswith("diff "):
            line_number = None
            continue

        match = _HUNK_RE.match(line)
        if match:
            line_number = int(match.group(1))
            continue

        if line_number is None:
            continue

        if line.startswith(" "):
            line_number += 1
            continue

        match = _CHANGE_RE.match(line)
        if match:
            # "+0,0" hunks (file emptied) still need a valid line
            records.append(
                LocationRecord(file=current_file, line=max(line_number, 1), text=match.group(1).strip())
            )
            line_number = None

    return records


def scan_diff(vcs: VcsInfo, args: Sequence[str] = ()) -> list[LocationRecord]:
    """Collect one location per diff hunk position.

    Args:
        vcs: The detected backend.
        args: Extra arguments forwarded to the diff command verbatim.

    Returns:
        List of LocationRecords.

    Raises:
        VcsCommandError: If the diff command fails.
    """
    output = run_vcs_command(vcs, DIFF_COMMANDS[vcs.kind] + list(args))
    return parse_diff(output, lambda path: relativize(vcs, path))
