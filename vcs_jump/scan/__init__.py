"""Scanners that turn VCS output into jump locations.

This package provides:
- models: JumpMode, LocationRecord
- diff: scan_diff, parse_diff
- merge: scan_merge, list_unmerged_files, find_conflict_markers
- grep: scan_grep, parse_grep
- ws: scan_ws, parse_check
- run_scan: Dispatch a JumpMode to its scanner
"""

from typing import Callable, Sequence

from vcs_jump.scan.models import JumpMode, LocationRecord
from vcs_jump.scan.diff import parse_diff, scan_diff
from vcs_jump.scan.merge import find_conflict_markers, list_unmerged_files, scan_merge
from vcs_jump.scan.grep import parse_grep, scan_grep
from vcs_jump.scan.ws import parse_check, scan_ws
from vcs_jump.vcs.locator import VcsInfo


Scanner = Callable[[VcsInfo, Sequence[str]], list[LocationRecord]]

SCANNERS: dict[JumpMode, Scanner] = {
    JumpMode.DIFF: scan_diff,
    JumpMode.MERGE: scan_merge,
    JumpMode.GREP: scan_grep,
    JumpMode.WS: scan_ws,
}


def run_scan(mode: JumpMode, vcs: VcsInfo, args: Sequence[str] = ()) -> list[LocationRecord]:
    """Run the scanner for a mode.

    Args:
        mode: The selected JumpMode.
        vcs: The detected backend, passed through to the scanner.
        args: Mode arguments from the command line.

    Returns:
        The scanner's LocationRecords.
    """
    return SCANNERS[mode](vcs, list(args))


__all__ = [
    # Models
    "JumpMode",
    "LocationRecord",
    # Scanners
    "scan_diff",
    "scan_merge",
    "scan_grep",
    "scan_ws",
    "run_scan",
    "SCANNERS",
    # Parsers
    "parse_diff",
    "parse_grep",
    "parse_check",
    "list_unmerged_files",
    "find_conflict_markers",
]
