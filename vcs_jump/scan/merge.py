"""Merge-conflict scanner.

Contains:
- scan_merge: Locate conflict markers in files with unresolved merges
- list_unmerged_files: Files the backend reports as unresolved
- find_conflict_markers: Marker lines within one file
"""

from pathlib import Path
from typing import Sequence

from vcs_jump.scan.models import LocationRecord
from vcs_jump.vcs.locator import VcsInfo, VcsKind
from vcs_jump.vcs.runner import run_vcs_command


CONFLICT_MARKER = "<" * 7


def _parse_git_unmerged(output: str) -> list[str]:
    # "<mode> <hash> <stage>\t<path>", one line per stage
    files = []
    for line in output.split("\n"):
        if "\t" in line:
            files.append(line.split("\t", 1)[1])
    return files


def _parse_hg_unresolved(output: str) -> list[str]:
    # "U path" for unresolved, "R path" for resolved
    files = []
    for line in output.split("\n"):
        if line.startswith("U "):
            files.append(line[2:])
    return files


def list_unmerged_files(vcs: VcsInfo) -> list[str]:
    """Get the sorted, deduplicated list of files with unresolved merges.

    Args:
        vcs: The detected backend.

    Returns:
        File paths relative to the working directory.

    Raises:
        VcsCommandError: If the listing command fails.
    """
    if vcs.kind is VcsKind.GIT:
        files = _parse_git_unmerged(run_vcs_command(vcs, ["ls-files", "-u"]))
    else:
        files = _parse_hg_unresolved(run_vcs_command(vcs, ["resolve", "-l"]))
    return sorted(set(files))


def find_conflict_markers(file_path: str) -> list[LocationRecord]:
    """Find lines starting with a conflict marker in a file.

    Args:
        file_path: Path of the file, as it should appear in the records.

    Returns:
        One LocationRecord per marker line. Empty if the file is missing.
    """
    path = Path(file_path)
    if not path.is_file():
        return []

    records = []
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
        content = f.read()
    # Number lines by "\n" only, like grep -n
    for number, line in enumerate(content.split("\n"), start=1):
        if line.startswith(CONFLICT_MARKER):
            records.append(LocationRecord(file=file_path, line=number, text=line.strip()))
    return records


def scan_merge(vcs: VcsInfo, args: Sequence[str] = ()) -> list[LocationRecord]:
    """Collect the conflict markers of every unresolved file.

    Args:
        vcs: The detected backend.
        args: Accepted for a uniform scanner signature and ignored.

    Returns:
        List of LocationRecords, files in sorted order.
    """
    records: list[LocationRecord] = []
    for file_path in list_unmerged_files(vcs):
        records.extend(find_conflict_markers(file_path))
    return records
