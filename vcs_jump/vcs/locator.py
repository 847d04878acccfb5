"""Backend detection.

Contains:
- VcsKind: The supported version-control systems
- VcsInfo: Detected backend and repository root
- detect: Find which VCS manages the working directory
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from vcs_jump.exceptions import NoVcsDetected, VcsCommandError
from vcs_jump.vcs.runner import run_command


class VcsKind(str, Enum):
    """Supported backends. The value is also the executable name."""

    GIT = "git"
    HG = "hg"


@dataclass(frozen=True)
class VcsInfo:
    """The backend serving this invocation.

    Computed once by the CLI and passed to every scanner.
    """

    kind: VcsKind
    root: Path


# Root queries, tried in order. git comes first so a git checkout nested
# inside an hg working copy is never reported as hg.
_ROOT_QUERIES = [
    (VcsKind.GIT, ["git", "rev-parse", "--show-toplevel"]),
    (VcsKind.HG, ["hg", "root"]),
]


def detect(cwd: Optional[Path] = None) -> VcsInfo:
    """Detect the version-control system of the working directory.

    Args:
        cwd: Directory to inspect (defaults to the current directory).

    Returns:
        VcsInfo with the backend kind and absolute repository root.

    Raises:
        NoVcsDetected: If neither git nor hg recognises the directory.
    """
    for kind, argv in _ROOT_QUERIES:
        try:
            output = run_command(argv, cwd=cwd)
        except VcsCommandError:
            continue

        root = output.strip()
        if not root:
            continue
        root_path = Path(root)
        if not root_path.is_absolute():
            root_path = (cwd or Path.cwd()) / root_path
        return VcsInfo(kind=kind, root=root_path)

    raise NoVcsDetected(
        "Not in a git or hg repository. Please run this command from within a repository."
    )
