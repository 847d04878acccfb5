"""Path relativization for VCS-reported file names."""

import os
from pathlib import Path
from typing import Optional

from vcs_jump.vcs.locator import VcsInfo, VcsKind


def cwd_prefix(vcs: VcsInfo, cwd: Optional[Path] = None) -> str:
    """Get the working directory relative to the repository root.

    Args:
        vcs: The detected backend.
        cwd: Working directory (defaults to the current directory).

    Returns:
        Posix-style relative path, "." when cwd is the root itself.
    """
    here = os.path.realpath(cwd or os.getcwd())
    root = os.path.realpath(vcs.root)
    return Path(os.path.relpath(here, root)).as_posix()


def relativize(vcs: VcsInfo, path: str, cwd: Optional[Path] = None) -> str:
    """Make a VCS-reported path usable from the working directory.

    git is asked for cwd-relative output (diff --relative), so its paths
    pass through untouched. hg reports root-relative paths in its git-style
    diffs, so the cwd prefix is stripped once when present.

    Args:
        vcs: The detected backend.
        path: File path as printed by the backend.
        cwd: Working directory (defaults to the current directory).

    Returns:
        The path to hand to the editor.
    """
    if vcs.kind is VcsKind.GIT:
        return path

    prefix = cwd_prefix(vcs, cwd)
    if prefix == ".":
        return path

    prefix += "/"
    if path.startswith(prefix):
        return path[len(prefix):]
    return path
