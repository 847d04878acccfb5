"""Version-control backend access for vcs-jump.

This package provides:
- runner: run_command, run_vcs_command
- locator: VcsKind, VcsInfo, detect
- paths: relativize, cwd_prefix
"""

# Runner utilities
from vcs_jump.vcs.runner import (
    run_command,
    run_vcs_command,
)

# Backend detection
from vcs_jump.vcs.locator import (
    VcsInfo,
    VcsKind,
    detect,
)

# Path utilities
from vcs_jump.vcs.paths import (
    cwd_prefix,
    relativize,
)


__all__ = [
    # Runner
    "run_command",
    "run_vcs_command",
    # Locator
    "VcsInfo",
    "VcsKind",
    "detect",
    # Paths
    "cwd_prefix",
    "relativize",
]
