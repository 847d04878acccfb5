"""Jump to interesting VCS locations (diff hunks, conflicts, grep hits) in an editor."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("vcs-jump")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
