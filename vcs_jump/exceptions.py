"""Exception classes for vcs-jump.

Contains:
- VcsJumpError: Base exception, caught by the CLI and reported as "Error: ..."
- VcsCommandError: An external git/hg command failed or is missing
- NoVcsDetected: Neither git nor hg recognises the working directory
- UnsupportedOperation: The requested mode is not available for the backend
- EditorNotFound: No editor program could be resolved
- ConfigError: The user configuration file could not be read
"""


class VcsJumpError(Exception):
    """Base exception for vcs-jump errors."""

    pass


class VcsCommandError(VcsJumpError):
    """Raised when a version-control command fails."""

    pass


class NoVcsDetected(VcsJumpError):
    """Raised when the current directory is not inside a git or hg repository."""

    pass


class UnsupportedOperation(VcsJumpError):
    """Raised when a mode is requested that the active backend cannot serve."""

    pass


class EditorNotFound(VcsJumpError):
    """Raised when no editor program can be resolved."""

    pass


class ConfigError(VcsJumpError):
    """Raised when there's an error with the user configuration."""

    pass
