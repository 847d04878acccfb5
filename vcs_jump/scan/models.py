"""Data models for vcs-jump scanners.

Contains:
- JumpMode: Which scanner runs for an invocation
- LocationRecord: A single jump target
"""

from dataclasses import dataclass
from enum import Enum


class JumpMode(str, Enum):
    """Scan modes selectable from the command line."""

    DIFF = "diff"
    MERGE = "merge"
    GREP = "grep"
    WS = "ws"


@dataclass(frozen=True)
class LocationRecord:
    """One jump target: a file, a 1-based line and the text to show."""

    file: str
    line: int
    text: str

    def format(self) -> str:
        """Render the record as a quickfix line (path:line: text)."""
        return f"{self.file}:{self.line}: {self.text}"
