from dataclasses import dataclass, field
from enum import Enum
from typing import List

from pathsh.config import PATH_SEPARATOR
from pathsh.history import HistoryLog


class ShellError(Exception):
    """Recoverable failure: report the error message and keep looping."""


class InvocationMode(Enum):
    """How a child replaces its program image."""
    LIST = "execl"    # short name + up to MAX_ARGS separate arguments
    VECTOR = "execv"  # full argv as typed, in one list


@dataclass
class ShellState:
    """Process-wide shell context, created once at startup."""
    mode: InvocationMode = InvocationMode.LIST
    search_path: List[str] = field(default_factory=list)
    path_spec: str = ""  # what the user typed, printed back by `path`
    history: HistoryLog = field(default_factory=HistoryLog)

    def set_path(self, spec):
        # Empty entries are dropped; the raw spec is kept for display
        self.search_path = [d for d in spec.split(PATH_SEPARATOR) if d]
        self.path_spec = spec
