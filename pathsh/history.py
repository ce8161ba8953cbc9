import sys
from collections import deque

from pathsh.config import HISTORY_CAPACITY
from pathsh.terminal import write_out

try:
    import readline
except ImportError:
    readline = None

BLANK_ENTRY = " "


def init_readline():
    """Configure readline so interactive editing behaves like a Linux terminal"""
    if readline is None or not sys.stdin.isatty():
        return False
    try:
        readline.parse_and_bind("set editing-mode emacs")

        # Up/down arrows walk through history
        readline.parse_and_bind("\\e[A: previous-history")
        readline.parse_and_bind("\\e[B: next-history")

        # Ctrl+Left/Right jump between words
        readline.parse_and_bind("\\e[1;5D: backward-word")
        readline.parse_and_bind("\\e[1;5C: forward-word")

        # Lines are added by HistoryLog, not by input()
        readline.set_auto_history(False)
        readline.clear_history()
        readline.set_history_length(HISTORY_CAPACITY)
        return True
    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)
        return False


class HistoryLog:
    """Bounded log of input lines, oldest first."""

    def __init__(self, capacity=HISTORY_CAPACITY, mirror_readline=False):
        self.capacity = capacity
        self.mirror_readline = mirror_readline and readline is not None
        self._entries = deque(maxlen=capacity)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def append(self, line):
        """Record a line; the oldest entry falls off once capacity is reached."""
        entry = line if line else BLANK_ENTRY
        self._entries.append(entry)
        if self.mirror_readline and entry != BLANK_ENTRY:
            readline.add_history(entry)
            if readline.get_current_history_length() > self.capacity:
                readline.remove_history_item(0)

    def last(self, n=None):
        if n is None:
            return list(self._entries)
        skip = max(0, len(self._entries) - n)
        return list(self._entries)[skip:]

    def print_last(self, n=None):
        """Print the last n entries (all when n is None), oldest first.

        Returns False without printing when n is outside [0, capacity].
        """
        if n is not None and not 0 <= n <= self.capacity:
            return False
        for entry in self.last(n):
            write_out(entry + "\n")
        return True
