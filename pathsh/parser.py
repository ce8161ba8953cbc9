import re
from dataclasses import dataclass, field
from typing import List, Optional

from pathsh.config import MAX_ARGS, MAX_TOKENS, REDIRECT_TOKEN, WHITESPACE

_SPLIT = re.compile(f"[{re.escape(WHITESPACE)}]+")


@dataclass
class ParsedCommand:
    """One input line after tokenizing: argv plus optional redirect target."""
    argv: List[str] = field(default_factory=list)
    redirect_target: Optional[str] = None
    redirect_error: bool = False  # ">" seen with no filename after it

    @property
    def name(self):
        return self.argv[0] if self.argv else None


def strip_line(line):
    """Drop the line terminator and a trailing carriage return"""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def tokenize(line):
    """Split a line on spaces/tabs/newlines. No quoting, no escapes."""
    return [tok for tok in _SPLIT.split(line) if tok]


def parse_command(line):
    """
    Parse one line into a ParsedCommand.

    Only the first MAX_TOKENS positions are scanned. ">" takes a position
    and swallows the next token as the redirect target; everything else
    fills argv up to MAX_ARGS + 1 slots and the rest is dropped.
    """
    tokens = tokenize(line)
    cmd = ParsedCommand()
    i = 0
    pos = 0
    while pos < MAX_TOKENS and i < len(tokens):
        tok = tokens[i]
        i += 1
        pos += 1
        if tok == REDIRECT_TOKEN:
            if i < len(tokens):
                cmd.redirect_target = tokens[i]
                cmd.redirect_error = False
                i += 1
            else:
                cmd.redirect_target = None
                cmd.redirect_error = True
        elif len(cmd.argv) < MAX_ARGS + 1:
            cmd.argv.append(tok)
    return cmd
