import os
import re
import sys

from pathsh.state import ShellError
from pathsh.terminal import write_out

_COUNT = re.compile(r"[+-]?[0-9]+")


def builtin_exit(args):
    """Leave the shell; takes no arguments"""
    if args:
        raise ShellError("exit: takes no arguments")
    sys.stdout.flush()
    raise SystemExit(0)


def builtin_cd(args):
    """Change directory; exactly one argument"""
    if len(args) != 1:
        raise ShellError("cd: expects exactly one argument")
    try:
        os.chdir(args[0])
    except OSError as e:
        raise ShellError(f"cd: {e}") from e


def builtin_path(state, args):
    """Print the search path, or replace it with a colon-separated list"""
    if not args:
        if state.path_spec:
            write_out(state.path_spec + "\n")
        return
    # Directories are not checked here, only when a command is resolved
    state.set_path(args[0])


def builtin_history(state, args):
    """Show the whole history, or the last n entries"""
    if not args:
        state.history.print_last()
        return
    if not _COUNT.fullmatch(args[0]):
        raise ShellError(f"history: not a number: {args[0]}")
    n = int(args[0])
    if not state.history.print_last(n):
        raise ShellError(f"history: {n} out of range")


BUILTINS = {
    "exit": lambda state, args: builtin_exit(args),
    "cd": lambda state, args: builtin_cd(args),
    "path": builtin_path,
    "history": builtin_history,
}


def is_builtin(name):
    return name in BUILTINS


def execute_builtin(state, argv):
    """
    Execute a built-in command if argv names one.
    Returns True when handled; raises ShellError on misuse.
    """
    if not argv or not is_builtin(argv[0]):
        return False
    BUILTINS[argv[0]](state, argv[1:])
    return True
