import os
import sys

import psutil

from pathsh.config import EXEC_FAILURE_STATUS, MAX_ARGS
from pathsh.state import InvocationMode, ShellError
from pathsh.terminal import report_error


def command_name(cmd_path):
    """Return the command without its path, eg "/bin/ls" -> "ls" """
    return cmd_path.rsplit("/", 1)[-1]


def candidate_path(directory, cmd):
    if directory.endswith("/"):
        return directory + cmd
    return directory + "/" + cmd


def resolve_command(cmd, search_path):
    """
    Look for cmd along search_path, in order.
    Returns the first executable candidate, or None.
    """
    for directory in search_path:
        if not directory:
            continue
        candidate = candidate_path(directory, cmd)
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate
    return None


def build_exec_args(argv, mode):
    """
    Arguments handed to the exec call for the given mode.

    LIST passes the short command name followed by at most MAX_ARGS
    arguments; VECTOR passes argv unchanged.
    """
    if mode is InvocationMode.LIST:
        return [command_name(argv[0])] + list(argv[1:1 + MAX_ARGS])
    return list(argv)


def exec_child(cmd_path, argv, mode):
    """Runs in the child: replace the program image, never returns"""
    args = build_exec_args(argv, mode)
    try:
        if mode is InvocationMode.LIST:
            os.execl(cmd_path, *args)
        else:
            os.execv(cmd_path, args)
    except OSError:
        report_error()
    finally:
        os._exit(EXEC_FAILURE_STATUS)


def launch(argv, search_path, mode):
    """
    Resolve argv[0] along search_path, run it in a child process and
    wait for it. Returns the child's exit status.
    """
    cmd_path = resolve_command(argv[0], search_path)
    if cmd_path is None:
        raise ShellError(f"{argv[0]}: not found")

    sys.stdout.flush()
    sys.stderr.flush()
    try:
        pid = os.fork()
    except OSError:
        # Out of processes: nothing sensible left to do
        report_error()
        raise SystemExit(1)

    if pid == 0:
        exec_child(cmd_path, argv, mode)

    return psutil.Process(pid).wait()
