#!/usr/bin/env python3
"""
pathsh - Python 3
Features:
 - Builtins: exit, cd <dir>, path [dir:dir...], history [n]
 - External commands found along the shell's own search path
 - Output redirection with a single ">"
 - Bounded history of the last 50 input lines
Run with -execlp (default) or -execvp to pick how programs are started
(-execl and -execv are accepted too).
"""

import argparse

from pathsh.config import DEFAULT_BANNER, EXECL_BANNER, EXECV_BANNER
from pathsh.shell import main_loop
from pathsh.state import InvocationMode, ShellState
from pathsh.terminal import report_error, write_out


def parse_args(args=None):
    parser = argparse.ArgumentParser(
        prog="pathsh",
        description="pathsh - a small shell with its own search path",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-execlp", "-execl", dest="mode", action="store_const", const=InvocationMode.LIST,
        help="start programs with execl() (default)",
    )
    parser.add_argument(
        "-execvp", "-execv", dest="mode", action="store_const", const=InvocationMode.VECTOR,
        help="start programs with execv()",
    )
    return parser.parse_known_args(args)


def select_mode(args=None):
    """
    Pick the invocation mode from the command line and announce it.
    Unknown arguments are reported but the shell still starts with execl().
    """
    options, unknown = parse_args(args)
    if unknown:
        report_error()
        write_out(DEFAULT_BANNER)
        return InvocationMode.LIST
    if options.mode is InvocationMode.VECTOR:
        write_out(EXECV_BANNER)
        return InvocationMode.VECTOR
    if options.mode is InvocationMode.LIST:
        write_out(EXECL_BANNER)
        return InvocationMode.LIST
    write_out(DEFAULT_BANNER)
    return InvocationMode.LIST


def main():
    mode = select_mode()
    main_loop(ShellState(mode=mode))


if __name__ == "__main__":
    main()
