import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass

from pathsh.state import ShellError
from pathsh.terminal import STDOUT_FD, report_error


@dataclass
class Redirection:
    saved_fd: int
    file_fd: int


def begin_redirect(filename):
    """
    Open (create/truncate) filename and put it in place of stdout.
    Returns a Redirection handle for end_redirect().
    """
    try:
        file_fd = os.open(filename, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o666)
    except OSError as e:
        raise ShellError(f"cannot open {filename}: {e}") from e

    sys.stdout.flush()
    try:
        saved_fd = os.dup(STDOUT_FD)
    except OSError as e:
        os.close(file_fd)
        raise ShellError(f"cannot save stdout: {e}") from e
    try:
        os.dup2(file_fd, STDOUT_FD)
    except OSError as e:
        os.close(saved_fd)
        os.close(file_fd)
        raise ShellError(f"cannot redirect stdout: {e}") from e
    return Redirection(saved_fd=saved_fd, file_fd=file_fd)


def end_redirect(handle):
    """Put the original stdout back and close the file"""
    sys.stdout.flush()
    try:
        os.dup2(handle.saved_fd, STDOUT_FD)
    except OSError:
        report_error()
    finally:
        os.close(handle.saved_fd)
        os.close(handle.file_fd)


@contextmanager
def redirect_stdout(filename):
    """
    Wrap one dispatch step. Yields True when output goes to filename,
    False when there was nothing to redirect or it failed (already reported).
    """
    if filename is None:
        yield False
        return

    try:
        handle = begin_redirect(filename)
    except ShellError:
        report_error()
        yield False
        return

    try:
        yield True
    finally:
        end_redirect(handle)
