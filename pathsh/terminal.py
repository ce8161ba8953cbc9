import os

from pathsh.config import ERROR_MESSAGE, PROMPT

STDOUT_FD = 1
STDERR_FD = 2


def write_out(text):
    """Write text straight to file descriptor 1 (follows any redirection)"""
    os.write(STDOUT_FD, text.encode())


def write_prompt():
    write_out(PROMPT)


def report_error():
    """Print the one and only error message"""
    os.write(STDERR_FD, ERROR_MESSAGE.encode())
