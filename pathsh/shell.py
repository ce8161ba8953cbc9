import sys

from pathsh.builtin import execute_builtin
from pathsh.config import PROMPT
from pathsh.executor import launch
from pathsh.history import init_readline
from pathsh.parser import parse_command, strip_line
from pathsh.redirection import redirect_stdout
from pathsh.state import ShellError, ShellState
from pathsh.terminal import report_error, write_out, write_prompt


def prepare_stdin():
    """Undecodable input bytes become U+FFFD instead of failing the read"""
    reconfigure = getattr(sys.stdin, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="replace")


def read_line(use_readline=False):
    """
    Show the prompt and read one line.
    Returns the line without its terminator, or None if the read failed.
    """
    if use_readline:
        try:
            return strip_line(input(PROMPT))
        except (EOFError, OSError, UnicodeDecodeError):
            return None
        except KeyboardInterrupt:
            write_out("\n")
            return None

    write_prompt()
    try:
        line = sys.stdin.readline()
    except (OSError, UnicodeDecodeError):
        return None
    if not line:
        return None
    return strip_line(line)


def dispatch(state, cmd):
    """Run a parsed command: built-in first, otherwise an external program"""
    if execute_builtin(state, cmd.argv):
        return
    launch(cmd.argv, state.search_path, state.mode)


def run_once(state, line):
    """
    Handle one input line: record, parse, dispatch under redirection.
    Recoverable errors are reported here and never escape.
    """
    state.history.append(line)

    cmd = parse_command(line)
    if cmd.redirect_error:
        report_error()
    if cmd.name is None:
        report_error()
        return

    with redirect_stdout(cmd.redirect_target):
        try:
            dispatch(state, cmd)
        except ShellError:
            report_error()


def main_loop(state=None):
    """Prompt, read, run; forever. Only `exit` (or a fatal error) leaves."""
    if state is None:
        state = ShellState()

    prepare_stdin()
    use_readline = init_readline()
    state.history.mirror_readline = use_readline

    while True:
        line = read_line(use_readline)
        if line is None:
            continue
        run_once(state, line)
