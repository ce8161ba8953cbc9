import os

import pytest

from pathsh.builtin import execute_builtin, is_builtin
from pathsh.state import ShellError


def test_unknown_command_falls_through(state):
    assert not is_builtin("ls")
    assert execute_builtin(state, ["ls", "-l"]) is False


def test_exit_without_arguments(state):
    with pytest.raises(SystemExit) as excinfo:
        execute_builtin(state, ["exit"])
    assert excinfo.value.code == 0


def test_exit_with_argument_is_an_error(state):
    with pytest.raises(ShellError):
        execute_builtin(state, ["exit", "now"])


def test_cd_changes_directory(sandbox, state):
    (sandbox / "sub").mkdir()
    assert execute_builtin(state, ["cd", "sub"])
    assert os.getcwd() == str((sandbox / "sub").resolve())


def test_cd_parent(sandbox, state):
    (sandbox / "sub").mkdir()
    os.chdir("sub")
    execute_builtin(state, ["cd", ".."])
    assert os.getcwd() == str(sandbox.resolve())


def test_cd_missing_directory_leaves_cwd(sandbox, state):
    before = os.getcwd()
    with pytest.raises(ShellError):
        execute_builtin(state, ["cd", "nonexistent-dir"])
    assert os.getcwd() == before


@pytest.mark.parametrize("argv", [["cd"], ["cd", "a", "b"]])
def test_cd_arity(sandbox, state, argv):
    with pytest.raises(ShellError):
        execute_builtin(state, argv)


def test_path_unset_prints_nothing(state, capfd):
    execute_builtin(state, ["path"])
    out, err = capfd.readouterr()
    assert out == ""
    assert err == ""


def test_path_set_then_print(state, capfd):
    execute_builtin(state, ["path", "/a:/b"])
    assert state.search_path == ["/a", "/b"]
    execute_builtin(state, ["path"])
    out, _ = capfd.readouterr()
    assert out == "/a:/b\n"


def test_path_replaces_not_merges(state):
    execute_builtin(state, ["path", "/a:/b"])
    execute_builtin(state, ["path", "/c"])
    assert state.search_path == ["/c"]


def test_path_keeps_missing_directories(state):
    execute_builtin(state, ["path", "/no/such/dir:/bin/"])
    assert state.search_path == ["/no/such/dir", "/bin/"]


def test_path_skips_empty_entries_but_prints_verbatim(state, capfd):
    execute_builtin(state, ["path", "/a::/b"])
    assert state.search_path == ["/a", "/b"]
    execute_builtin(state, ["path"])
    out, _ = capfd.readouterr()
    assert out == "/a::/b\n"


def test_history_all(state, capfd):
    for line in ["one", "two", "history"]:
        state.history.append(line)
    execute_builtin(state, ["history"])
    out, _ = capfd.readouterr()
    assert out == "one\ntwo\nhistory\n"


def test_history_last_n(state, capfd):
    for line in ["one", "two", "three"]:
        state.history.append(line)
    execute_builtin(state, ["history", "2"])
    out, _ = capfd.readouterr()
    assert out == "two\nthree\n"


@pytest.mark.parametrize("arg", ["-1", "51", "abc", "1_0", " 5", "5.0"])
def test_history_bad_count(state, capfd, arg):
    state.history.append("one")
    with pytest.raises(ShellError):
        execute_builtin(state, ["history", arg])
    out, _ = capfd.readouterr()
    assert out == ""


def test_history_signed_count(state, capfd):
    for line in ["one", "two", "three"]:
        state.history.append(line)
    execute_builtin(state, ["history", "+1"])
    out, _ = capfd.readouterr()
    assert out == "three\n"
