import os
import stat

import pytest

from pathsh.state import ShellState


@pytest.fixture()
def sandbox(tmp_path, monkeypatch):
    # Work in an isolated temp directory
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def state():
    return ShellState()


@pytest.fixture()
def make_exe(tmp_path):
    """Create an executable /bin/sh script: make_exe("bin", "tool", body)"""
    def _make(dirname, name, body="#!/bin/sh\nexit 0\n"):
        directory = tmp_path / dirname
        directory.mkdir(parents=True, exist_ok=True)
        script = directory / name
        script.write_text(body)
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return str(script)
    return _make


@pytest.fixture()
def echo_args(make_exe, tmp_path):
    """A bin dir holding `args`, which prints its argument count and arguments"""
    make_exe("bin", "args", '#!/bin/sh\necho "$#" "$@"\n')
    return os.path.join(str(tmp_path), "bin")
