import io
import subprocess

import pytest

from tinysh.host import Host
from tinysh.output import OutputSink


class FakeHost(Host):
    """In-memory host: no real chdir, directory listing or child processes."""

    def __init__(self, environ=None, dirs=None, cwd="/home/user", valid_dirs=()):
        super().__init__(environ if environ is not None else {})
        self.dirs = dirs or {}
        self.cwd = cwd
        self.valid_dirs = set(valid_dirs)
        self.ran = []
        self.result = subprocess.CompletedProcess([], 0, b"", b"")

    def list_dir(self, path):
        return list(self.dirs.get(path, []))

    def getcwd(self):
        return self.cwd

    def chdir(self, path):
        if path not in self.valid_dirs:
            raise FileNotFoundError(2, "No such file or directory", path)
        self.cwd = path

    def run(self, name, args, executable):
        self.ran.append((name, list(args), executable))
        return self.result


class Terminal(io.BytesIO):
    """Binary stream standing in for the real stdout/stderr."""


@pytest.fixture
def host():
    return FakeHost(
        environ={"PATH": "/usr/local/bin:/usr/bin", "HOME": "/home/user"},
        dirs={
            "/usr/local/bin": [("tool", True)],
            "/usr/bin": [("ls", True), ("cat", True), ("tool", True), ("share", False)],
        },
        valid_dirs={"/", "/tmp", "/home/user", "/home/user/src"},
    )


@pytest.fixture
def sink():
    return OutputSink()


@pytest.fixture
def stdout():
    return Terminal()


@pytest.fixture
def stderr():
    return Terminal()
