import logging
import os
import subprocess

log = logging.getLogger(__name__)


class Host:
    """
    Process-wide state the shell reads and mutates: environment, working
    directory, the filesystem (for PATH lookups) and child processes.

    Builtins and the resolver take a Host instead of touching os directly,
    so tests can hand them a fake.
    """

    def __init__(self, environ=None):
        self.environ = os.environ if environ is None else environ

    def search_dirs(self):
        path = self.environ.get("PATH", "")
        if not path:
            return []
        return path.split(":")

    def home(self):
        return self.environ.get("HOME", "")

    def list_dir(self, path):
        """Return (name, is_regular_file) pairs, or [] if path can't be read."""
        try:
            with os.scandir(path) as entries:
                return [(entry.name, entry.is_file()) for entry in entries]
        except OSError as e:
            log.debug("skipping unreadable directory %r: %s", path, e)
            return []

    def getcwd(self):
        return os.getcwd()

    def chdir(self, path):
        os.chdir(path)

    def run(self, name, args, executable):
        """Run a program to completion, capturing its output as bytes."""
        return subprocess.run(
            [name] + list(args),
            executable=executable,
            env=None if self.environ is os.environ else dict(self.environ),
            capture_output=True,
        )
