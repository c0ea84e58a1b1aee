import logging
import sys

try:
    import readline
except ImportError:
    import pyreadline3 as readline

from tinysh.commands import BUILTINS

log = logging.getLogger(__name__)


def complete_line(text):
    """Full-line replacements: each builtin starting with text, plus a space."""
    return [cmd + " " for cmd in BUILTINS if cmd.startswith(text)]


class Completer:
    """readline completer callback backed by complete_line()."""

    def __init__(self):
        self.matches = []

    def __call__(self, text, state):
        if state == 0:
            self.matches = complete_line(text)
        if state < len(self.matches):
            return self.matches[state]
        return None


def install_completer(stdin=None):
    """Bind tab to builtin completion when reading from a terminal."""
    stdin = sys.stdin if stdin is None else stdin
    if not stdin.isatty():
        return False
    # No delimiters: readline passes the whole line, so matches replace it.
    readline.set_completer_delims("")
    readline.set_completer(Completer())
    readline.parse_and_bind("tab: complete")
    log.debug("tab completion enabled")
    return True
