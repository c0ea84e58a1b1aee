import enum
import logging
import os
from dataclasses import dataclass

log = logging.getLogger(__name__)


class Builtin(enum.Enum):
    EXIT = "exit"
    ECHO = "echo"
    TYPE = "type"
    PWD = "pwd"
    CD = "cd"


BUILTINS = [b.value for b in Builtin]


@dataclass(frozen=True)
class Executable:
    """Anything that isn't a builtin; looked up on the search path."""

    name: str


def parse_command(token):
    """Map a command token to a Builtin, or an Executable for everything else."""
    try:
        return Builtin(token)
    except ValueError:
        return Executable(token)


def resolve_executable(name, search_dirs, host):
    """
    Find the first regular file called `name` in `search_dirs`.

    Directories are tried in order so the search path decides ties.
    Unreadable directories are skipped. Returns the full path or None.
    """
    for directory in search_dirs:
        for entry, is_file in host.list_dir(directory):
            if entry == name and is_file:
                path = os.path.join(directory, entry)
                log.debug("resolved %s -> %s", name, path)
                return path
    log.debug("%s not found on search path", name)
    return None
