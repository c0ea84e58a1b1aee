import logging
import re
from dataclasses import dataclass

from tinysh.commands import Builtin, Executable, parse_command, resolve_executable
from tinysh.errors import FatalHostError

log = logging.getLogger(__name__)

_EXIT_CODE = re.compile(r"[+-]?[0-9]+")
_INT32_MIN, _INT32_MAX = -(2 ** 31), 2 ** 31 - 1


@dataclass(frozen=True)
class Terminate:
    """Returned by `exit`; the REPL decides how to actually stop."""

    code: int


def run_exit(args, sink, host):
    status = 0
    if args and _EXIT_CODE.fullmatch(args[0]):
        status = int(args[0])
        if not _INT32_MIN <= status <= _INT32_MAX:
            status = 0
    return Terminate(status)


def run_echo(args, sink, host):
    sink.print(" ".join(args))


def run_type(args, sink, host):
    lines = []
    for arg in args:
        command = parse_command(arg)
        if isinstance(command, Builtin):
            lines.append(f"{arg} is a shell builtin")
        elif p := resolve_executable(arg, host.search_dirs(), host):
            lines.append(f"{arg} is {p}")
        else:
            lines.append(f"{arg}: not found")
    if lines:
        sink.print("\n".join(lines))


def run_pwd(args, sink, host):
    try:
        cwd = host.getcwd()
    except OSError as e:
        raise FatalHostError(f"pwd: cannot get current directory: {e.strerror}") from e
    sink.print(cwd)


def expand_home(path, home):
    """Expand a leading ~ only when it is the whole first path segment."""
    if path == "~":
        return home
    if path.startswith("~/"):
        return home + path[1:]
    return path


def run_cd(args, sink, host):
    if not args:
        return
    if len(args) > 1:
        sink.error("cd: too many arguments")
        return
    target = expand_home(args[0], host.home())
    try:
        host.chdir(target)
    except FileNotFoundError:
        sink.error(f"cd: {target}: No such file or directory")
    except OSError as e:
        sink.error(f"cd: {target}: {e.strerror}")


def run_external(name, args, sink, host):
    executable = resolve_executable(name, host.search_dirs(), host)
    if executable is None:
        sink.error(f"{name}: command not found")
        return
    try:
        proc = host.run(name, args, executable)
    except OSError as e:
        sink.error(f"Error executing {name}: {e.strerror}")
        return
    log.debug("%s exited with status %d", name, proc.returncode)
    sink.write_out(proc.stdout)
    sink.write_err(proc.stderr)


_BUILTINS = {
    Builtin.EXIT: run_exit,
    Builtin.ECHO: run_echo,
    Builtin.TYPE: run_type,
    Builtin.PWD: run_pwd,
    Builtin.CD: run_cd,
}


def execute(command, args, sink, host):
    """
    Run a parsed command, writing its output into sink.

    Returns Terminate for `exit`, otherwise None. Errors the user should
    see go to sink.err; only FatalHostError escapes.
    """
    if isinstance(command, Executable):
        return run_external(command.name, args, sink, host)
    return _BUILTINS[command](args, sink, host)
