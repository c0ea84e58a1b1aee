import logging
import sys

from tinysh.builtin import Terminate, execute
from tinysh.commands import parse_command
from tinysh.completion import install_completer
from tinysh.config import Settings, setup_logging
from tinysh.errors import FatalHostError, ShellError
from tinysh.host import Host
from tinysh.output import OutputSink, apply_redirects, encode_text
from tinysh.redirect import split_redirects
from tinysh.tokenizer import tokenize

log = logging.getLogger(__name__)


def run_line(line, host, stdout, stderr):
    """
    Tokenize, split, execute and redirect one line of input.

    stdout and stderr are binary streams. Returns Terminate if the line
    ran `exit`, otherwise None.
    """
    try:
        parts = split_redirects(tokenize(line))
    except ShellError as e:
        log.debug("rejected %r: %s", line, e)
        stderr.write(encode_text(f"{e}\n"))
        stderr.flush()
        return None

    if not parts.cmd_args and not parts.has_redirects():
        return None

    sink = OutputSink()
    if parts.cmd_args:
        cmd, args = parts.cmd_args[0], parts.cmd_args[1:]
        outcome = execute(parse_command(cmd), args, sink, host)
        if isinstance(outcome, Terminate):
            return outcome

    out_buf, err_buf = sink.getvalue()
    apply_redirects(parts, out_buf, err_buf, stdout, stderr)
    return None


def read_line(prompt):
    """Return the next line, or None at end of input."""
    while True:
        try:
            return input(prompt)
        except EOFError:
            return None
        except KeyboardInterrupt:
            sys.stdout.write("\n")
            sys.stdout.flush()
        except OSError as e:
            raise FatalHostError(f"failed to read input: {e.strerror}") from e


def repl(settings, host, reader=read_line, stdout=None, stderr=None):
    """Run commands until end of input or `exit`; returns the exit status."""
    stdout = sys.stdout.buffer if stdout is None else stdout
    stderr = sys.stderr.buffer if stderr is None else stderr
    while True:
        line = reader(settings.prompt)
        if line is None:
            return 0
        try:
            outcome = run_line(line, host, stdout, stderr)
        except KeyboardInterrupt:
            stdout.write(b"\n")
            stdout.flush()
            continue
        if isinstance(outcome, Terminate):
            return outcome.code


def main():
    settings = Settings.from_environ()
    setup_logging(settings)
    install_completer()
    try:
        status = repl(settings, Host())
    except FatalHostError as e:
        log.debug("fatal host failure", exc_info=True)
        sys.stderr.write(f"tinysh: {e}\n")
        status = 1
    sys.exit(status)


if __name__ == "__main__":
    main()
