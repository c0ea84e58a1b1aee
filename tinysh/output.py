"""
Command output buffering and redirection.

Builtins and external commands never write to the terminal. They write
into an OutputSink, and once the command is done apply_redirects() decides
where each buffer ends up: one or more files, or the real stdout/stderr.
"""

import io
import logging

log = logging.getLogger(__name__)


def encode_text(text):
    """Encode for the terminal or a file, keeping undecodable path bytes as-is."""
    return text.encode(errors="surrogateescape")


class OutputSink:
    """Byte buffers standing in for a command's stdout and stderr."""

    def __init__(self):
        self.out = io.BytesIO()
        self.err = io.BytesIO()

    @staticmethod
    def _write(buf, data):
        if isinstance(data, str):
            data = encode_text(data)
        buf.write(data)

    def write_out(self, data):
        self._write(self.out, data)

    def write_err(self, data):
        self._write(self.err, data)

    def print(self, line):
        self.write_out(line + "\n")

    def error(self, line):
        self.write_err(line + "\n")

    def getvalue(self):
        return self.out.getvalue(), self.err.getvalue()


def _report(stream, message):
    log.debug(message)
    stream.write(encode_text(message + "\n"))
    stream.flush()


def redirect_to(paths, buf, stderr):
    """Create or truncate every path and write buf to each of them."""
    for path in paths:
        try:
            f = open(path, "wb")
        except OSError as e:
            _report(stderr, f"failed to create file {path}: {e.strerror}")
            continue
        try:
            with f:
                f.write(buf)
        except OSError as e:
            _report(stderr, f"failed to write to file {path}: {e.strerror}")


def append_to(paths, buf, stderr):
    """Append buf to every path, creating files that don't exist."""
    for path in paths:
        try:
            f = open(path, "ab")
        except OSError as e:
            _report(stderr, f"failed to open file {path}: {e.strerror}")
            continue
        try:
            with f:
                f.write(buf)
        except OSError as e:
            _report(stderr, f"failed to append to file {path}: {e.strerror}")


def _route(buf, truncates, appends, terminal, stderr):
    if truncates:
        redirect_to(truncates, buf, stderr)
    if appends:
        append_to(appends, buf, stderr)
    if not truncates and not appends and buf:
        terminal.write(buf)
        terminal.flush()


def apply_redirects(split, out_buf, err_buf, stdout, stderr):
    """
    Send out_buf and err_buf to their final destinations.

    stdout and stderr are the real binary terminal streams. The output side
    and the error side are decided independently. A failing target is
    reported on stderr and the remaining targets are still written.
    """
    _route(out_buf, split.outs, split.append_outs, stdout, stderr)
    _route(err_buf, split.errs, split.append_errs, stderr, stderr)
