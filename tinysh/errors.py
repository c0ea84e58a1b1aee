"""
Exceptions raised by the shell core.

    ShellError          aborts the current line, the loop keeps going
    ├── LexError        unterminated quote
    └── SplitError      two redirect operators back to back
    FatalHostError      the host cannot give us a cwd or a line; ends the shell
"""


class ShellError(Exception):
    """Base for errors that abort only the current input line."""


class LexError(ShellError):
    """Raised by the tokenizer when input ends inside a quote."""

    def __init__(self, message="unterminated quote"):
        super().__init__(message)


class SplitError(ShellError):
    """Raised when a redirect operator is followed by another operator."""

    def __init__(self, token):
        self.token = token
        super().__init__(f"parse error near `{token}`")


class FatalHostError(Exception):
    """The host environment failed in a way the shell cannot recover from."""
