import enum
import logging
from dataclasses import dataclass, field
from typing import List

from tinysh.errors import SplitError

log = logging.getLogger(__name__)


class RedirectOperator(enum.Enum):
    STDOUT_TRUNCATE = "outs"
    STDOUT_APPEND = "append_outs"
    STDERR_TRUNCATE = "errs"
    STDERR_APPEND = "append_errs"


OPERATORS = {
    ">": RedirectOperator.STDOUT_TRUNCATE,
    "1>": RedirectOperator.STDOUT_TRUNCATE,
    ">>": RedirectOperator.STDOUT_APPEND,
    "1>>": RedirectOperator.STDOUT_APPEND,
    "2>": RedirectOperator.STDERR_TRUNCATE,
    "2>>": RedirectOperator.STDERR_APPEND,
}


@dataclass
class Split:
    """A token list partitioned into the command and its redirect targets."""

    cmd_args: List[str] = field(default_factory=list)
    outs: List[str] = field(default_factory=list)
    append_outs: List[str] = field(default_factory=list)
    errs: List[str] = field(default_factory=list)
    append_errs: List[str] = field(default_factory=list)

    def targets(self, op):
        return getattr(self, op.value)

    def has_redirects(self):
        return any((self.outs, self.append_outs, self.errs, self.append_errs))


def split_redirects(tokens):
    """
    Separate command tokens from redirect targets.

    Each operator claims the token right after it. An operator followed by
    another operator raises SplitError; an operator at the very end is
    dropped.
    """
    split = Split()
    pending = None
    for token in tokens:
        op = OPERATORS.get(token)
        if op is not None:
            if pending is not None:
                raise SplitError(token)
            pending = op
        elif pending is not None:
            split.targets(pending).append(token)
            pending = None
        else:
            split.cmd_args.append(token)

    if pending is not None:
        log.debug("dropping trailing redirect operator %s", pending.name)
    return split
