import logging

from tinysh.errors import LexError

log = logging.getLogger(__name__)

# Inside double quotes a backslash only escapes these.
DOUBLE_QUOTE_ESCAPES = ("\\", "$", "\n", '"')


def tokenize(line):
    """
    Split a raw input line into tokens.

    Single quotes keep everything literal. Double quotes keep whitespace and
    honor a backslash only before one of DOUBLE_QUOTE_ESCAPES. Outside quotes
    a backslash makes the next character literal. Runs with nothing between
    them (``"foo"'bar'``, ``"foo"bar``) are glued into a single token.

    Raises LexError when the line ends inside a quote.
    """
    tokens = []
    current = []
    in_single = False
    in_double = False
    escaped = False
    start = 0
    # Index of the last closing quote that ended a token or a chain of runs.
    prev_close = None

    def flush(end, closing):
        nonlocal prev_close
        glued = prev_close is not None and start - 1 == prev_close
        if current:
            fragment = "".join(current)
            if glued and tokens:
                tokens[-1] += fragment
            else:
                tokens.append(fragment)
            current.clear()
            if closing:
                prev_close = end
        elif closing and glued:
            # An empty quoted run keeps the chain going: "a"""b is ab.
            prev_close = end

    for idx, c in enumerate(line):
        if c == '"' and not in_single and not escaped:
            if in_double:
                flush(idx, closing=True)
                start = idx + 1
            in_double = not in_double
        elif c == "'" and not in_double and not escaped:
            if in_single:
                flush(idx, closing=True)
                start = idx + 1
            in_single = not in_single
        elif c.isspace() and not escaped:
            if in_single or in_double:
                current.append(c)
            else:
                flush(idx, closing=False)
                start = idx + 1
        elif c == "\\" and not escaped and not in_single:
            escaped = True
        elif escaped and in_double:
            if c not in DOUBLE_QUOTE_ESCAPES:
                current.append("\\")
            current.append(c)
            escaped = False
        else:
            current.append(c)
            escaped = False

    if in_single or in_double:
        log.debug("unterminated quote in %r", line)
        raise LexError()

    if escaped:
        current.append("\\")
    flush(len(line), closing=False)
    return tokens
