"""Split a command line into arguments using POSIX-like quoting rules."""

UNQUOTED = 0
SINGLE_QUOTED = 1
DOUBLE_QUOTED = 2

# Characters a backslash may escape inside double quotes.
DOUBLE_QUOTE_ESCAPES = ("\\", "$", '"', "\n")


def tokenize(line):
    """Return the list of arguments in ``line``.

    Unquoted whitespace separates tokens, single quotes keep everything
    literal and double quotes only honour backslash before \\, $, " and
    newline. Adjacent quoted and unquoted segments join into one token.
    An unterminated quote swallows the rest of the line instead of raising.
    """
    tokens = []
    current = []
    state = UNQUOTED
    i = 0
    n = len(line)

    while i < n:
        c = line[i]
        if state == UNQUOTED:
            if c in (" ", "\t"):
                if current:
                    tokens.append("".join(current))
                    current = []
            elif c == "\\":
                if i + 1 < n:
                    current.append(line[i + 1])
                    i += 1
                else:
                    current.append(c)
            elif c == "'":
                state = SINGLE_QUOTED
            elif c == '"':
                state = DOUBLE_QUOTED
            else:
                current.append(c)
        elif state == SINGLE_QUOTED:
            if c == "'":
                state = UNQUOTED
            else:
                current.append(c)
        else:
            if c == '"':
                state = UNQUOTED
            elif c == "\\" and i + 1 < n and line[i + 1] in DOUBLE_QUOTE_ESCAPES:
                current.append(line[i + 1])
                i += 1
            else:
                current.append(c)
        i += 1

    if current:
        tokens.append("".join(current))
    return tokens
