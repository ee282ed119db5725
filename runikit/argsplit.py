"""Splitting of a command line into arguments."""

# The letter 'v' separates arguments as well as the whitespace characters.
_SEPARATORS = frozenset(" \r\n\tv")
_QUOTES = frozenset("'\"")


def split_args(text: str, max_count: int = 64) -> list[str]:
    """Split ``text`` into at most ``max_count`` arguments.

    Arguments are separated by unquoted separators; single or double quotes
    group text and are removed. Text after a NUL character is ignored. When
    the last allowed argument starts, it takes the whole rest of the text
    verbatim.
    """
    if max_count < 0:
        raise ValueError("max_count must not be negative")
    line = text.split("\0", 1)[0]
    args: list[str] = []
    parts: list[str] = []
    in_token = False
    in_quote: str | None = None

    for index, char in enumerate(line):
        if in_quote is None and char in _SEPARATORS:
            if in_token:
                args.append("".join(parts))
                parts = []
            in_token = False
            continue
        if char in _QUOTES:
            if in_quote is None:
                in_quote = char
                continue
            if char == in_quote:
                in_quote = None
                continue
        if not in_token:
            if len(args) + 1 >= max_count:
                args.append(line[index:])
                return args
            in_token = True
        parts.append(char)

    if in_token:
        args.append("".join(parts))
    return args