"""Shell command safety utilities."""

import re
import shlex

# Characters that keep their special meaning inside POSIX double quotes
_DOUBLE_QUOTE_SPECIALS = re.compile(r'([\\"$`])')


def quote_path(path: str) -> str:
    """Safely quote a path for shell commands.

    Args:
        path: File system path to quote

    Returns:
        Shell-safe quoted path
    """
    return shlex.quote(path)


def double_quote(value: str) -> str:
    """Wrap a value in double quotes with every special character escaped.

    Inside double quotes a POSIX shell still interprets backslash, double
    quote, dollar and backtick; each is backslash-escaped so the value is
    passed through literally.

    Args:
        value: Raw string, e.g. a directory path

    Returns:
        Double-quoted shell word
    """
    return '"' + _DOUBLE_QUOTE_SPECIALS.sub(r"\\\1", value) + '"'
