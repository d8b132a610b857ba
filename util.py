"""util.py

Small text and number helpers shared by the loader and the CLI.
"""

from __future__ import annotations

# Whitespace the places/states files may pad fields with.
_BLANKS = ' \t\n\r'


def trim(s: str) -> str:
    """Strip spaces, tabs and line endings from both ends of a field."""
    return (s or '').strip(_BLANKS)


def strip_quotes(s: str) -> str:
    """Remove one pair of surrounding double quotes, e.g. '"Salt Lake City"'."""
    if len(s) >= 2 and s[0] == '"' and s[-1] == '"':
        return s[1:-1]
    return s


def format_number(x) -> str:
    """Format a number with 6 significant digits, dropping trailing zeros.

    Matches how the places data is usually shown: 1234.5 -> '1234.5',
    -87.6298 -> '-87.6298', 1234567.0 -> '1.23457e+06'.
    """
    return f'{x:g}'
