#!/usr/bin/env python3

"""
Line and attribute-value sanitization.

Applied to every raw line before it is validated, and to every attribute
value after it is split off. Only space and tab count as whitespace here.
"""

COMMENT_CHAR = '#'
_BLANKS = ' \t'


def trim(text: str) -> str:
    """Remove leading and trailing spaces and tabs."""
    return text.strip(_BLANKS)


def sanitize_line(line: str) -> str:
    """
    Drop the comment and surrounding whitespace from a raw line.

    Everything from the first '#' onward is removed, including a '#' that
    sits inside a quoted attribute value. Such values are cut short and the
    line usually fails validation afterwards. Callers that depend on this
    behaviour should not expect quote-aware comment handling.

    Args:
        line: Raw line with the newline already removed

    Returns:
        The sanitized line, possibly empty
    """
    hashpos = line.find(COMMENT_CHAR)
    if hashpos != -1:
        line = line[:hashpos]
    return trim(line)


def sanitize_attr_value(value: str) -> str:
    """Trim an attribute value and strip one quote from each end independently."""
    value = trim(value)
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value
