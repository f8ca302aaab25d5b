"""Display column widths

Thin layer over wcwidth giving every scalar value a width of 0, 1 or 2.
"""

import unicodedata

from wcwidth import wcwidth

__all__ = ['char_width', 'text_width']


def char_width(value, ambiguous_width=1):
    """Returns the number of terminal columns a scalar value occupies

    Control characters and anything else wcwidth can't classify count
    as zero columns.  With ambiguous_width set to 2 characters of the
    East Asian Ambiguous class are counted as wide, as CJK terminals
    render them.

    """

    char = chr(value)
    width = wcwidth(char)
    if width < 0:
        return 0

    if (ambiguous_width == 2 and width == 1
            and unicodedata.east_asian_width(char) == 'A'):
        return 2

    return width

def text_width(text, ambiguous_width=1):
    return sum(char_width(ord(c), ambiguous_width) for c in text)
