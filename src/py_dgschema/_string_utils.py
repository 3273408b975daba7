# -*- coding: utf-8 -*-
""" Work with strings """

import re
import textwrap
from typing import Tuple

LINE_SEPARATOR = re.compile(r"\r\n|[\n\r]")


# Mostly used in tests
def dedent(raw_string: str) -> str:
    return textwrap.dedent(raw_string).lstrip()


def index_to_loc(body: str, position: int) -> Tuple[int, int]:
    r""" Get the (line number, column number) tuple from a zero-indexed offset.

    Args:
        body (str): Source string
        position (int): 0-indexed position of the character

    Returns:
        Tuple[int, int]: (line number, column number)

    Raises:
        :py:class:`IndexError`: if ``position`` is out of bounds

    >>> index_to_loc("ab\ncd\ne", 0)
    (1, 1)

    >>> index_to_loc("ab\ncd\ne", 3)
    (2, 1)

    >>> index_to_loc("", 0)
    (1, 1)

    >>> index_to_loc("", 42)
    Traceback (most recent call last):
        ...
    IndexError: 42
    """
    if not body and not position:
        return (1, 1)

    if position > len(body) or position < 0:
        raise IndexError(position)

    lines, cols = 0, 0
    for offset, char in enumerate(body):
        if offset == position:
            return (lines + 1, cols + 1)
        elif char == "\n":
            lines += 1
            cols = 0
        else:
            cols += 1
    return (lines + 1, cols + 1)


def highlight_location(body: str, position: int, delta: int = 2) -> str:
    """ Format a view of the lines surrounding a position in a source string,
    with a caret under the exact character.

    Args:
        body (str): Source string
        position (int): 0-indexed position of the character
        delta (int): How many lines around the position should this conserve

    Returns:
        str: Formatted view
    """
    line, col = index_to_loc(body, position)
    line_index = line - 1
    lines = LINE_SEPARATOR.split(body)
    first = max(0, line_index - delta)
    last = min(line_index + delta, len(lines) - 1)
    width = len(str(last + 1))

    def numbered(index):
        return "  %s:%s" % (str(index + 1).rjust(width, "0"), lines[index])

    output = ["(%d:%d):" % (line, col)]
    output.extend(numbered(i) for i in range(first, line_index + 1))
    output.append(" " * (2 + width + col) + "^")
    output.extend(numbered(i) for i in range(line_index + 1, last + 1))
    return "\n".join(output) + "\n"
