#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bibi/parsers/numbering.py
"""Ordinal labels for ordered BBCode lists.

A ``NumberingGenerator`` yields one label per list item (``"3. "``,
``"c. "``, ``"iv. "``) for a given numbering style and start value.

Alphabetic styles use a single letter per label and wrap around after ``z``:
item 27 of a ``type="a"`` list is labelled ``a.`` again. Multi-letter labels
(``aa.``) are intentionally not produced.
"""

from __future__ import annotations

import string
from collections.abc import Iterator
from enum import Enum

from bibi.constants import ORDINAL_SUFFIX

_ROMAN_NUMERALS: tuple[tuple[int, str], ...] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


class NumberingStyle(Enum):
    """Numbering styles accepted by ``[list type="..."]``.

    The value of each member is the attribute value that selects it.
    """

    DECIMAL = "1"
    LOWER_ALPHA = "a"
    UPPER_ALPHA = "A"
    LOWER_ROMAN = "i"
    UPPER_ROMAN = "I"

    @property
    def is_upper(self) -> bool:
        return self in (NumberingStyle.UPPER_ALPHA, NumberingStyle.UPPER_ROMAN)

    @classmethod
    def from_attribute(cls, value: str) -> NumberingStyle | None:
        """Return the style for a ``type=`` value, or None if unknown."""
        for style in cls:
            if style.value == value:
                return style
        return None


def to_roman(number: int) -> str:
    """Encode a positive integer as an upper-case Roman numeral.

    Values above 3999 repeat ``M``.

    Raises
    ------
    ValueError
        If ``number`` is zero or negative; Roman numerals have no such values.

    """
    if number <= 0:
        raise ValueError(f"Roman numerals start at 1, got {number}")

    parts = []
    remaining = number
    for value, numeral in _ROMAN_NUMERALS:
        count, remaining = divmod(remaining, value)
        parts.append(numeral * count)
    return "".join(parts)


def format_ordinal(style: NumberingStyle, number: int) -> str:
    """Render ``number`` in ``style`` without the trailing ``". "``.

    Lists without ``start=`` begin at zero, so the first item of a
    ``type="i"`` or ``type="I"`` list is labelled ``0``.
    """
    if style is NumberingStyle.DECIMAL:
        return str(number)

    if style in (NumberingStyle.LOWER_ALPHA, NumberingStyle.UPPER_ALPHA):
        letters = string.ascii_uppercase if style.is_upper else string.ascii_lowercase
        return letters[number % 26]

    # No Roman form below 1
    if number <= 0:
        return str(number)

    numeral = to_roman(number)
    return numeral if style.is_upper else numeral.lower()


class NumberingGenerator(Iterator[str]):
    """Unbounded iterator of ordinal labels.

    The cursor starts at ``start`` and advances by one after every label. The
    sequence never ends; consumers pull exactly as many labels as they need.
    To start over, build a new generator.

    Parameters
    ----------
    style : NumberingStyle
        Numbering style of the labels
    start : int, default 0
        Value of the first label

    Examples
    --------
        >>> labels = NumberingGenerator(NumberingStyle.LOWER_ROMAN, 3)
        >>> next(labels), next(labels)
        ('iii. ', 'iv. ')

    """

    def __init__(self, style: NumberingStyle, start: int = 0):
        self.style = style
        self.current = start

    def __iter__(self) -> NumberingGenerator:
        return self

    def __next__(self) -> str:
        label = format_ordinal(self.style, self.current) + ORDINAL_SUFFIX
        self.current += 1
        return label
