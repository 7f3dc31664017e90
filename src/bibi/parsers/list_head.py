#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bibi/parsers/list_head.py
"""Parser for the attribute part of a BBCode ``[list ...]`` tag.

The attribute text is everything between ``[list`` and the closing ``]``::

    [list]                      -> unordered
    [list type="a"]             -> ordered, lower-case letters, start 0
    [list start="5"]            -> ordered, decimal, start 5
    [list type="I" start="2"]   -> ordered, upper-case Roman, start 2

Grammar (every attribute must be preceded by spaces or tabs)::

    head      := ( blank+ attribute )* whitespace*
    attribute := 'start="' integer '"' | 'type="' ( '1' | 'a' | 'A' | 'i' | 'I' ) '"'
    integer   := '-'? digit+            (signed 16-bit range)

Anything left over after the last recognized attribute makes the whole head
invalid. A repeated attribute keeps its last value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from bibi.constants import LIST_START_MAX, LIST_START_MIN
from bibi.exceptions import ListHeadError
from bibi.parsers.numbering import NumberingStyle

_BLANKS = " \t"


@dataclass(frozen=True)
class Unordered:
    """Bullet list (``- item``)."""


@dataclass(frozen=True)
class Ordered:
    """Numbered list using ``style`` labels."""

    style: NumberingStyle


ListType = Union[Unordered, Ordered]


@dataclass(frozen=True)
class ListHead:
    """Parsed list attributes.

    Parameters
    ----------
    kind : Unordered or Ordered
        Whether items get bullets or ordinal labels
    start : int, default 0
        Value of the first ordinal label

    """

    kind: ListType = field(default_factory=Unordered)
    start: int = 0

    @property
    def ordered(self) -> bool:
        return isinstance(self.kind, Ordered)


class _ListHeadReader:
    """Recursive-descent reader over one attribute string."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def _blanks(self) -> int:
        begin = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in _BLANKS:
            self.pos += 1
        return self.pos - begin

    def _literal(self, expected: str) -> bool:
        if self.text.startswith(expected, self.pos):
            self.pos += len(expected)
            return True
        return False

    def _quoted(self) -> str | None:
        """Read ``"value"`` and return ``value``; None (position kept) if absent."""
        if not self.text.startswith('"', self.pos):
            return None
        end = self.text.find('"', self.pos + 1)
        if end == -1:
            return None
        value = self.text[self.pos + 1 : end]
        self.pos = end + 1
        return value

    def _integer(self, value: str) -> int | None:
        digits = value[1:] if value.startswith("-") else value
        if not digits or not all("0" <= ch <= "9" for ch in digits):
            return None
        number = int(value)
        if not LIST_START_MIN <= number <= LIST_START_MAX:
            return None
        return number

    def attribute(self) -> tuple[str, int | NumberingStyle] | None:
        """Read one ``name="value"`` pair; on failure restore the position."""
        saved = self.pos

        if self._literal("start="):
            raw = self._quoted()
            number = self._integer(raw) if raw is not None else None
            if number is not None:
                return "start", number
        elif self._literal("type="):
            raw = self._quoted()
            style = NumberingStyle.from_attribute(raw) if raw is not None else None
            if style is not None:
                return "type", style

        self.pos = saved
        return None

    def attributes(self) -> dict[str, int | NumberingStyle]:
        """Read every ``blank+ attribute`` repetition."""
        found: dict[str, int | NumberingStyle] = {}
        while True:
            saved = self.pos
            if not self._blanks():
                break
            item = self.attribute()
            if item is None:
                self.pos = saved
                break
            name, value = item
            found[name] = value
        return found

    @property
    def remainder(self) -> str:
        return self.text[self.pos :]


def parse_list_head(attributes: str) -> ListHead:
    """Parse the attribute text of a ``[list ...]`` tag.

    Parameters
    ----------
    attributes : str
        Text between ``[list`` and ``]``, including the leading blank

    Returns
    -------
    ListHead
        Resolved list kind and start value

    Raises
    ------
    ListHeadError
        If non-whitespace text remains after the recognized attributes

    """
    reader = _ListHeadReader(attributes)
    found = reader.attributes()

    if reader.remainder.strip():
        raise ListHeadError(attributes, reader.remainder)

    kind: ListType = Unordered()
    start = 0

    if "start" in found:
        start = int(found["start"])  # type: ignore[arg-type]
        kind = Ordered(NumberingStyle.DECIMAL)

    style = found.get("type")
    if isinstance(style, NumberingStyle):
        kind = Ordered(style)

    return ListHead(kind=kind, start=start)
