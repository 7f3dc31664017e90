#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bibi/ast/events.py
"""Markup event classes describing a parsed Markdown document.

A Markdown document is represented as a flat, ordered stream of events
instead of a tree: every container contributes a ``Start`` event, the events
of its children, and a matching ``End`` event. Leaf content is carried by
``Text``, ``Code``, ``SoftBreak``, ``HardBreak`` and ``Rule`` events.

Event Stream
------------
``**Hi** there`` as a paragraph becomes::

    Start(Paragraph())
    Start(Strong())
    Text("Hi")
    End(Strong())
    Text(" there")
    End(Paragraph())

Consumers must ignore event and tag kinds they do not know (``Html``,
``OtherTag``), so new kinds can be added without breaking them.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Paragraph:
    """Paragraph container."""


@dataclass(frozen=True)
class Heading:
    """Heading container.

    Parameters
    ----------
    level : int, default 1
        Heading level (1-6)

    """

    level: int = 1


@dataclass(frozen=True)
class BlockQuote:
    """Block quote container."""


@dataclass(frozen=True)
class CodeBlock:
    """Code block container; its content arrives as ``Text`` events.

    Parameters
    ----------
    info : str
        Fence info string (``"rust ignore"``); empty for indented blocks

    """

    info: str = ""


@dataclass(frozen=True)
class List:
    """List container.

    Parameters
    ----------
    start : int or None
        First number of an ordered list, None for a bullet list

    """

    start: Optional[int] = None


@dataclass(frozen=True)
class Item:
    """List item container."""


@dataclass(frozen=True)
class Emphasis:
    """Emphasis (italic) container."""


@dataclass(frozen=True)
class Strong:
    """Strong (bold) container."""


@dataclass(frozen=True)
class Strikethrough:
    """Strikethrough container."""


@dataclass(frozen=True)
class Link:
    """Link container; its children are the link label.

    Parameters
    ----------
    dest : str
        Link destination URL

    """

    dest: str


@dataclass(frozen=True)
class Image:
    """Image container.

    Parameters
    ----------
    dest : str
        Image source URL

    """

    dest: str


@dataclass(frozen=True)
class OtherTag:
    """A container kind without BBCode representation (e.g. a table).

    Its Start and End events write nothing; the contained events are
    rendered as usual.
    """

    name: str


Tag = Union[
    Paragraph, Heading, BlockQuote, CodeBlock, List, Item, Emphasis, Strong, Strikethrough, Link, Image, OtherTag
]


@dataclass(frozen=True)
class Start:
    """Opening of a container."""

    tag: Tag


@dataclass(frozen=True)
class End:
    """Closing of a container."""

    tag: Tag


@dataclass(frozen=True)
class Text:
    """Literal text."""

    text: str


@dataclass(frozen=True)
class Code:
    """Inline code."""

    text: str


@dataclass(frozen=True)
class SoftBreak:
    """Line break inside a paragraph."""


@dataclass(frozen=True)
class HardBreak:
    """Forced line break."""


@dataclass(frozen=True)
class Rule:
    """Thematic break (horizontal rule)."""


@dataclass(frozen=True)
class Html:
    """Raw HTML, block or inline."""

    text: str


MarkupEvent = Union[Start, End, Text, Code, SoftBreak, HardBreak, Rule, Html]
