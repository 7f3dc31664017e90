#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Markup event model shared by the Markdown parser and the BBCode renderer."""

from bibi.ast.events import (
    BlockQuote,
    Code,
    CodeBlock,
    Emphasis,
    End,
    HardBreak,
    Heading,
    Html,
    Image,
    Item,
    Link,
    List,
    MarkupEvent,
    OtherTag,
    Paragraph,
    Rule,
    SoftBreak,
    Start,
    Strikethrough,
    Strong,
    Tag,
    Text,
)

__all__ = [
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Emphasis",
    "End",
    "HardBreak",
    "Heading",
    "Html",
    "Image",
    "Item",
    "Link",
    "List",
    "MarkupEvent",
    "OtherTag",
    "Paragraph",
    "Rule",
    "SoftBreak",
    "Start",
    "Strikethrough",
    "Strong",
    "Tag",
    "Text",
]
