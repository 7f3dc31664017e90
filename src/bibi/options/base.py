#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bibi/options/base.py
"""Base classes for parser and renderer options.

Every option class is a frozen dataclass so a configured parser or renderer
can be shared between threads; use ``create_updated`` to derive variants.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

from bibi.constants import DEFAULT_CODE_BLOCK_LABEL, DEFAULT_INLINE_CODE_LABEL

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> Self:
        """Build an instance from a mapping, ignoring keys that are not fields.

        Configuration files share one namespace between several option
        classes, so unknown keys are expected and skipped.
        """
        names = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in values.items() if key in names})


def _validate_label(name: str, value: str) -> None:
    if not value or value != value.strip() or '"' in value or "]" in value:
        raise ValueError(f"{name} must be a non-empty label without quotes, brackets or padding, got {value!r}")


@dataclass(frozen=True)
class CodeLabelOptionsMixin:
    """Default language labels used for anonymous code.

    Parameters
    ----------
    inline_code_label : str, default "inline"
        Label of an inline code span with no language (``[c=inline]``)
    code_block_label : str, default "code"
        Label of a code block with no language (``[code=code]``)

    """

    inline_code_label: str = field(
        default=DEFAULT_INLINE_CODE_LABEL,
        metadata={"help": "Label used for inline code without a language", "importance": "advanced"},
    )
    code_block_label: str = field(
        default=DEFAULT_CODE_BLOCK_LABEL,
        metadata={"help": "Label used for code blocks without a language", "importance": "advanced"},
    )

    def _validate_labels(self) -> None:
        _validate_label("inline_code_label", self.inline_code_label)
        _validate_label("code_block_label", self.code_block_label)


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parsers read one markup dialect: the BBCode parser produces Markdown text,
    the Markdown parser produces markup events.
    """

    def __post_init__(self) -> None:
        """Validate option values. Subclasses extend this."""
        pass


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options."""

    def __post_init__(self) -> None:
        """Validate option values. Subclasses extend this."""
        pass
