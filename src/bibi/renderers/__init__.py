#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning markup events into output markup."""

from bibi.renderers.base import BaseRenderer
from bibi.renderers.bbcode import BBCodeRenderer, events_to_bbcode

__all__ = ["BaseRenderer", "BBCodeRenderer", "events_to_bbcode"]
