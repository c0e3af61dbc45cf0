# topmark:header:start
#
#   project      : GridNotices
#   file         : __init__.py
#   file_relpath : src/gridnotices/notice/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Notice primitives and the per-grid notice registry.

Design:
    - Notices are immutable `Notice` instances.
    - A grid accumulates them in a mutable `NoticeRegistry` during evaluation
      and renders them once into a markup fragment.
    - The registry reads the grid through the `RenderContext` protocol only.
"""

from __future__ import annotations

from gridnotices.notice.model import (
    Notice,
    NoticeOptions,
    NoticeSeverity,
    NoticeStats,
    NoticeStyle,
    make_location_key,
    split_location_key,
)
from gridnotices.notice.registry import NoticeRegistry
from gridnotices.notice.types import RenderContext

__all__ = [
    "Notice",
    "NoticeOptions",
    "NoticeRegistry",
    "NoticeSeverity",
    "NoticeStats",
    "NoticeStyle",
    "RenderContext",
    "make_location_key",
    "split_location_key",
]
