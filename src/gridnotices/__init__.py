# topmark:header:start
#
#   project      : GridNotices
#   file         : __init__.py
#   file_relpath : src/gridnotices/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GridNotices package.

GridNotices collects the notices a data grid reports while it evaluates
(user-facing validation errors and critical internal failures) and renders
them into the grid's system-message markup. A small developer CLI previews
that markup from a TOML notices document.
"""

from __future__ import annotations

from gridnotices.core.errors import ConfigError, GridNoticesError, InvalidNoticeError
from gridnotices.notice import (
    Notice,
    NoticeOptions,
    NoticeRegistry,
    NoticeSeverity,
    NoticeStats,
    NoticeStyle,
    RenderContext,
    make_location_key,
    split_location_key,
)
from gridnotices.rendering.context import GridRenderContext

__all__ = [
    "ConfigError",
    "GridNoticesError",
    "GridRenderContext",
    "InvalidNoticeError",
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
