# topmark:header:start
#
#   project      : GridNotices
#   file         : enum_mixins.py
#   file_relpath : src/gridnotices/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic Enum utilities for GridNotices (typing-friendly, UI-agnostic).

Provided:
    - ``KeyedStrEnum``: ``str`` enum whose ``.value`` is a stable machine key,
      with a human ``.label`` and parsing aliases. Used for tokens that come
      from configuration files and CLI options (e.g. notice styles).

Design:
    - Keep the helpers *pure* and side-effect free.
    - Avoid bringing UI libraries (e.g. yachalk) into this module; color-aware
      enums live in ``gridnotices.rendering.colored_enum``.

Example:
    ```python
    class Theme(KeyedStrEnum):
        JQUERY_UI = ("jquery_ui", "jQuery UI CSS framework", ("jqueryui",))
        PLAIN = ("plain", "Plain markup")

    assert Theme.parse("jQuery-UI") is Theme.JQUERY_UI
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string to match config keys and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new KeyedStrEnum member with key, label, and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label for the enum member.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        """Return the stable machine key."""
        return str(self.value)

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return str(self.value)

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches against the stable key (`.value`), the member name (`.name`)
        and any configured aliases. Matching is case-insensitive and
        normalizes '-' and ' ' to '_'.

        Args:
            raw (str | None): The token to parse.

        Returns:
            _KS | None: The matching member, or ``None`` if nothing matches.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)

        for m in cls:
            if token == _norm_token(m.value):
                return m
            if token == _norm_token(m.name):
                return m
            for a in m.aliases:
                if token == _norm_token(a):
                    return m
        return None

    @classmethod
    def keys(cls) -> list[str]:
        """Return the stable keys of all members, in definition order."""
        return [m.key for m in cls]
