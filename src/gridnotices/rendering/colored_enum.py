# topmark:header:start
#
#   project      : GridNotices
#   file         : colored_enum.py
#   file_relpath : src/gridnotices/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware enum primitives for human-facing terminal output.

Key types:
    - `Colorizer`: Protocol describing any callable compatible with
      `yachalk.ChalkBuilder.__call__`.
    - `ColoredStrEnum`: `str, Enum` that stores the enum's text value and a
      colorizer (e.g., a yachalk style). The enum `.value` remains a plain
      string, while the colorizer is exposed via `.color`.

Markup output never uses colors; colorizers only decorate console text such as
the `gridnotices summary` listing.

Example:
    ```python
    from yachalk import chalk

    class Severity(ColoredStrEnum):
        ERROR    = ("error", chalk.yellow)
        CRITICAL = ("critical", chalk.red_bright)

    print(Severity.ERROR.value)            # 'error'
    print(Severity.ERROR.color("oops"))    # yellow "oops"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Designed to be compatible with `yachalk.ChalkBuilder.__call__`, which
    accepts a variadic list of arguments and a `sep` keyword.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate provided arguments into a display string."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            color (Colorizer): A callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the enum member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color

    def paint(self, text: str, *, enabled: bool = True) -> str:
        """Return ``text`` decorated with this member's colorizer.

        Args:
            text (str): Text to decorate.
            enabled (bool): If False, return ``text`` unchanged.

        Returns:
            str: The (optionally) colorized text.
        """
        return self._color(text) if enabled else text
