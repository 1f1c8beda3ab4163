"""Decide which header tokens are data types and what color marks them."""

from __future__ import annotations

import re
from typing import Iterable

_HEX_COLOR_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


def normalize_color(color: str | tuple[int, int, int]) -> str:
    """Return ``color`` as a lowercase ``#rrggbb`` string.

    Accepts ``#rrggbb``/``rrggbb`` strings and ``(r, g, b)`` tuples of
    0-255 components.
    """
    if isinstance(color, str):
        m = _HEX_COLOR_RE.match(color.strip())
        if not m:
            raise ValueError(f"Color must be #rrggbb, got {color!r}")
        return "#" + m.group(1).lower()

    if isinstance(color, tuple) and len(color) == 3:
        if all(isinstance(c, int) and 0 <= c <= 255 for c in color):
            return "#{:02x}{:02x}{:02x}".format(*color)
    raise ValueError(f"Color must be #rrggbb or an (r, g, b) tuple, got {color!r}")


class DataTypeClassifier:
    """Case-insensitive lookup of recognized data type names.

    ``classify`` returns the highlight color for a recognized type and
    ``None`` otherwise, which the header renderer reads as "leave as is".
    """

    def __init__(
        self,
        types: Iterable[str] | None = None,
        highlight_color: str | tuple[int, int, int] | None = None,
    ):
        self._types: frozenset[str] = frozenset()
        self.highlight_color: str | None = None
        self.set_types(types)
        if highlight_color is not None:
            self.set_highlight_color(highlight_color)

    @property
    def types(self) -> frozenset[str]:
        """Recognized types, casefolded."""
        return self._types

    def set_types(self, types: Iterable[str] | None) -> None:
        """Replace the recognized types. ``None`` disables classification."""
        if types is None:
            self._types = frozenset()
        else:
            self._types = frozenset(t.casefold() for t in types)

    def set_highlight_color(self, color: str | tuple[int, int, int] | None) -> None:
        self.highlight_color = None if color is None else normalize_color(color)

    def is_data_type(self, token: str) -> bool:
        return token.casefold() in self._types

    def classify(self, token: str) -> str | None:
        if not self._types or not self.is_data_type(token):
            return None
        return self.highlight_color
