"""Find the partial identifier immediately before the caret."""

from __future__ import annotations

from typing import Callable

from procedural_completion.errors import InvalidOffsetError

CharPredicate = Callable[[str], bool]


def is_identifier_char(ch: str) -> bool:
    """Default token character class: letters, digits and underscore."""
    return ch.isalnum() or ch == "_"


def line_start(buffer: str, offset: int) -> int:
    """Return the offset of the first character of the line containing ``offset``."""
    return buffer.rfind("\n", 0, offset) + 1


def prefix_at(
    buffer: str,
    caret_offset: int,
    is_valid_char: CharPredicate = is_identifier_char,
) -> str:
    """Return the text already typed for the token ending at ``caret_offset``.

    Scans backward from the caret while the preceding character satisfies
    ``is_valid_char``, never crossing the start of the caret's line. Returns
    an empty string when the caret does not follow a token character.

    Raises InvalidOffsetError if ``caret_offset`` is outside ``0..len(buffer)``.
    """
    if not 0 <= caret_offset <= len(buffer):
        raise InvalidOffsetError(
            f"Caret offset {caret_offset} outside buffer of length {len(buffer)}"
        )

    floor = line_start(buffer, caret_offset)
    start = caret_offset
    while start > floor and is_valid_char(buffer[start - 1]):
        start -= 1
    return buffer[start:caret_offset]
