"""Join classification for Persian letters.

A letter's presentation form depends on two questions: can the character
before it extend a connection into it, and can the character after it accept
one. The two blocking sets below answer those questions. They are not
mirror images of each other: the letters that never connect forward block a
join only when they come *before* a letter.
"""

from __future__ import annotations

from persian_shaper.shaping.forms import ShapeIndex

PERSIAN_DIGITS = frozenset("۰۱۲۳۴۵۶۷۸۹")
ASCII_DIGITS = frozenset("0123456789")
WHITESPACE = frozenset(" \t\n\x0b\x0c\r")

# Shared punctuation core. The comma differs between the two sides.
_PUNCTUATION = frozenset("%!()+-*/:=[]{}<>'\"#.") | {"؛", "؟"}

# Letters that never extend a connection forward, plus hamza.
NON_FORWARD_JOINING = frozenset("اآدذرزژوء")

LEFT_BLOCKING: frozenset[str] = (
    PERSIAN_DIGITS
    | ASCII_DIGITS
    | WHITESPACE
    | _PUNCTUATION
    | {","}
    | NON_FORWARD_JOINING
)

RIGHT_BLOCKING: frozenset[str] = (
    PERSIAN_DIGITS | ASCII_DIGITS | WHITESPACE | _PUNCTUATION | {"،", "ء"}
)


def joins_from_left(prev: str | None) -> bool:
    """True if ``prev`` extends a connection into the following letter."""
    return prev is not None and prev not in LEFT_BLOCKING


def joins_from_right(next_char: str | None) -> bool:
    """True if ``next_char`` accepts a connection from the preceding letter."""
    return next_char is not None and next_char not in RIGHT_BLOCKING


def classify(prev: str | None, next_char: str | None) -> ShapeIndex:
    """Pick the presentation form for a letter from its neighbours.

    A missing neighbour (start or end of the run) blocks exactly like a
    blocking character does, so boundary positions need no special handling.

    Args:
        prev: Character immediately before the letter, or None.
        next_char: Character immediately after the letter, or None.

    Returns:
        The :class:`ShapeIndex` to read from the letter's form tuple.
    """
    left = joins_from_left(prev)
    right = joins_from_right(next_char)

    if left and right:
        return ShapeIndex.MEDIAL
    if left:
        return ShapeIndex.FINAL
    if right:
        return ShapeIndex.INITIAL
    return ShapeIndex.ISOLATED
