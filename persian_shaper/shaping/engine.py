"""Single-pass Persian shaping engine.

Text arrives in logical (reading) order. Every table letter is swapped for
the presentation form picked by :func:`classify`; every other character is
copied through. Digit runs are emitted reversed at the position where the
run started, so numerals display left-to-right inside right-to-left text.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from persian_shaper.shaping.forms import get_forms
from persian_shaper.shaping.joining import classify


def is_digit(char: str) -> bool:
    """True for a decimal digit of any script (Unicode category Nd)."""
    return char.isdecimal()


def iter_digit_runs(text: str) -> Iterator[tuple[int, int]]:
    """Yield ``(start, end)`` spans of the maximal digit runs in ``text``."""
    start: int | None = None
    for i, char in enumerate(text):
        if is_digit(char):
            if start is None:
                start = i
        elif start is not None:
            yield start, i
            start = None
    if start is not None:
        yield start, len(text)


def shape(text: str) -> str:
    """Convert logical-order Persian text to presentation forms.

    The function is total: any string, including empty strings, lone
    surrogates and characters from other scripts, comes back with the same
    length. Inputs of zero or one character are returned untouched, so a
    lone letter keeps its base code point rather than its isolated form.

    Args:
        text: One renderable text run in logical order.

    Returns:
        The shaped run with digit runs reversed in place.
    """
    if len(text) <= 1:
        return text

    output: list[str] = []
    digits: list[str] = []
    last = len(text) - 1

    for i, char in enumerate(text):
        if is_digit(char):
            digits.append(char)
            continue

        if digits:
            output.extend(reversed(digits))
            digits.clear()

        forms = get_forms(char)
        if forms is None:
            output.append(char)
            continue

        prev = text[i - 1] if i > 0 else None
        next_char = text[i + 1] if i < last else None
        output.append(forms[classify(prev, next_char)])

    if digits:
        output.extend(reversed(digits))

    return "".join(output)


def shape_codepoints(codepoints: Sequence[int]) -> list[int]:
    """Same as :func:`shape`, over a sequence of integer code points."""
    text = "".join(map(chr, codepoints))
    return [ord(char) for char in shape(text)]
