"""Presentation-form table for the Persian alphabet.

Each shapable base letter maps to four code points, indexed by
:class:`ShapeIndex`: isolated, final, initial and medial. Letters that never
connect forward (alef, dal, reh, zeh, waw and friends) repeat their isolated
and final forms in the initial and medial slots, so the lookup is uniform
across the whole table.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType


class ShapeIndex(IntEnum):
    """Position of a glyph variant inside a letter's form tuple."""

    ISOLATED = 0
    FINAL = 1
    INITIAL = 2
    MEDIAL = 3


@dataclass(frozen=True)
class LetterEntry:
    """One shapable letter and its four presentation forms."""

    base: str
    forms: tuple[int, int, int, int]

    @property
    def is_right_joining_only(self) -> bool:
        """True when the letter has no distinct initial or medial form."""
        return (
            self.forms[ShapeIndex.INITIAL] == self.forms[ShapeIndex.ISOLATED]
            and self.forms[ShapeIndex.MEDIAL] == self.forms[ShapeIndex.FINAL]
        )

    def glyph(self, index: ShapeIndex | int) -> str:
        """Return the presentation form at ``index`` as a one-character string."""
        return chr(self.forms[index])


# Alphabet order. Keheh (U+06A9) and Farsi Yeh (U+06CC) are keyed by the
# Persian code points but keep the Arabic kaf / alef maksura isolated forms.
LETTERS: tuple[LetterEntry, ...] = (
    LetterEntry("آ", (0x0622, 0xFE82, 0x0622, 0xFE82)),  # آ
    LetterEntry("ا", (0x0627, 0xFE8E, 0x0627, 0xFE8E)),  # ا
    LetterEntry("ب", (0x0628, 0xFE90, 0xFE91, 0xFE92)),  # ب
    LetterEntry("پ", (0x067E, 0xFB57, 0xFB58, 0xFB59)),  # پ
    LetterEntry("ت", (0x062A, 0xFE96, 0xFE97, 0xFE98)),  # ت
    LetterEntry("ث", (0x062B, 0xFE9A, 0xFE9B, 0xFE9C)),  # ث
    LetterEntry("ج", (0x062C, 0xFE9E, 0xFE9F, 0xFEA0)),  # ج
    LetterEntry("چ", (0x0686, 0xFB7B, 0xFB7C, 0xFB7D)),  # چ
    LetterEntry("ح", (0x062D, 0xFEA2, 0xFEA3, 0xFEA4)),  # ح
    LetterEntry("خ", (0x062E, 0xFEA6, 0xFEA7, 0xFEA8)),  # خ
    LetterEntry("د", (0x062F, 0xFEAA, 0x062F, 0xFEAA)),  # د
    LetterEntry("ذ", (0x0630, 0xFEAC, 0x0630, 0xFEAC)),  # ذ
    LetterEntry("ر", (0x0631, 0xFEAE, 0x0631, 0xFEAE)),  # ر
    LetterEntry("ز", (0x0632, 0xFEB0, 0x0632, 0xFEB0)),  # ز
    LetterEntry("ژ", (0x0698, 0xFB8B, 0x0698, 0xFB8B)),  # ژ
    LetterEntry("س", (0x0633, 0xFEB2, 0xFEB3, 0xFEB4)),  # س
    LetterEntry("ش", (0x0634, 0xFEB6, 0xFEB7, 0xFEB8)),  # ش
    LetterEntry("ص", (0x0635, 0xFEBA, 0xFEBB, 0xFEBC)),  # ص
    LetterEntry("ض", (0x0636, 0xFEBE, 0xFEBF, 0xFEC0)),  # ض
    LetterEntry("ط", (0x0637, 0xFEC2, 0xFEC3, 0xFEC4)),  # ط
    LetterEntry("ظ", (0x0638, 0xFEC6, 0xFEC7, 0xFEC8)),  # ظ
    LetterEntry("ع", (0x0639, 0xFECA, 0xFECB, 0xFECC)),  # ع
    LetterEntry("غ", (0x063A, 0xFECE, 0xFECF, 0xFED0)),  # غ
    LetterEntry("ف", (0x0641, 0xFED2, 0xFED3, 0xFED4)),  # ف
    LetterEntry("ق", (0x0642, 0xFED6, 0xFED7, 0xFED8)),  # ق
    LetterEntry("ک", (0x0643, 0xFB8F, 0xFB90, 0xFB91)),  # ک
    LetterEntry("گ", (0x06AF, 0xFB93, 0xFB94, 0xFB95)),  # گ
    LetterEntry("ل", (0x0644, 0xFEDE, 0xFEDF, 0xFEE0)),  # ل
    LetterEntry("م", (0x0645, 0xFEE2, 0xFEE3, 0xFEE4)),  # م
    LetterEntry("ن", (0x0646, 0xFEE6, 0xFEE7, 0xFEE8)),  # ن
    LetterEntry("و", (0x0648, 0xFEEE, 0x0648, 0xFEEE)),  # و
    LetterEntry("ه", (0x0647, 0xFEEA, 0xFEEB, 0xFEEC)),  # ه
    LetterEntry("ی", (0x0649, 0xFBFD, 0xFBFE, 0xFBFF)),  # ی
    LetterEntry("ئ", (0x0626, 0xFE8A, 0xFE8B, 0xFE8C)),  # ئ
)

PRESENTATION_FORMS: Mapping[str, LetterEntry] = MappingProxyType(
    {entry.base: entry for entry in LETTERS}
)

_GLYPHS: Mapping[str, tuple[str, str, str, str]] = MappingProxyType(
    {
        entry.base: (
            entry.glyph(ShapeIndex.ISOLATED),
            entry.glyph(ShapeIndex.FINAL),
            entry.glyph(ShapeIndex.INITIAL),
            entry.glyph(ShapeIndex.MEDIAL),
        )
        for entry in LETTERS
    }
)


def get_entry(char: str) -> LetterEntry | None:
    """Return the table entry for ``char``, or None if it is not shapable."""
    return PRESENTATION_FORMS.get(char)


def get_forms(char: str) -> tuple[str, str, str, str] | None:
    """Return the four presentation forms of ``char`` as strings.

    Args:
        char: A single character from the input text.

    Returns:
        Tuple indexed by :class:`ShapeIndex`, or None when ``char`` has no
        entry. Absence is the normal outcome for spaces, punctuation, Latin
        letters and already-shaped presentation forms.
    """
    return _GLYPHS.get(char)


def is_shapable(char: str) -> bool:
    return char in _GLYPHS


def presentation_codepoints() -> frozenset[int]:
    """Every code point the table can emit, base forms included."""
    return frozenset(cp for entry in LETTERS for cp in entry.forms)
