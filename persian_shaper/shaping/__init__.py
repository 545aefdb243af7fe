"""Text shaping for persian-shaper.

This subpackage provides:
- The presentation-form table for the Persian alphabet
- Join classification from neighbouring characters
- The single-pass shaping engine with digit-run reversal
- Glyph parser plugins wrapping the engine
"""

from persian_shaper.shaping.forms import (
    LETTERS,
    PRESENTATION_FORMS,
    LetterEntry,
    ShapeIndex,
    get_entry,
    get_forms,
    is_shapable,
    presentation_codepoints,
)
from persian_shaper.shaping.joining import (
    LEFT_BLOCKING,
    RIGHT_BLOCKING,
    classify,
    joins_from_left,
    joins_from_right,
)
from persian_shaper.shaping.engine import (
    is_digit,
    iter_digit_runs,
    shape,
    shape_codepoints,
)
from persian_shaper.shaping.parser import (
    GlyphParser,
    PersianGlyphParser,
    available_parsers,
    get_parser,
)

__all__ = [
    "LETTERS",
    "PRESENTATION_FORMS",
    "LetterEntry",
    "ShapeIndex",
    "get_entry",
    "get_forms",
    "is_shapable",
    "presentation_codepoints",
    "LEFT_BLOCKING",
    "RIGHT_BLOCKING",
    "classify",
    "joins_from_left",
    "joins_from_right",
    "is_digit",
    "iter_digit_runs",
    "shape",
    "shape_codepoints",
    "GlyphParser",
    "PersianGlyphParser",
    "available_parsers",
    "get_parser",
]
