"""persian-shaper: Persian contextual shaping for glyph-atlas text renderers.

This library provides:
- Presentation-form selection (isolated, final, initial, medial) per letter
- In-place reversal of digit runs inside right-to-left text
- A glyph parser plugin with inert serialization hooks
- Font coverage checks for the presentation forms (fontTools)

Example:
    >>> from persian_shaper import shape
    >>> [hex(ord(c)) for c in shape("با")]
    ['0xfe91', '0xfe8e']
"""

from persian_shaper.config import Config
from persian_shaper.exceptions import (
    ConfigError,
    FontLoadError,
    ParserNotFoundError,
    PersianShaperError,
)
from persian_shaper.fonts import CoverageReport, check_font_coverage
from persian_shaper.shaping import (
    GlyphParser,
    LetterEntry,
    PersianGlyphParser,
    ShapeIndex,
    classify,
    get_entry,
    get_parser,
    shape,
    shape_codepoints,
)

__version__ = "0.1.0"

__all__ = [
    # Shaping
    "shape",
    "shape_codepoints",
    "classify",
    "get_entry",
    "LetterEntry",
    "ShapeIndex",
    # Plugins
    "GlyphParser",
    "PersianGlyphParser",
    "get_parser",
    # Fonts
    "CoverageReport",
    "check_font_coverage",
    "Config",
    # Exceptions
    "PersianShaperError",
    "ConfigError",
    "FontLoadError",
    "ParserNotFoundError",
    # Metadata
    "__version__",
]
