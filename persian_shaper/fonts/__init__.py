"""Font inspection for persian-shaper.

This subpackage provides:
- Coverage checks of presentation forms against a font's cmap (fontTools)
"""

from persian_shaper.fonts.coverage import CoverageReport, check_font_coverage, load_cmap

__all__ = ["CoverageReport", "check_font_coverage", "load_cmap"]
