"""Font coverage check for Persian presentation forms.

Shaped text is drawn by looking its code points up in a font's cmap. A font
missing some presentation forms renders tofu for those letters, so this
module reports which forms a font lacks before it is baked into an atlas.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError

from persian_shaper.exceptions import FontLoadError
from persian_shaper.shaping.forms import LETTERS, presentation_codepoints

logger = logging.getLogger(__name__)


@dataclass
class CoverageReport:
    """Presentation forms a font does and does not map."""

    font_path: Path
    total: int
    missing: dict[str, tuple[int, ...]] = field(default_factory=dict)

    @property
    def missing_count(self) -> int:
        return len({cp for cps in self.missing.values() for cp in cps})

    @property
    def covered(self) -> int:
        return self.total - self.missing_count

    @property
    def is_complete(self) -> bool:
        return not self.missing


def load_cmap(font_path: Path, font_number: int = 0) -> dict[int, str]:
    """Return the best Unicode cmap of a font, or an empty dict.

    Args:
        font_path: TTF, OTF or TTC file.
        font_number: Face index inside a collection.

    Raises:
        FontLoadError: If the file is missing or fontTools cannot parse it.
    """
    try:
        font = TTFont(str(font_path), fontNumber=font_number, lazy=True)
    except (OSError, TTLibError) as e:
        raise FontLoadError(str(font_path), str(e)) from e

    try:
        if "cmap" not in font:
            logger.warning("%s has no cmap table", font_path)
            return {}
        cmap = font.getBestCmap()
    except (KeyError, TTLibError) as e:
        raise FontLoadError(str(font_path), f"unreadable cmap: {e}") from e
    finally:
        font.close()

    if cmap is None:
        logger.warning("%s has no Unicode cmap", font_path)
        return {}
    return cmap


def check_font_coverage(font_path: Path | str, font_number: int = 0) -> CoverageReport:
    """Report which table presentation forms ``font_path`` is missing.

    Args:
        font_path: Font file to inspect.
        font_number: Face index for TTC collections.

    Returns:
        CoverageReport keyed by base letter, listing missing code points.
    """
    font_path = Path(font_path)
    logger.info("Checking coverage of %s (face %d)", font_path, font_number)
    cmap = load_cmap(font_path, font_number)

    missing: dict[str, tuple[int, ...]] = {}
    for entry in LETTERS:
        absent = tuple(sorted({cp for cp in entry.forms if cp not in cmap}))
        if absent:
            missing[entry.base] = absent

    report = CoverageReport(
        font_path=font_path,
        total=len(presentation_codepoints()),
        missing=missing,
    )
    logger.info(
        "%s covers %d/%d presentation code points",
        font_path,
        report.covered,
        report.total,
    )
    return report
