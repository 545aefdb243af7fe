"""Glyph parser plugins.

A glyph parser is what a text-layout host calls once per text run before it
looks glyphs up in a font atlas. Hosts that serialize their plugins also
call ``write`` and ``read``; parsers here carry no state, so those hooks
do nothing.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from persian_shaper.exceptions import ParserNotFoundError
from persian_shaper.shaping.engine import shape

logger = logging.getLogger(__name__)


class GlyphParser(ABC):
    """Capability contract for text-run transforms."""

    @abstractmethod
    def parse(self, text: str) -> str:
        """Transform one text run into the code points to draw.

        Args:
            text: Text run in logical order.

        Returns:
            Transformed run of the same length.
        """

    @abstractmethod
    def write(self, exporter: Any) -> None:
        """Persist parser state through the host's exporter."""

    @abstractmethod
    def read(self, importer: Any) -> None:
        """Restore parser state from the host's importer."""


class PersianGlyphParser(GlyphParser):
    """Shapes Persian text into presentation forms.

    Example:
        >>> parser = PersianGlyphParser()
        >>> parser.parse("12")
        '21'
    """

    def parse(self, text: str) -> str:
        return shape(text)

    def write(self, exporter: Any) -> None:
        logger.debug("PersianGlyphParser.write: nothing to persist")

    def read(self, importer: Any) -> None:
        logger.debug("PersianGlyphParser.read: nothing to restore")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PersianGlyphParser)

    def __hash__(self) -> int:
        return hash(PersianGlyphParser)

    def __repr__(self) -> str:
        return "PersianGlyphParser()"


_PARSERS: dict[str, type[GlyphParser]] = {
    "persian": PersianGlyphParser,
}


def available_parsers() -> list[str]:
    return sorted(_PARSERS)


def get_parser(name: str) -> GlyphParser:
    """Instantiate the glyph parser registered under ``name``.

    Raises:
        ParserNotFoundError: If no parser has that name.
    """
    try:
        parser_cls = _PARSERS[name.lower()]
    except KeyError:
        raise ParserNotFoundError(name, available_parsers()) from None
    return parser_cls()
