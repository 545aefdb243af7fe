"""Exception hierarchy for persian-shaper.

The shaping engine itself never raises. These errors belong to the
surrounding tooling: configuration, font inspection and parser lookup.
"""

from __future__ import annotations

from typing import Any


class PersianShaperError(Exception):
    """Base exception for all persian-shaper errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class ConfigError(PersianShaperError):
    """Raised when a configuration file is missing, malformed or invalid."""

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message, {"key": key} if key else None)
        self.key = key


class FontLoadError(PersianShaperError):
    """Raised when a font file cannot be opened by fontTools."""

    def __init__(self, font_path: str, reason: str) -> None:
        super().__init__(f"Cannot load font: {reason}", {"path": font_path})
        self.font_path = font_path
        self.reason = reason


class ParserNotFoundError(PersianShaperError):
    """Raised when no glyph parser is registered under a name."""

    def __init__(self, name: str, available: list[str]) -> None:
        super().__init__(
            f"Unknown glyph parser: {name}",
            {"available": ", ".join(available)},
        )
        self.name = name
        self.available = available
