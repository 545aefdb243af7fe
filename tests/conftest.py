"""Pytest configuration and shared fixtures for persian-shaper tests."""

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest
from click.testing import CliRunner
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from persian_shaper import config as config_module

# Code points of commonly used letters
BEH = 0x0628
ALEF = 0x0627


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the user's real config file and environment out of every test."""
    monkeypatch.delenv(config_module.CONFIG_ENV_VAR, raising=False)
    default_path = tmp_path / "home-config" / "config.yaml"
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", default_path)
    return default_path


@pytest.fixture
def runner() -> CliRunner:
    """Create a CliRunner instance for testing CLI commands."""
    return CliRunner()


def _build_font(path: Path, codepoints: Iterable[int]) -> Path:
    codepoints = sorted(set(codepoints))
    glyph_names = {cp: f"uni{cp:04X}" for cp in codepoints}
    glyph_order = [".notdef", *glyph_names.values()]

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(glyph_names)
    fb.setupGlyf({name: TTGlyphPen(None).glyph() for name in glyph_order})
    fb.setupHorizontalMetrics({name: (500, 0) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Shaper Test", "styleName": "Regular"})
    fb.setupOS2()
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture
def make_font(tmp_path: Path) -> Callable[[str, Iterable[int]], Path]:
    """Return a factory that writes a TrueType font mapping the given code points."""

    def factory(name: str, codepoints: Iterable[int]) -> Path:
        return _build_font(tmp_path / name, codepoints)

    return factory


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
