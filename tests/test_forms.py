"""Unit tests for persian_shaper.shaping.forms module.

Tests cover the presentation-form table contents, the right-joining-only
duplication convention, and the lookup helpers.
"""

import dataclasses

import pytest

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

RIGHT_JOINING_ONLY = {"آ", "ا", "د", "ذ", "ر", "ز", "ژ", "و"}


class TestShapeIndex:
    """Tests for the ShapeIndex enum."""

    def test_values_match_form_positions(self) -> None:
        """Isolated, final, initial and medial map to 0..3."""
        assert [int(i) for i in ShapeIndex] == [0, 1, 2, 3]
        assert ShapeIndex.INITIAL.name == "INITIAL"


class TestPresentationFormTable:
    """Tests for the table data."""

    def test_table_has_34_letters(self) -> None:
        """The Persian alphabet plus hamza-bearing yeh."""
        assert len(LETTERS) == 34
        assert len(PRESENTATION_FORMS) == 34

    def test_bases_are_single_characters(self) -> None:
        """Every key is one code point."""
        for entry in LETTERS:
            assert len(entry.base) == 1
            assert len(entry.forms) == 4

    def test_right_joining_only_letters(self) -> None:
        """Exactly the non-forward-joining letters duplicate their forms."""
        duplicated = {entry.base for entry in LETTERS if entry.is_right_joining_only}
        assert duplicated == RIGHT_JOINING_ONLY

    def test_beh_forms(self) -> None:
        """Beh carries four distinct forms."""
        entry = get_entry("ب")
        assert entry is not None
        assert entry.forms == (1576, 65168, 65169, 65170)
        assert not entry.is_right_joining_only

    def test_alef_forms(self) -> None:
        """Alef repeats isolated and final in the initial and medial slots."""
        entry = get_entry("ا")
        assert entry is not None
        assert entry.forms == (1575, 65166, 1575, 65166)

    def test_keheh_keyed_by_persian_code_point(self) -> None:
        """Keheh (U+06A9) keeps the Arabic kaf isolated form."""
        entry = get_entry("ک")
        assert entry is not None
        assert entry.forms == (0x0643, 0xFB8F, 0xFB90, 0xFB91)
        assert get_entry("\u0643") is None

    def test_farsi_yeh_keyed_by_persian_code_point(self) -> None:
        """Farsi yeh (U+06CC) keeps the alef maksura isolated form."""
        entry = get_entry("ی")
        assert entry is not None
        assert entry.forms == (0x0649, 0xFBFD, 0xFBFE, 0xFBFF)
        assert get_entry("\u064a") is None

    def test_hamza_is_not_shapable(self) -> None:
        """Isolated hamza passes through untouched."""
        assert not is_shapable("ء")

    def test_joined_forms_are_not_table_keys(self) -> None:
        """Final and medial forms never feed back into the lookup."""
        for entry in LETTERS:
            assert chr(entry.forms[ShapeIndex.FINAL]) not in PRESENTATION_FORMS
            assert chr(entry.forms[ShapeIndex.MEDIAL]) not in PRESENTATION_FORMS

    def test_joined_forms_are_in_presentation_blocks(self) -> None:
        """Final forms live in Arabic Presentation Forms-A or -B."""
        for entry in LETTERS:
            assert 0xFB50 <= entry.forms[ShapeIndex.FINAL] <= 0xFEFF


class TestLookupHelpers:
    """Tests for get_entry, get_forms and is_shapable."""

    @pytest.mark.parametrize("char", ["a", " ", "1", "\ufe91", "", "\u060c"])
    def test_non_letters_have_no_entry(self, char: str) -> None:
        """Absence is a normal result, not an error."""
        assert get_entry(char) is None
        assert get_forms(char) is None
        assert is_shapable(char) is False

    def test_get_forms_returns_strings(self) -> None:
        """Forms come back as one-character strings indexed by ShapeIndex."""
        forms = get_forms("ب")
        assert forms == ("\u0628", "\ufe90", "\ufe91", "\ufe92")
        assert forms[ShapeIndex.MEDIAL] == "\ufe92"

    def test_glyph_accepts_shape_index(self) -> None:
        """LetterEntry.glyph converts a form to a string."""
        entry = LetterEntry("x", (1, 2, 3, 4))
        assert entry.glyph(ShapeIndex.FINAL) == "\x02"

    def test_presentation_codepoints(self) -> None:
        """The emitted set includes base isolated forms and joined forms."""
        codepoints = presentation_codepoints()
        assert 0x0628 in codepoints
        assert 0xFE91 in codepoints
        assert 0x06CC not in codepoints


class TestImmutability:
    """The table is shared, so it must not be mutable."""

    def test_mapping_is_read_only(self) -> None:
        """PRESENTATION_FORMS rejects item assignment."""
        with pytest.raises(TypeError):
            PRESENTATION_FORMS["x"] = LetterEntry("x", (1, 2, 3, 4))  # type: ignore[index]

    def test_entries_are_frozen(self) -> None:
        """LetterEntry fields cannot be reassigned."""
        entry = get_entry("ب")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.base = "x"  # type: ignore[misc,union-attr]
