"""Tests for the style table registry."""

import pytest

from styledtext_mcp.tables import (
    Category,
    Emphasis,
    SlotRange,
    StyleFamily,
    alphabet_length,
    has_table,
    iter_slots,
    lookup_override,
    override_for,
    reverse_override,
    slot_for,
    supported_targets,
)


# ---------------------------------------------------------------------------
# Selector parsing
# ---------------------------------------------------------------------------


class TestSelectors:
    @pytest.mark.parametrize("name", ["sans-serif", "sans_serif", "SansSerif", "sans serif", "sans"])
    def test_family_spellings(self, name):
        assert StyleFamily(name) is StyleFamily.SANS_SERIF

    @pytest.mark.parametrize("name", ["double-struck", "doublestruck", "double_struck"])
    def test_double_struck_spellings(self, name):
        assert StyleFamily(name) is StyleFamily.DOUBLE_STRUCK

    def test_mono_alias(self):
        assert StyleFamily("mono") is StyleFamily.MONOSPACE

    @pytest.mark.parametrize("name", ["bold-italic", "bold_italic", "BoldItalic"])
    def test_emphasis_spellings(self, name):
        assert Emphasis(name) is Emphasis.BOLD_ITALIC

    def test_unknown_family(self):
        with pytest.raises(ValueError):
            StyleFamily("comic-sans")

    def test_unknown_emphasis(self):
        with pytest.raises(ValueError):
            Emphasis("heavy")

    def test_str_is_value(self):
        assert str(StyleFamily.DOUBLE_STRUCK) == "double-struck"
        assert str(Emphasis.BOLD_ITALIC) == "bold-italic"


# ---------------------------------------------------------------------------
# Slots
# ---------------------------------------------------------------------------


class TestSlotFor:
    def test_serif_bold_letters(self):
        assert slot_for(StyleFamily.SERIF, Category.LETTER, Emphasis.BOLD) == (0x1D400, 0x1D41A)

    def test_plain_ascii(self):
        assert slot_for(StyleFamily.SERIF, Category.LETTER, Emphasis.NORMAL) == (0x41, 0x61)

    def test_monospace_has_only_normal(self):
        assert slot_for(StyleFamily.MONOSPACE, Category.LETTER, Emphasis.NORMAL) == (0x1D670, 0x1D68A)
        for emphasis in (Emphasis.BOLD, Emphasis.ITALIC, Emphasis.BOLD_ITALIC):
            assert slot_for(StyleFamily.MONOSPACE, Category.LETTER, emphasis) is None

    def test_double_struck_letters_bold_only(self):
        assert slot_for(StyleFamily.DOUBLE_STRUCK, Category.LETTER, Emphasis.NORMAL) is None
        assert slot_for(StyleFamily.DOUBLE_STRUCK, Category.LETTER, Emphasis.BOLD) == (0x1D538, 0x1D552)

    def test_digits_share_base(self):
        assert slot_for(StyleFamily.SANS_SERIF, Category.DIGIT, Emphasis.BOLD) == (0x1D7EC, 0x1D7EC)

    def test_script_digits_absent(self):
        assert not has_table(StyleFamily.SCRIPT, Category.DIGIT)
        assert slot_for(StyleFamily.SCRIPT, Category.DIGIT, Emphasis.NORMAL) is None

    @pytest.mark.parametrize("family", [
        StyleFamily.SCRIPT, StyleFamily.FRAKTUR, StyleFamily.MONOSPACE, StyleFamily.DOUBLE_STRUCK,
    ])
    def test_greek_tables_absent(self, family):
        assert not has_table(family, Category.GREEK)

    def test_other_has_nothing(self):
        assert not any(has_table(f, Category.OTHER) for f in StyleFamily)

    def test_slot_range_get(self):
        slots = SlotRange(bold=(1, 2))
        assert slots.get(Emphasis.BOLD) == (1, 2)
        assert slots.get(Emphasis.ITALIC) is None


class TestAlphabetLength:
    def test_letters(self):
        assert alphabet_length(Category.LETTER) == 26
        assert alphabet_length(Category.LETTER, uppercase=False) == 26

    def test_digits(self):
        assert alphabet_length(Category.DIGIT, uppercase=False) == 10

    def test_greek_lowercase_carries_variants(self):
        assert alphabet_length(Category.GREEK, uppercase=True) == 26
        assert alphabet_length(Category.GREEK, uppercase=False) == 32


# ---------------------------------------------------------------------------
# Corner cases
# ---------------------------------------------------------------------------


class TestOverrides:
    def test_script_uppercase_offsets(self):
        table = override_for(StyleFamily.SCRIPT, Category.LETTER, Emphasis.NORMAL, True)
        assert [o for o, _ in table] == [1, 4, 5, 7, 8, 11, 12, 17]

    def test_script_capital_i(self):
        table = override_for(StyleFamily.SCRIPT, Category.LETTER, Emphasis.NORMAL, True)
        assert lookup_override(table, 8) == 0x2110

    def test_script_lowercase_offsets(self):
        table = override_for(StyleFamily.SCRIPT, Category.LETTER, Emphasis.NORMAL, False)
        assert table == ((4, 0x212F), (6, 0x210A), (14, 0x2134))

    def test_fraktur_uppercase_offsets(self):
        table = override_for(StyleFamily.FRAKTUR, Category.LETTER, Emphasis.NORMAL, True)
        assert [o for o, _ in table] == [2, 7, 8, 17, 25]

    def test_double_struck_uppercase_offsets(self):
        table = override_for(StyleFamily.DOUBLE_STRUCK, Category.LETTER, Emphasis.BOLD, True)
        assert [o for o, _ in table] == [2, 7, 13, 15, 16, 17, 25]

    def test_greek_lowercase_variants(self):
        table = override_for(StyleFamily.SERIF, Category.GREEK, Emphasis.NORMAL, False)
        assert [o for o, _ in table] == list(range(25, 32))
        assert lookup_override(table, 25) == 0x2202

    def test_planck_constant(self):
        table = override_for(StyleFamily.SERIF, Category.LETTER, Emphasis.ITALIC, False)
        assert lookup_override(table, 7) == 0x210E

    def test_missing_table_is_empty(self):
        assert override_for(StyleFamily.SANS_SERIF, Category.LETTER, Emphasis.BOLD, True) == ()

    def test_lookup_miss(self):
        table = override_for(StyleFamily.FRAKTUR, Category.LETTER, Emphasis.NORMAL, True)
        assert lookup_override(table, 0) is None
        assert lookup_override(table, 26) is None
        assert lookup_override((), 3) is None

    def test_all_tables_sorted(self):
        for family, category, emphasis, _ in iter_slots():
            for uppercase in (True, False):
                offsets = [o for o, _ in override_for(family, category, emphasis, uppercase)]
                assert offsets == sorted(offsets)

    def test_overrides_differ_from_arithmetic(self):
        for family, category, emphasis, (upper, lower) in iter_slots():
            for uppercase, base in ((True, upper), (False, lower)):
                for offset, code_point in override_for(family, category, emphasis, uppercase):
                    assert code_point != base + offset

    def test_reverse_override(self):
        assert reverse_override(0x210B) == (
            StyleFamily.SCRIPT, Category.LETTER, Emphasis.NORMAL, True, 7,
        )
        assert reverse_override(0x2134) == (
            StyleFamily.SCRIPT, Category.LETTER, Emphasis.NORMAL, False, 14,
        )
        assert reverse_override(0x41) is None


# ---------------------------------------------------------------------------
# Supported targets
# ---------------------------------------------------------------------------


class TestSupportedTargets:
    def test_letter_target_count(self):
        # serif 4, sans-serif 4, script 2, fraktur 2, monospace 1, double-struck 1
        assert len(supported_targets(Category.LETTER)) == 14

    def test_digit_targets(self):
        assert set(supported_targets(Category.DIGIT)) == {
            (StyleFamily.SERIF, Emphasis.NORMAL),
            (StyleFamily.SERIF, Emphasis.BOLD),
            (StyleFamily.SANS_SERIF, Emphasis.NORMAL),
            (StyleFamily.SANS_SERIF, Emphasis.BOLD),
            (StyleFamily.MONOSPACE, Emphasis.NORMAL),
            (StyleFamily.DOUBLE_STRUCK, Emphasis.NORMAL),
        }

    def test_greek_targets(self):
        assert len(supported_targets(Category.GREEK)) == 6

    def test_other_has_no_targets(self):
        assert supported_targets(Category.OTHER) == []
