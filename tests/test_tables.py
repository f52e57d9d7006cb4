"""Tests for the letter tables."""

import unicodedata

import pytest

from srbtr.cyrillic import (
    COMPOSITE_DIGRAPHS,
    DIGRAPH_LEADS,
    LATIN_TO_CYRILLIC,
    LEGACY_ALIASES,
    nfc,
)


# =============================================================================
# Lookup table
# =============================================================================


class TestLatinToCyrillic:
    def test_covers_alphabet(self):
        # 30 letters in two cases, plus the eth lookalike
        assert len(LATIN_TO_CYRILLIC) == 61
        assert len(set(LATIN_TO_CYRILLIC.values())) == 60

    def test_digraph_keys(self):
        digraphs = {k for k in LATIN_TO_CYRILLIC if len(k) == 2}
        assert digraphs == {"Lj", "lj", "Nj", "nj", "Dž", "dž"}

    def test_keys_and_values_are_nfc(self):
        for key, value in LATIN_TO_CYRILLIC.items():
            assert unicodedata.is_normalized("NFC", key)
            assert unicodedata.is_normalized("NFC", value)

    def test_eth_alias(self):
        assert LATIN_TO_CYRILLIC["\u00d0"] == LATIN_TO_CYRILLIC["\u0110"] == "Ђ"

    def test_read_only(self):
        with pytest.raises(TypeError):
            LATIN_TO_CYRILLIC["x"] = "х"

    def test_no_cyrillic_keys(self):
        assert not set(LATIN_TO_CYRILLIC) & set(LATIN_TO_CYRILLIC.values())

    def test_digraph_leads_match_two_letter_keys(self):
        two_letter = {k for k in LATIN_TO_CYRILLIC if len(k) == 2} | set(LEGACY_ALIASES)
        assert {k[0] for k in two_letter} == DIGRAPH_LEADS


# =============================================================================
# Composite digraphs and aliases
# =============================================================================


class TestCompositeDigraphs:
    def test_all_nine_codepoints(self):
        assert set(COMPOSITE_DIGRAPHS) == {chr(cp) for cp in range(0x01C4, 0x01CD)}

    def test_values_resolve_through_lookup(self):
        for spelling in COMPOSITE_DIGRAPHS.values():
            assert spelling in LATIN_TO_CYRILLIC

    def test_keys_survive_nfc(self):
        # NFC leaves compatibility digraphs composed
        for key in COMPOSITE_DIGRAPHS:
            assert nfc(key) == key


class TestLegacyAliases:
    def test_exact_casings_only(self):
        assert set(LEGACY_ALIASES) == {"Dj", "dj"}

    def test_targets_are_letters(self):
        assert LATIN_TO_CYRILLIC[LEGACY_ALIASES["Dj"]] == "Ђ"
        assert LATIN_TO_CYRILLIC[LEGACY_ALIASES["dj"]] == "ђ"

    def test_aliases_not_in_lookup(self):
        assert not set(LEGACY_ALIASES) & set(LATIN_TO_CYRILLIC)


class TestHelpers:
    def test_nfc_composes(self):
        assert nfc("c\u030c") == "\u010d"
