import pytest

from placement_normalizer.normalize import (
    fix_homoglyphs,
    normalize_cell,
    normalize_chip_capacitor,
    normalize_resistor,
)
from placement_normalizer.rules import HOMOGLYPHS


@pytest.mark.parametrize("raw,expected", [
    ("0402-X5R-16V-10%", "0402-16V-10%"),
    ("0805-x7r-50V-10%", "0805-50V-10%"),
    ("0402-NP0-16V", "0402-N16V"),
    ("0402-X7R-1uF-10%", "0402-1uF-10%"),
    ("1206-NP0-100pF", "1206-N100pF"),
    ("100R-0.25W-10R-200ppm-5%", "100R-0.25W-10R-5%"),
    ("0603-1/10W-4.7K-100ppm", "0603-1/10W-4.7K"),
    ("0402-0.063W-0R-0ppm", "0402-0.063W-0R"),
    ("RES 0603-0.1W-10K-100ppm-1%", "RES 0603-0.1W-10K-1%"),
    ("0,1uF", "0.1uF"),
    ("A?B", "A-B"),
    ("10uF -16V", "10uF-16V"),
    ("100nF 10% X7R", "100nF 10%"),
    ("  --R1", "R1"),
    ("%abc", "%"),
    ("\tR1 ", "R1"),
    ("", ""),
])
def test_normalize_cell(raw, expected):
    assert normalize_cell(raw) == expected


def test_parentheses_removed():
    out = normalize_cell("10uF (Y5V) 16V")
    assert "(" not in out and ")" not in out
    assert out.startswith("10uF")


def test_lesr_appended_after_percent():
    assert normalize_cell("100uF 20% LESR") == "100uF 20%LESR"


def test_lesr_restored_when_removed_with_parentheses():
    assert normalize_cell("(LESR) 100uF") == "100uF LESR"


def test_lesr_kept_when_still_present():
    assert normalize_cell("100uF lesr") == "100uF lesr"


def test_capacitor_rule_needs_known_package():
    assert normalize_chip_capacitor("0302-X5R-16V") == "0302-X5R-16V"


def test_capacitor_rule_is_full_match():
    assert normalize_chip_capacitor("CAP 0402-X5R-16V") == "CAP 0402-X5R-16V"


def test_resistor_without_ppm_unchanged():
    assert normalize_resistor("0603-0.1W-10K-1%") == "0603-0.1W-10K-1%"


def test_homoglyphs():
    # Cyrillic С, К, М, а, о
    assert fix_homoglyphs("СКМао") == "CKMao"
    assert normalize_cell("С1") == "C1"


@pytest.mark.parametrize("raw", [
    "0402-X5R-16V-10%",
    "0402-NP0-16V",
    "100R-0.25W-10R-200ppm-5%",
    "0603-1/10W-4.7K-100ppm",
    "10uF (Y5V) 16V",
    "100uF 20% LESR",
    "(LESR) 100uF",
    "0,1uF ?X",
    "  --R1",
    "СКМ",
])
def test_idempotent(raw):
    once = normalize_cell(raw)
    assert normalize_cell(once) == once


def test_homoglyph_table_maps_cyrillic_to_ascii():
    assert len(HOMOGLYPHS) == 24
    for cyrillic, latin in HOMOGLYPHS.items():
        assert "\u0400" <= cyrillic <= "\u04ff", cyrillic
        assert latin.isascii() and latin.isalpha(), latin
        assert cyrillic.isupper() == latin.isupper()
        assert fix_homoglyphs(cyrillic) == latin
    assert fix_homoglyphs("".join(HOMOGLYPHS)) == "ABEKMHOPCTYXabekmnopctyx"
