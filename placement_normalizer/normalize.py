"""
Cell normalization for placement exports.

Responsibilities:
- strip annotations in parentheses
- unify decimal separators and dashes
- cut tolerance suffixes after '%'
- keep the LESR marker when the source carried one
- chip capacitor / resistor canonical names
- Cyrillic look-alike letters -> Latin
"""

from __future__ import annotations

from .rules import (
    CAPACITOR_RULES,
    HOMOGLYPH_TABLE,
    PAREN_RE,
    RESISTOR_RULES,
    SPACE_BEFORE_DASH_RE,
)


def _strip_leading_junk(s: str) -> str:
    pos = 0
    while pos < len(s) and not (s[pos].isalnum() or s[pos] == "%"):
        pos += 1
    return s[pos:]


def normalize_chip_capacitor(s: str) -> str:
    """Drop the X5R/X7R dielectric token, fold NP0 into an 'N' prefix."""
    for pattern, rewrite in CAPACITOR_RULES:
        m = pattern.fullmatch(s)
        if m is not None:
            return rewrite(m)
    return s


def normalize_resistor(s: str) -> str:
    """Drop the ppm token of '<pkg>-<P>W-<value>-<n>ppm[-<tol>%]'."""
    for pattern, rewrite in RESISTOR_RULES:
        m = pattern.search(s)
        if m is not None:
            return s[: m.start()] + rewrite(m) + s[m.end():]
    return s


def fix_homoglyphs(s: str) -> str:
    return s.translate(HOMOGLYPH_TABLE)


def normalize_cell(raw: str) -> str:
    """
    Normalize a single field value.

    Total and deterministic; the steps run in a fixed order and the LESR check
    deliberately happens after the '%' truncation.
    """
    s = PAREN_RE.sub("", raw)
    s = s.replace(",", ".").replace("?", "-")
    s = SPACE_BEFORE_DASH_RE.sub("-", s)

    pct = s.find("%")
    if pct != -1:
        s = s[: pct + 1]

    s = _strip_leading_junk(s)

    if "lesr" in raw.lower() and "lesr" not in s.lower():
        s += "LESR" if s.endswith("%") else " LESR"

    s = s.strip(" \t")

    s = normalize_chip_capacitor(s)
    s = normalize_resistor(s)
    return fix_homoglyphs(s)


def normalize_record(cells: list[str]) -> list[str]:
    return [normalize_cell(c) for c in cells]
