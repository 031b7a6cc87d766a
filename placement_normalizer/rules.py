"""
Deterministic normalization rules.

Everything here is static data: file conventions of the placement exports and
the component catalog, plus the domain rewrite rules applied to every cell.
"""

import re

DELIMITER = ";"
CATALOG_EXTENSION = ".csv"
CATALOG_HEADER = "Component_Name_Non_Standart;Component_Name_Standart;Delete_0_or_1"
DELETE_FLAG = "1"
KEEP_FLAG = "0"

UTF8_BOM = b"\xef\xbb\xbf"
OUTPUT_ENCODING = "utf-8"

# Designator field, 1-indexed
DESIGNATOR_POSITION = 5
ROTATION_POSITION = 4
ROTATED_CLASSES = ("C", "R")
ROTATION_FIXES = {"180": "0", "270": "90"}

CHIP_PACKAGES = ("0402", "0603", "0805", "1206", "1210")

PAREN_RE = re.compile(r"\([^)]*\)")
SPACE_BEFORE_DASH_RE = re.compile(r"\s+-")

_PKG = "|".join(CHIP_PACKAGES)

# (pattern, rewriter). Matched against the whole cell; first matching rule wins.
# The part after the dielectric token is not constrained.
CAPACITOR_RULES = [
    (
        re.compile(rf"\s*({_PKG})\s*-\s*(?:X5R|X7R)\s*-\s*(\S.*)", re.IGNORECASE),
        lambda m: f"{m.group(1)}-{m.group(2)}",
    ),
    (
        re.compile(rf"\s*({_PKG})\s*-\s*NP0\s*-\s*(\S.*)", re.IGNORECASE),
        lambda m: f"{m.group(1)}-N{m.group(2)}",
    ),
]

RESISTOR_RE = re.compile(
    r"([^-\s]+)\s*-\s*([0-9]+(?:\.[0-9]+)?|[0-9]+/[0-9]+)\s*W\s*-\s*"
    r"(0R|[0-9]+(?:\.[0-9]+)?[RKM])\s*-\s*[0-9]+\s*ppm(?:\s*-\s*([0-9]+%))?",
    re.IGNORECASE,
)


def _rewrite_resistor(m: re.Match) -> str:
    out = f"{m.group(1)}-{m.group(2)}W-{m.group(3)}"
    if m.group(4):
        out += f"-{m.group(4)}"
    return out


# (pattern, rewriter). Each rule searches anywhere and rewrites the matched span.
RESISTOR_RULES = [
    (RESISTOR_RE, _rewrite_resistor),
]

# Cyrillic letters that render identically to Latin ones
HOMOGLYPHS = {
    "А": "A", "В": "B", "Е": "E", "К": "K",
    "М": "M", "Н": "H", "О": "O", "Р": "P",
    "С": "C", "Т": "T", "У": "Y", "Х": "X",
    "а": "a", "в": "b", "е": "e", "к": "k",
    "м": "m", "н": "n", "о": "o", "р": "p",
    "с": "c", "т": "t", "у": "y", "х": "x",
}
HOMOGLYPH_TABLE = str.maketrans(HOMOGLYPHS)
