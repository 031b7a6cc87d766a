from __future__ import annotations

import logging
from typing import Tuple

from charset_normalizer import from_bytes

from .rules import UTF8_BOM

logger = logging.getLogger(__name__)


def decode_input(raw: bytes) -> Tuple[str, str]:
    """
    Decode an export or catalog file to text.

    Rules:
    - A UTF-8 BOM is dropped, only at the very start.
    - UTF-8 is expected; anything else is detected via charset-normalizer.
    - If detection fails, decode UTF-8 with replacement characters.
    """
    if raw.startswith(UTF8_BOM):
        raw = raw[len(UTF8_BOM):]

    try:
        return raw.decode("utf-8"), "utf-8"
    except UnicodeDecodeError:
        pass

    match = from_bytes(raw).best()
    if match is not None:
        logger.warning("Input is not UTF-8, decoding as %s", match.encoding)
        return str(match), match.encoding

    logger.warning("Input encoding could not be detected, decoding as UTF-8 with replacement")
    return raw.decode("utf-8", errors="replace"), "utf-8"
