from __future__ import annotations

import logging
from typing import List, Optional

from .catalog import ComponentCatalog
from .errors import CatalogWriteError
from .models import ComponentEntry, TransformResult
from .normalize import normalize_cell, normalize_record
from .resolver import Resolver
from .rules import DESIGNATOR_POSITION, ROTATED_CLASSES, ROTATION_FIXES, ROTATION_POSITION

logger = logging.getLogger(__name__)


def normalize_every_fifth(cells: List[str]) -> List[str]:
    return [
        normalize_cell(c) if (i + 1) % DESIGNATOR_POSITION == 0 else c
        for i, c in enumerate(cells)
    ]


def fix_rotation(cells: List[str]) -> List[str]:
    """180 -> 0 and 270 -> 90 for capacitors and resistors."""
    if len(cells) < ROTATION_POSITION or not cells[0]:
        return cells
    if cells[0][0].upper() not in ROTATED_CLASSES:
        return cells
    idx = ROTATION_POSITION - 1
    fixed = ROTATION_FIXES.get(cells[idx].strip(" \t"))
    if fixed is not None:
        cells = list(cells)
        cells[idx] = fixed
    return cells


def _apply_entry(cells: List[str], entry: ComponentEntry) -> bool:
    """Apply a catalog entry to the designator field; True means drop the row."""
    if entry.delete:
        return True
    if entry.standard_name:
        cells[DESIGNATOR_POSITION - 1] = entry.standard_name
    return False


def _resolve_unknown(designator: str, catalog: ComponentCatalog, resolver: Resolver) -> Optional[ComponentEntry]:
    proposed = resolver.resolve(designator, catalog.files())
    if proposed is None or proposed.target_file is None:
        return None
    try:
        return catalog.append(proposed.target_file, designator, proposed.standard_name, proposed.delete)
    except CatalogWriteError as exc:
        logger.error("%s", exc)
        return None


def transform_record(record: List[str], catalog: ComponentCatalog, resolver: Resolver) -> TransformResult:
    cells = normalize_every_fifth(record)
    cells = fix_rotation(cells)

    if len(cells) >= DESIGNATOR_POSITION:
        designator = cells[DESIGNATOR_POSITION - 1].strip(" \t")
        entry = catalog.lookup(designator)
        if entry is None:
            entry = _resolve_unknown(designator, catalog, resolver)
        if entry is not None and _apply_entry(cells, entry):
            logger.debug("Dropping row for %r (catalog delete flag)", designator)
            return TransformResult(record=cells, drop=True)

    return TransformResult(record=normalize_record(cells), drop=False)
