"""
Component catalog: operator-maintained mapping of non-standard designators to
standard names, stored as a directory of semicolon-delimited files.

Every file starts with a header row that is ignored on load. Files are merged
in name order and the last definition of a designator wins.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .encoding import decode_input
from .errors import CatalogWriteError
from .models import ComponentEntry
from .rules import CATALOG_EXTENSION, CATALOG_HEADER, DELETE_FLAG, DELIMITER, KEEP_FLAG

logger = logging.getLogger(__name__)


def strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def split_fields(line: str) -> List[str]:
    """Naive split on the delimiter; quotes are not interpreted on read."""
    return line.split(DELIMITER)


def quote_field(cell: str) -> str:
    if any(ch in cell for ch in (DELIMITER, '"', "\n", "\r")):
        return '"' + cell.replace('"', '""') + '"'
    return cell


def format_row(cells: Iterable[str]) -> str:
    return DELIMITER.join(quote_field(c) for c in cells)


def list_catalog_files(directory: Path) -> List[Path]:
    directory = Path(directory)
    if not directory.is_dir():
        return []
    return sorted(
        (p for p in directory.iterdir() if p.is_file() and p.suffix == CATALOG_EXTENSION),
        key=lambda p: p.name,
    )


def parse_catalog_row(line: str) -> Optional[ComponentEntry]:
    cells = split_fields(line)
    if len(cells) < 3:
        return None
    non_standard = cells[0].strip(" \t")
    if not non_standard:
        return None
    return ComponentEntry(
        key=non_standard.lower(),
        standard_name=cells[1].strip(" \t"),
        delete=cells[2].strip(" \t") == DELETE_FLAG,
    )


class ComponentCatalog:
    """In-memory view of the catalog directory, updated live on append."""

    def __init__(self, directory: Path, entries: Optional[Dict[str, ComponentEntry]] = None):
        self.directory = Path(directory)
        self._entries: Dict[str, ComponentEntry] = dict(entries or {})

    @classmethod
    def load(cls, directory: Path) -> "ComponentCatalog":
        catalog = cls(directory)
        files = list_catalog_files(catalog.directory)
        if not files:
            logger.info("No catalog files in %s, starting with an empty catalog", catalog.directory)
            return catalog

        for path in files:
            try:
                with open(path, "rb") as f:
                    raw = f.read()
            except OSError as exc:
                logger.warning("Skipping unreadable catalog file %s: %s", path, exc)
                continue

            text, _ = decode_input(raw)
            # first line is the header
            for line in text.split("\n")[1:]:
                entry = parse_catalog_row(strip_eol(line))
                if entry is not None:
                    catalog._entries[entry.key] = entry

        logger.debug("Loaded %d catalog entries from %d files", len(catalog), len(files))
        return catalog

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, designator: str) -> bool:
        return designator.lower() in self._entries

    def files(self) -> List[Path]:
        return list_catalog_files(self.directory)

    def lookup(self, designator: str) -> Optional[ComponentEntry]:
        return self._entries.get(designator.lower())

    def append(self, target_file: Path, non_standard: str, standard: str, delete: bool) -> ComponentEntry:
        """
        Persist a new catalog row and make it visible immediately.

        A missing or empty target file gets the header first so the new row is
        not mistaken for it on the next load.
        """
        target_file = Path(target_file)
        row = format_row([non_standard, standard, DELETE_FLAG if delete else KEEP_FLAG])

        try:
            target_file.parent.mkdir(parents=True, exist_ok=True)
            prefix = ""
            if not target_file.exists() or target_file.stat().st_size == 0:
                prefix = CATALOG_HEADER + "\n"
            else:
                with open(target_file, "rb") as f:
                    f.seek(-1, 2)
                    if f.read(1) not in (b"\n", b"\r"):
                        prefix = "\n"
            with open(target_file, "a", encoding="utf-8", newline="") as f:
                f.write(prefix + row + "\n")
        except OSError as exc:
            raise CatalogWriteError(f"Cannot append to catalog file {target_file}: {exc}", target_file) from exc

        entry = ComponentEntry(key=non_standard.lower(), standard_name=standard, delete=delete)
        self._entries[entry.key] = entry
        logger.info("Added %r -> %r (delete=%s) to %s", non_standard, standard, delete, target_file.name)
        return entry
