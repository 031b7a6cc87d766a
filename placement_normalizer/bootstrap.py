from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List

from .config import Settings
from .rules import CATALOG_EXTENSION, CATALOG_HEADER

logger = logging.getLogger(__name__)

_UNSAFE_RE = re.compile(r"[^A-Za-z0-9._-]")


def sanitize_filename(name: str) -> str:
    if not name:
        return "UNKNOWN"
    return _UNSAFE_RE.sub("_", name)


def ensure_directories(settings: Settings) -> None:
    for directory in settings.working_dirs():
        if not directory.exists():
            logger.info("Creating %s", directory)
        directory.mkdir(parents=True, exist_ok=True)


def seed_catalog(settings: Settings) -> List[Path]:
    """Create one catalog file per line of the packages list; existing files are left alone."""
    packages = settings.packages_path
    if not packages.exists():
        packages.touch()

    created: List[Path] = []
    with open(packages, "r", encoding="utf-8-sig") as f:
        names = [line.rstrip("\r\n") for line in f]

    for name in names:
        if not name:
            continue
        target = settings.components_path / f"{sanitize_filename(name)}{CATALOG_EXTENSION}"
        if target.exists():
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8", newline="") as out:
            out.write(CATALOG_HEADER + "\n")
        created.append(target)
        logger.info("Seeded catalog file %s", target.name)
    return created


def initialise(settings: Settings) -> List[Path]:
    ensure_directories(settings)
    return seed_catalog(settings)
