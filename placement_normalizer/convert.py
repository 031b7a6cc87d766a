"""
File-level conversion of placement exports.

Each input line is split on ';', transformed against a catalog that is loaded
fresh for every file, and written back with output quoting. Rows whose
designator is flagged for deletion are left out.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence

from .catalog import ComponentCatalog, format_row, split_fields, strip_eol
from .encoding import decode_input
from .errors import ConversionError
from .models import BatchResult, ConversionResult, FileFailure
from .resolver import Resolver
from .rules import OUTPUT_ENCODING
from .transform import transform_record

logger = logging.getLogger(__name__)


def split_lines(text: str) -> List[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [strip_eol(line) for line in lines]


def list_input_files(directory: Path, extensions: Sequence[str] = ()) -> List[Path]:
    directory = Path(directory)
    if not directory.is_dir():
        return []
    wanted = {e.lower() for e in extensions}
    return sorted(
        (p for p in directory.iterdir() if p.is_file() and (not wanted or p.suffix.lower() in wanted)),
        key=lambda p: p.name,
    )


def iter_rows(lines: Iterable[str], catalog: ComponentCatalog, resolver: Resolver) -> Iterator[Optional[str]]:
    """Yield one formatted output row per input line, or None for a dropped row."""
    for line in lines:
        result = transform_record(split_fields(line), catalog, resolver)
        yield None if result.drop else format_row(result.record)


def convert_file(input_path: Path, output_path: Path, catalog_dir: Path, resolver: Resolver) -> ConversionResult:
    input_path = Path(input_path)
    output_path = Path(output_path)

    try:
        with open(input_path, "rb") as f:
            raw = f.read()
    except OSError as exc:
        raise ConversionError(f"Cannot open {input_path}: {exc}", input_path) from exc

    text, encoding = decode_input(raw)
    try:
        catalog = ComponentCatalog.load(catalog_dir)
    except OSError as exc:
        raise ConversionError(f"Cannot read catalog {catalog_dir}: {exc}", catalog_dir) from exc

    result = ConversionResult(input_path=input_path, output_path=output_path, encoding=encoding)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding=OUTPUT_ENCODING, newline="") as out:
            for row in iter_rows(split_lines(text), catalog, resolver):
                result.lines_in += 1
                if row is None:
                    continue
                out.write(row + "\n")
                result.lines_out += 1
    except OSError as exc:
        raise ConversionError(f"Cannot create {output_path}: {exc}", output_path) from exc

    logger.info(
        "Converted %s -> %s (%d in, %d out, %d dropped)",
        input_path.name, output_path, result.lines_in, result.lines_out, result.dropped,
    )
    return result


def convert_batch(
    files: Sequence[Path], output_dir: Path, catalog_dir: Path, resolver: Resolver
) -> BatchResult:
    """Convert files one after another; a failed file does not stop the batch."""
    batch = BatchResult(total=len(files))
    for path in files:
        path = Path(path)
        target = Path(output_dir) / path.name
        try:
            batch.results.append(convert_file(path, target, catalog_dir, resolver))
        except ConversionError as exc:
            logger.error("%s", exc)
            batch.failures.append(FileFailure(input_path=path, reason=str(exc)))
    logger.info("Done: %d/%d converted", batch.succeeded, batch.total)
    return batch
