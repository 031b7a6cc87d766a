import base64
import hashlib

from fastapi import Depends, FastAPI, File, HTTPException, UploadFile

from .catalog import ComponentCatalog
from .config import Settings, get_settings
from .convert import iter_rows, split_lines
from .encoding import decode_input
from .models import ConvertResponse, HealthResponse
from .resolver import DecliningResolver
from .rules import OUTPUT_ENCODING

ACCEPTED_SUFFIXES = (".csv", ".txt")

app = FastAPI(
    title="placement-normalizer",
    description="Component placement export normalization against the component catalog",
    version="0.1.0",
)


def convert_bytes(raw: bytes, settings: Settings) -> dict:
    """Convert an uploaded export without prompting; unknown designators are reported."""
    text, source_encoding = decode_input(raw)
    catalog = ComponentCatalog.load(settings.components_path)
    resolver = DecliningResolver()

    rows = []
    lines_in = 0
    for row in iter_rows(split_lines(text), catalog, resolver):
        lines_in += 1
        if row is not None:
            rows.append(row + "\n")

    converted = "".join(rows).encode(OUTPUT_ENCODING)
    return {
        "converted": {
            "sha256": hashlib.sha256(converted).hexdigest(),
            "encoding": OUTPUT_ENCODING,
            "content_b64": base64.b64encode(converted).decode("ascii"),
        },
        "summary": {
            "lines_in": lines_in,
            "lines_out": len(rows),
            "dropped": lines_in - len(rows),
            "source_encoding": source_encoding,
        },
        "unresolved": resolver.unresolved,
    }


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/convert", response_model=ConvertResponse)
async def convert_upload(file: UploadFile = File(...), settings: Settings = Depends(get_settings)):
    if not file.filename or not file.filename.lower().endswith(ACCEPTED_SUFFIXES):
        raise HTTPException(status_code=422, detail="Only .csv and .txt placement files are supported")

    raw = await file.read()
    return convert_bytes(raw, settings)
