from __future__ import annotations

from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field


class ComponentEntry(BaseModel):
    key: str
    standard_name: str = ""
    delete: bool = False
    # Catalog file a freshly approved entry is appended to
    target_file: Optional[Path] = None


class TransformResult(BaseModel):
    record: List[str]
    drop: bool = False


class ConversionResult(BaseModel):
    input_path: Path
    output_path: Path
    lines_in: int = 0
    lines_out: int = 0
    encoding: str = "utf-8"

    @property
    def dropped(self) -> int:
        return self.lines_in - self.lines_out


class FileFailure(BaseModel):
    input_path: Path
    reason: str


class BatchResult(BaseModel):
    total: int = 0
    results: List[ConversionResult] = Field(default_factory=list)
    failures: List[FileFailure] = Field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.results)

    @property
    def ok(self) -> bool:
        return self.succeeded == self.total


class ConvertedFile(BaseModel):
    sha256: str
    encoding: str = Field(default="utf-8")
    content_b64: str


class ConversionSummary(BaseModel):
    lines_in: int = 0
    lines_out: int = 0
    dropped: int = 0
    source_encoding: Optional[str] = Field(default=None, examples=["utf-8"])


class ConvertResponse(BaseModel):
    converted: ConvertedFile
    summary: ConversionSummary
    unresolved: List[str] = Field(default_factory=list)


class HealthResponse(BaseModel):
    ok: bool = True
