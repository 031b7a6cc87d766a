# =============================================================================
# Placement Normalizer Configuration
# =============================================================================
# Working directories of the tool, loaded from PLACEMENT_* environment
# variables or a .env file. Paths are relative to base_dir.
# =============================================================================

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Directory layout of a placement-normalizer workspace."""

    model_config = SettingsConfigDict(env_prefix="PLACEMENT_", env_file=".env", extra="ignore")

    base_dir: Path = Path(".")

    settings_dir: str = "Settings"
    input_dir: str = "For Conversion"
    output_dir: str = "Converted"
    components_dir: str = "Components"
    documents_dir: str = "Documents"

    # One catalog file is seeded per line of this list
    packages_file: str = "Packages.csv"

    # Empty means every regular file in the input folder
    input_extensions: List[str] = []

    @property
    def settings_path(self) -> Path:
        return self.base_dir / self.settings_dir

    @property
    def input_path(self) -> Path:
        return self.base_dir / self.input_dir

    @property
    def output_path(self) -> Path:
        return self.base_dir / self.output_dir

    @property
    def components_path(self) -> Path:
        return self.base_dir / self.components_dir

    @property
    def documents_path(self) -> Path:
        return self.base_dir / self.documents_dir

    @property
    def packages_path(self) -> Path:
        return self.settings_path / self.packages_file

    def working_dirs(self) -> List[Path]:
        return [
            self.settings_path,
            self.input_path,
            self.output_path,
            self.components_path,
            self.documents_path,
        ]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
