import pytest

from placement_normalizer.catalog import ComponentCatalog
from placement_normalizer.rules import CATALOG_HEADER


def write_catalog_file(directory, name, rows):
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(CATALOG_HEADER + "\n" + "".join(r + "\n" for r in rows), encoding="utf-8")
    return path


@pytest.fixture
def catalog_dir(tmp_path):
    d = tmp_path / "Components"
    write_catalog_file(d, "Capacitors.csv", [
        "0402-16V-10%;CAP-0402-16V;0",
        "SMD0603;RES-0603;0",
    ])
    write_catalog_file(d, "Misc.csv", [
        "FIDUCIAL;;1",
        "IC;;0",
    ])
    return d


@pytest.fixture
def catalog(catalog_dir):
    return ComponentCatalog.load(catalog_dir)


@pytest.fixture
def write_catalog():
    return write_catalog_file
