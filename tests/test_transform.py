from placement_normalizer.catalog import ComponentCatalog
from placement_normalizer.models import ComponentEntry
from placement_normalizer.resolver import DecliningResolver, ScriptedResolver
from placement_normalizer.transform import fix_rotation, normalize_every_fifth, transform_record


def test_rotation_fix_for_capacitors_and_resistors():
    assert fix_rotation(["C1", "10", "20", "180"])[3] == "0"
    assert fix_rotation(["C1", "10", "20", "270"])[3] == "90"
    assert fix_rotation(["r5", "10", "20", " 180 "])[3] == "0"
    assert fix_rotation(["R5", "10", "20", "90"])[3] == "90"


def test_rotation_untouched_for_other_classes():
    assert fix_rotation(["U1", "10", "20", "180"])[3] == "180"
    assert fix_rotation(["", "10", "20", "180"])[3] == "180"
    assert fix_rotation(["C1", "10", "180"]) == ["C1", "10", "180"]


def test_every_fifth_field_normalized():
    cells = ["a(1)", "b", "c", "d", "X(Y)", "f", "g", "h", "i", "1,5"]
    out = normalize_every_fifth(cells)
    assert out[0] == "a(1)"
    assert out[4] == "X"
    assert out[9] == "1.5"


def test_rotation_record(catalog):
    result = transform_record(["C1", "10", "20", "180"], catalog, DecliningResolver())
    assert result.drop is False
    assert result.record == ["C1", "10", "20", "0"]


def test_designator_replaced_with_standard_name(catalog):
    result = transform_record(["C1", "1", "2", "270", "0402-X5R-16V-10%"], catalog, DecliningResolver())
    assert result.drop is False
    assert result.record == ["C1", "1", "2", "90", "CAP-0402-16V"]


def test_designator_lookup_case_insensitive(catalog):
    result = transform_record(["R2", "1", "2", "0", "smd0603"], catalog, DecliningResolver())
    assert result.record[4] == "RES-0603"


def test_delete_flag_drops_row(catalog):
    resolver = ScriptedResolver()
    result = transform_record(["U1", "1", "2", "0", "FIDUCIAL", "extra"], catalog, resolver)
    assert result.drop is True
    assert resolver.calls == []


def test_empty_standard_name_keeps_field(catalog):
    result = transform_record(["U2", "1", "2", "0", "IC(ALT)"], catalog, DecliningResolver())
    assert result.record[4] == "IC"


def test_declined_designator_unchanged(catalog):
    resolver = DecliningResolver()
    before = len(catalog)
    result = transform_record(["U3", "1", "2", "0", "MYSTERY"], catalog, resolver)
    assert result.drop is False
    assert result.record[4] == "MYSTERY"
    assert resolver.unresolved == ["MYSTERY"]
    assert len(catalog) == before


def test_approved_designator_is_added(catalog, catalog_dir):
    resolver = ScriptedResolver({"newpart": ComponentEntry(key="", standard_name="NP-STD")})
    result = transform_record(["U4", "1", "2", "0", " NewPart "], catalog, resolver)
    assert result.record[4] == "NP-STD"
    assert resolver.calls == ["NewPart"]
    assert catalog.lookup("NEWPART").standard_name == "NP-STD"
    assert "NewPart;NP-STD;0" in (catalog_dir / "Capacitors.csv").read_text(encoding="utf-8")


def test_approved_for_deletion_drops_row(catalog, catalog_dir):
    target = catalog_dir / "Misc.csv"
    resolver = ScriptedResolver({"junk": ComponentEntry(key="", standard_name="JUNK", delete=True, target_file=target)})
    result = transform_record(["X1", "1", "2", "0", "JUNK"], catalog, resolver)
    assert result.drop is True
    assert catalog.lookup("junk").delete is True
    assert target.read_text(encoding="utf-8").endswith("JUNK;JUNK;1\n")


def test_catalog_write_failure_is_treated_as_decline(tmp_path):
    catalog = ComponentCatalog(tmp_path)
    bad_target = tmp_path / "locked.csv"
    bad_target.mkdir()
    resolver = ScriptedResolver({"part": ComponentEntry(key="", standard_name="STD", target_file=bad_target)})
    result = transform_record(["U5", "1", "2", "0", "PART"], catalog, resolver)
    assert result.drop is False
    assert result.record[4] == "PART"
    assert catalog.lookup("part") is None


def test_all_fields_normalized_on_output(catalog):
    record = ["U6", "1,5", "x (note)", "0", "IC", "?tail"]
    result = transform_record(record, catalog, DecliningResolver())
    assert result.record == ["U6", "1.5", "x", "0", "IC", "tail"]


def test_short_record_skips_resolution(catalog):
    resolver = ScriptedResolver()
    result = transform_record(["only", "two"], catalog, resolver)
    assert result.record == ["only", "two"]
    assert resolver.calls == []
