import pytest

from samplecollector.model.materials import Material
from samplecollector.model.record import Record
from samplecollector.model.table import TABLE_COLUMNS, project_table


def _record(record_id: int, material: Material = Material.REINFORCED_CONCRETE) -> Record:
    return Record(
        id=record_id,
        project_name=f"P-{1000 + record_id}",
        material=material,
        concrete_strength_mpa=20.0 + record_id,
        max_load_kn=100.0 * record_id,
        latitude=48.85,
        longitude=2.35,
    )


def test_columns_in_display_order():
    assert TABLE_COLUMNS == (
        "ID", "Project Name", "Material", "Strength (MPa)", "Load (kN)", "Latitude", "Longitude"
    )


def test_empty_snapshot_gives_zero_rows():
    assert project_table(()) == ()


def test_every_field_appears_under_its_label():
    record = _record(1, Material.GLULAM)
    (row,) = project_table((record,))
    assert row.as_dict() == {
        "ID": 1,
        "Project Name": "P-1001",
        "Material": "Glued Laminated Timber",
        "Strength (MPa)": 21.0,
        "Load (kN)": 100.0,
        "Latitude": 48.85,
        "Longitude": 2.35,
    }
    assert row["Load (kN)"] == record.max_load_kn
    assert list(row.as_dict()) == list(TABLE_COLUMNS)


def test_unknown_label_raises_key_error():
    (row,) = project_table((_record(1),))
    with pytest.raises(KeyError):
        row["Unknown"]


def test_rows_keep_insertion_order_and_are_not_filtered():
    snapshot = tuple(_record(i, material) for i, material in enumerate(Material, start=1))
    rows = project_table(snapshot)
    assert [row["ID"] for row in rows] == [1, 2, 3, 4, 5]
    assert [row["Material"] for row in rows] == [m.value for m in Material]


def test_projection_is_idempotent():
    snapshot = (_record(1), _record(2, Material.OTHER))
    assert project_table(snapshot) == project_table(snapshot)
