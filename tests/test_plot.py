import pytest

from samplecollector.model.materials import Material, PLOTTED_MATERIALS
from samplecollector.model.plot import PlotData, PlotPoint, effective_strength, project_plot
from samplecollector.model.record import Record


def _record(record_id: int, material: Material, strength: float = 35.0, load: float = 600.0) -> Record:
    return Record(
        id=record_id,
        project_name=f"P-{record_id}",
        material=material,
        concrete_strength_mpa=strength,
        max_load_kn=load,
        latitude=0.0,
        longitude=0.0,
    )


def test_empty_store_is_empty_state():
    assert project_plot(()) is None


def test_only_unplotted_materials_is_empty_state():
    snapshot = (
        _record(1, Material.MASONRY),
        _record(2, Material.GLULAM),
        _record(3, Material.OTHER),
    )
    assert project_plot(snapshot) is None


def test_concrete_uses_measured_strength():
    plot = project_plot((_record(1, Material.REINFORCED_CONCRETE, strength=35, load=600),))
    assert plot == PlotData(
        points=(PlotPoint(effective_strength=35, max_load_kn=600, material=Material.REINFORCED_CONCRETE),)
    )


def test_steel_uses_placeholder_strength():
    plot = project_plot((_record(1, Material.STRUCTURAL_STEEL, strength=22, load=800),))
    assert plot is not None
    (point,) = plot.points
    assert point.effective_strength == 60
    assert point.max_load_kn == 800
    assert point.material is Material.STRUCTURAL_STEEL


def test_other_materials_never_plotted():
    snapshot = tuple(_record(i, m) for i, m in enumerate(list(Material) * 2, start=1))
    plot = project_plot(snapshot)
    assert plot is not None
    assert len(plot.points) == 4
    assert all(p.material in PLOTTED_MATERIALS for p in plot.points)


def test_points_follow_snapshot_order():
    snapshot = (
        _record(1, Material.STRUCTURAL_STEEL, load=900),
        _record(2, Material.MASONRY, load=1),
        _record(3, Material.REINFORCED_CONCRETE, strength=40, load=300),
        _record(4, Material.STRUCTURAL_STEEL, load=950),
    )
    plot = project_plot(snapshot)
    assert [p.max_load_kn for p in plot.points] == [900, 300, 950]
    assert plot.materials() == [Material.STRUCTURAL_STEEL, Material.REINFORCED_CONCRETE]
    assert [p.max_load_kn for p in plot.series(Material.STRUCTURAL_STEEL)] == [900, 950]


def test_projection_is_idempotent():
    snapshot = (_record(1, Material.REINFORCED_CONCRETE), _record(2, Material.STRUCTURAL_STEEL))
    assert project_plot(snapshot) == project_plot(snapshot)


def test_effective_strength_of_unplotted_material_raises():
    with pytest.raises(ValueError):
        effective_strength(_record(1, Material.OTHER))
