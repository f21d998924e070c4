import pytest

from samplecollector.app.state import SessionStore
from samplecollector.model.materials import Material
from samplecollector.model.record import Record, RecordDraft


def _draft(name: str = "P-1000", material: Material = Material.MASONRY) -> RecordDraft:
    return RecordDraft(
        project_name=name,
        material=material,
        concrete_strength_mpa=30.0,
        max_load_kn=500.0,
        latitude=48.85,
        longitude=2.35,
    )


@pytest.fixture
def store(qapp) -> SessionStore:
    return SessionStore()


def test_new_store_is_empty(store):
    assert store.count() == 0
    assert store.version() == 0
    assert store.snapshot() == ()


def test_ids_are_sequential_from_one(store):
    records = [store.append(_draft(f"P-{i}")) for i in range(1, 8)]
    assert [r.id for r in records] == list(range(1, 8))
    assert [r.id for r in store.snapshot()] == list(range(1, 8))
    assert store.count() == 7


def test_append_returns_populated_record(store):
    record = store.append(_draft("Viaduc-3", Material.STRUCTURAL_STEEL))
    assert record == Record(
        id=1,
        project_name="Viaduc-3",
        material=Material.STRUCTURAL_STEEL,
        concrete_strength_mpa=30.0,
        max_load_kn=500.0,
        latitude=48.85,
        longitude=2.35,
    )


def test_snapshot_is_not_affected_by_later_appends(store):
    store.append(_draft("A"))
    before = store.snapshot()
    store.append(_draft("B"))
    assert len(before) == 1
    assert [r.project_name for r in store.snapshot()] == ["A", "B"]


def test_snapshot_is_immutable(store):
    store.append(_draft())
    snapshot = store.snapshot()
    assert isinstance(snapshot, tuple)
    with pytest.raises(AttributeError):
        snapshot[0].project_name = "changed"  # type: ignore[misc]


def test_records_changed_emitted_once_per_append_with_version(store):
    versions: list[int] = []
    store.records_changed.connect(versions.append)

    store.append(_draft())
    store.append(_draft())

    assert versions == [1, 2]
    assert store.version() == 2


def test_views_see_new_snapshot_inside_the_notification(store):
    """A listener pulling the snapshot during the signal sees the appended record."""
    seen_counts: list[int] = []
    store.records_changed.connect(lambda _version: seen_counts.append(len(store.snapshot())))

    store.append(_draft())
    store.append(_draft())

    assert seen_counts == [1, 2]
