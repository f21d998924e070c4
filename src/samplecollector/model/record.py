from __future__ import annotations

from dataclasses import dataclass

from samplecollector.model.materials import Material


@dataclass(frozen=True)
class RecordDraft:
    """A validated sample that has not been stored yet (no id)."""
    project_name: str
    material: Material
    concrete_strength_mpa: float  # MPa
    max_load_kn: float  # kN
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Record:
    """One stored sample. Only the SessionStore creates these."""
    id: int
    project_name: str
    material: Material
    concrete_strength_mpa: float  # MPa
    max_load_kn: float  # kN
    latitude: float
    longitude: float

    @classmethod
    def from_draft(cls, record_id: int, draft: RecordDraft) -> Record:
        return cls(
            id=record_id,
            project_name=draft.project_name,
            material=draft.material,
            concrete_strength_mpa=draft.concrete_strength_mpa,
            max_load_kn=draft.max_load_kn,
            latitude=draft.latitude,
            longitude=draft.longitude,
        )
