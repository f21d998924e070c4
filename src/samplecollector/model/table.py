"""Tabular projection of the stored records (one display row per record)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from samplecollector.model.record import Record

# Display labels, in column order
TABLE_COLUMNS: tuple[str, ...] = (
    "ID",
    "Project Name",
    "Material",
    "Strength (MPa)",
    "Load (kN)",
    "Latitude",
    "Longitude",
)


@dataclass(frozen=True)
class DisplayRow:
    """A record with its fields laid out under the display labels."""
    values: tuple[Any, ...]

    def __getitem__(self, label: str) -> Any:
        try:
            index = TABLE_COLUMNS.index(label)
        except ValueError:
            raise KeyError(label) from None
        return self.values[index]

    def as_dict(self) -> dict[str, Any]:
        return dict(zip(TABLE_COLUMNS, self.values))


def _to_row(record: Record) -> DisplayRow:
    return DisplayRow(
        values=(
            record.id,
            record.project_name,
            record.material.value,
            record.concrete_strength_mpa,
            record.max_load_kn,
            record.latitude,
            record.longitude,
        )
    )


def project_table(snapshot: Sequence[Record]) -> tuple[DisplayRow, ...]:
    """
    Map a store snapshot to display rows.

    No filtering and no reordering: rows follow insertion (ascending id) order.
    An empty snapshot gives an empty tuple.
    """
    return tuple(_to_row(record) for record in snapshot)
