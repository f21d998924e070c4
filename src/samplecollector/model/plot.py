"""
Plot Projection
===============
Derives the strength vs. load point set drawn by the chart.

Only reinforced concrete and structural steel samples have a strength worth
comparing with the applied load; all other materials are left out. Steel
strength is not measured by the entry form, so steel points are placed at a
fixed strength to keep the two series apart on the shared axis.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from samplecollector import config
from samplecollector.model.materials import Material, PLOTTED_MATERIALS
from samplecollector.model.record import Record


@dataclass(frozen=True)
class PlotPoint:
    effective_strength: float  # MPa (or equivalent)
    max_load_kn: float  # kN
    material: Material


@dataclass(frozen=True)
class PlotData:
    """Non-empty point set ready for the chart."""
    points: tuple[PlotPoint, ...]

    def materials(self) -> list[Material]:
        """Distinct materials in order of first appearance."""
        seen: list[Material] = []
        for point in self.points:
            if point.material not in seen:
                seen.append(point.material)
        return seen

    def series(self, material: Material) -> tuple[PlotPoint, ...]:
        return tuple(p for p in self.points if p.material == material)


def effective_strength(record: Record) -> float:
    """Strength used as the x-coordinate of a plotted record."""
    match record.material:
        case Material.REINFORCED_CONCRETE:
            return record.concrete_strength_mpa
        case Material.STRUCTURAL_STEEL:
            return config.STEEL_PLACEHOLDER_STRENGTH_MPA
        case _:
            raise ValueError(f"Material '{record.material}' is not plotted.")


def project_plot(snapshot: Sequence[Record]) -> Optional[PlotData]:
    """
    Map a store snapshot to plot points.

    Returns:
        PlotData with one point per concrete/steel record (snapshot order), or
        None when no record survives the filter. None is the empty state, the
        renderer shows a placeholder message instead of a chart.
    """
    points = tuple(
        PlotPoint(
            effective_strength=effective_strength(record),
            max_load_kn=record.max_load_kn,
            material=record.material,
        )
        for record in snapshot
        if record.material in PLOTTED_MATERIALS
    )
    if not points:
        return None
    return PlotData(points=points)
