"""
Material Catalog
================
Defines the closed set of materials a sample can be made of.
"""
from __future__ import annotations

from enum import StrEnum


class Material(StrEnum):
    """Main material of a tested sample (the values are the display names)."""
    REINFORCED_CONCRETE = "Reinforced Concrete"
    STRUCTURAL_STEEL = "Structural Steel"
    GLULAM = "Glued Laminated Timber"
    MASONRY = "Masonry"
    OTHER = "Other"


# Materials that have a meaningful strength to compare against the load
PLOTTED_MATERIALS: frozenset[Material] = frozenset(
    {Material.REINFORCED_CONCRETE, Material.STRUCTURAL_STEEL}
)

MATERIAL_LABELS: list[str] = [m.value for m in Material]
