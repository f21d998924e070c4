"""
Trend Lines
===========
Least-squares line (load vs. strength) for each material series of the plot.

This is a rendering concern: the plot projection only delivers points, the
chart asks this module for the lines to draw on top of them.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

import numpy as np

from samplecollector.model.materials import Material
from samplecollector.model.plot import PlotData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrendLine:
    material: Material
    slope: float  # kN / MPa
    intercept: float  # kN
    x_min: float
    x_max: float

    def value_at(self, x: float) -> float:
        return self.slope * x + self.intercept

    def endpoints(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """Line segment spanning the strength range of its series."""
        return (
            (self.x_min, self.value_at(self.x_min)),
            (self.x_max, self.value_at(self.x_max)),
        )


def fit_trend_lines(plot_data: PlotData) -> tuple[TrendLine, ...]:
    """
    Fit one line per material present in the plot data.

    A series with fewer than two points, or whose points all share the same
    strength, has no defined regression line and is skipped. Steel points sit
    at one placeholder strength, so steel never gets a line.
    """
    lines: list[TrendLine] = []
    for material in plot_data.materials():
        series = plot_data.series(material)
        x = np.array([p.effective_strength for p in series], dtype=float)
        y = np.array([p.max_load_kn for p in series], dtype=float)

        if len(x) < 2 or np.ptp(x) == 0.0:
            logger.debug(f"No trend line for '{material}' ({len(x)} point(s)).")
            continue

        slope, intercept = np.polyfit(x, y, deg=1)
        lines.append(
            TrendLine(
                material=material,
                slope=float(slope),
                intercept=float(intercept),
                x_min=float(x.min()),
                x_max=float(x.max()),
            )
        )
    return tuple(lines)
