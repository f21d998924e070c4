"""Scatter chart of maximum load against material strength."""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import pyqtgraph as pg
from pyqtgraph.exporters import ImageExporter
from PySide6.QtCore import Slot
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFileDialog, QMessageBox

from samplecollector import config
from samplecollector.app.session import Session
from samplecollector.model.plot import PlotData
from samplecollector.model.trend import fit_trend_lines

logger = logging.getLogger(__name__)


class StrengthLoadPlotView(QWidget):
    """
    Chart of the plot projection: one scatter series per material plus a
    least-squares trend line per series where one is defined.

    When the projection is in its empty state a placeholder message is shown
    instead of the chart.
    """
    def __init__(self, session: Session, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.session = session

        root = QVBoxLayout(self)
        root.addWidget(QLabel(f"<h3>{self.tr('Visualization: Load vs. Strength')}</h3>", self))

        self.plot_widget = pg.PlotWidget(background="w")
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.getAxis("left").setPen("k")
        self.plot_widget.getAxis("bottom").setPen("k")
        self.plot_widget.getAxis("left").setTextPen("k")
        self.plot_widget.getAxis("bottom").setTextPen("k")
        self.plot_widget.setTitle(self.tr("Material Strength vs. Maximum Load"), color="k", size="13pt")
        self.plot_widget.setLabel("bottom", self.tr("Material Strength (MPa or equivalent)"))
        self.plot_widget.setLabel("left", self.tr("Maximum Load (kN)"))
        root.addWidget(self.plot_widget, 1)

        buttons = QHBoxLayout()
        buttons.addStretch()
        self.export_button = QPushButton(self.tr("Export as Image..."), self)
        self.export_button.clicked.connect(self._export_image)
        buttons.addWidget(self.export_button)
        root.addLayout(buttons)

        self.session.store.records_changed.connect(self.refresh)
        self.refresh()

    @Slot()
    def refresh(self) -> None:
        """Pull the plot projection of the current snapshot and redraw."""
        self._draw(self.session.plot())

    def _draw(self, plot_data: Optional[PlotData]) -> None:
        self.plot_widget.clear()

        if plot_data is None:
            text_item = pg.TextItem(
                self.tr("Please enter data to display the chart."), color="gray", anchor=(0.5, 0.5)
            )
            text_item.setPos(0.5, 0.5)
            self.plot_widget.addItem(text_item)
            self.plot_widget.setXRange(0, 1)
            self.plot_widget.setYRange(0, 1)
            self.export_button.setEnabled(False)
            return

        # Re-add legend after clearing
        legend = self.plot_widget.plotItem.legend
        if legend is None:
            legend = self.plot_widget.addLegend(offset=(10, 10))
        legend.clear()

        for material in plot_data.materials():
            series = plot_data.series(material)
            color = config.SERIES_COLORS.get(material.value, config.FALLBACK_SERIES_COLOR)
            x = np.array([p.effective_strength for p in series])
            y = np.array([p.max_load_kn for p in series])
            self.plot_widget.plot(
                x, y,
                pen=None,
                name=self.tr(material.value),
                symbol="o",
                symbolSize=config.POINT_SIZE,
                symbolBrush=pg.mkBrush(color + "b3"),  # ~70 % opacity
                symbolPen=None,
            )

        for line in fit_trend_lines(plot_data):
            color = config.SERIES_COLORS.get(line.material.value, config.FALLBACK_SERIES_COLOR)
            (x0, y0), (x1, y1) = line.endpoints()
            self.plot_widget.plot([x0, x1], [y0, y1], pen=pg.mkPen(color=color, width=2))

        self.plot_widget.autoRange()
        self.export_button.setEnabled(True)

    def _export_image(self) -> None:
        """Export the current chart as an image file."""
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            self.tr("Save chart as image"),
            "strength_load_plot.png",
            self.tr("PNG image (*.png);;JPEG image (*.jpg)")
        )

        if not file_path:
            return

        try:
            exporter = ImageExporter(self.plot_widget.plotItem)
            exporter.parameters()["width"] = 1920
            exporter.export(file_path)
            logger.info(f"Plot exported to {file_path}")

        except Exception as e:
            logger.exception("Failed to export plot")
            QMessageBox.critical(self, self.tr("Export error"), self.tr("Could not export the chart:\n{error}").format(error=e))
