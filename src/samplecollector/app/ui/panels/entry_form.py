from __future__ import annotations

from typing import Any

from PySide6.QtCore import Signal, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QGroupBox, QLineEdit, QComboBox,
    QDoubleSpinBox, QPushButton, QLabel, QSizePolicy
)

from samplecollector import config
from samplecollector.app.session import Session, SubmissionOutcome
from samplecollector.app.ui.panels.base import BasePanel
from samplecollector.model.materials import MATERIAL_LABELS, Material
from samplecollector.model.validation import PAYLOAD_FIELDS


class EntryFormPanel(BasePanel):
    """
    Sidebar panel with the sample entry form.

    Top: project, material, strength, load and coordinate inputs.
    Below: the submit button and the session status line.
    Every submission goes through `Session.submit`; the outcome is re-emitted
    for the main window to notify the user.
    """
    submitted = Signal(object)  # SubmissionOutcome

    def __init__(self, session: Session, parent: QWidget | None = None) -> None:
        super().__init__(session, parent)

        root = QVBoxLayout(self)

        title = QLabel(f"<h3>{self.tr('Project Data Entry')}</h3>", self)
        root.addWidget(title)

        group = QGroupBox("", self)
        form = QFormLayout(group)

        self.project_name = QLineEdit(self.session.new_project_placeholder(), group)
        self.project_name.setPlaceholderText(self.tr(config.PROJECT_NAME_HINT))
        self.project_name.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)

        self.material = QComboBox(group)
        for label in MATERIAL_LABELS:
            self.material.addItem(self.tr(label), userData=label)
        self.material.setCurrentIndex(MATERIAL_LABELS.index(Material.REINFORCED_CONCRETE.value))

        self.strength = self._make_spin_box(
            config.STRENGTH_INPUT_RANGE, config.DEFAULT_STRENGTH_MPA, config.STRENGTH_STEP, " MPa", decimals=2
        )
        self.max_load = self._make_spin_box(
            config.LOAD_INPUT_RANGE, config.DEFAULT_MAX_LOAD_KN, config.LOAD_STEP, " kN", decimals=2
        )
        self.latitude = self._make_spin_box(
            config.COORDINATE_INPUT_RANGE, config.DEFAULT_LATITUDE, config.COORDINATE_STEP, "", decimals=4
        )
        self.longitude = self._make_spin_box(
            config.COORDINATE_INPUT_RANGE, config.DEFAULT_LONGITUDE, config.COORDINATE_STEP, "", decimals=4
        )

        form.addRow(self.tr("Project or Sample Name:"), self.project_name)
        form.addRow(self.tr("Main Material Type:"), self.material)
        form.addRow(self.tr("Characteristic Concrete Strength:"), self.strength)
        form.addRow(self.tr("Maximum Applied Load:"), self.max_load)

        coords = QHBoxLayout()
        coords.addWidget(self.latitude)
        coords.addWidget(self.longitude)
        form.addRow(self.tr("Latitude / Longitude:"), coords)

        root.addWidget(group)

        self.submit_button = QPushButton(self.tr("Collect Data"), self)
        self.submit_button.setFixedHeight(40)
        self.submit_button.clicked.connect(self._on_submit)
        root.addWidget(self.submit_button)

        self.status_label = QLabel(self.session.status_text(), self)
        self.status_label.setStyleSheet("background-color: #f4f6f7; padding: 6px; border-radius: 4px;")
        root.addWidget(self.status_label)

        root.addStretch()

        self.session.store.records_changed.connect(self._refresh_status)

    def _make_spin_box(
        self, value_range: tuple[float, float], value: float, step: float, suffix: str, decimals: int
    ) -> QDoubleSpinBox:
        spin = QDoubleSpinBox(self)
        spin.setRange(*value_range)
        spin.setDecimals(decimals)
        spin.setSingleStep(step)
        spin.setSuffix(suffix)
        spin.setValue(value)
        spin.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        return spin

    def payload(self) -> dict[str, Any]:
        """Current widget values under the submission payload keys."""
        values = (
            self.project_name.text(),
            self.material.currentData(),
            self.strength.value(),
            self.max_load.value(),
            self.latitude.value(),
            self.longitude.value(),
        )
        return dict(zip(PAYLOAD_FIELDS, values))

    @Slot()
    def _on_submit(self) -> None:
        outcome: SubmissionOutcome = self.session.submit(self.payload())
        if outcome.ok:
            self.project_name.setText(self.session.new_project_placeholder())
        self.submitted.emit(outcome)

    @Slot()
    def _refresh_status(self) -> None:
        self.status_label.setText(self.session.status_text())
