"""
Records Table
=============
Paginated table of the collected records.

Classes:
    RecordsTableModel: Qt item model over the display rows of one page.
    RecordsTableView: Table widget with page size selector and navigation.
"""
from __future__ import annotations

import math
from typing import Any, Sequence

from PySide6.QtCore import Qt, QAbstractTableModel, QModelIndex, QPersistentModelIndex, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QTableView, QComboBox, QPushButton, QLabel, QHeaderView
)

from samplecollector import config
from samplecollector.app.session import Session
from samplecollector.model.table import TABLE_COLUMNS, DisplayRow


class RecordsTableModel(QAbstractTableModel):
    """Read-only model showing one page of display rows."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._rows: tuple[DisplayRow, ...] = ()
        self._page_size = config.DEFAULT_PAGE_SIZE
        self._page = 0

    # ---------- paging ----------
    def page_size(self) -> int:
        return self._page_size

    def page(self) -> int:
        """Zero-based index of the visible page."""
        return self._page

    def page_count(self) -> int:
        """Number of pages; an empty table still has one (empty) page."""
        return max(1, math.ceil(len(self._rows) / self._page_size))

    def total_rows(self) -> int:
        return len(self._rows)

    def set_page_size(self, size: int) -> None:
        if size not in config.TABLE_PAGE_SIZES:
            raise ValueError(f"Unsupported page size: {size}")
        self.beginResetModel()
        self._page_size = size
        self._page = 0
        self.endResetModel()

    def set_page(self, page: int) -> None:
        page = min(max(page, 0), self.page_count() - 1)
        if page == self._page:
            return
        self.beginResetModel()
        self._page = page
        self.endResetModel()

    def set_rows(self, rows: Sequence[DisplayRow]) -> None:
        """Replace the content; keeps the current page when it still exists."""
        self.beginResetModel()
        self._rows = tuple(rows)
        self._page = min(self._page, self.page_count() - 1)
        self.endResetModel()

    def visible_rows(self) -> tuple[DisplayRow, ...]:
        start = self._page * self._page_size
        return self._rows[start:start + self._page_size]

    # ---------- Qt model API ----------
    def rowCount(self, parent: QModelIndex | QPersistentModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self.visible_rows())

    def columnCount(self, parent: QModelIndex | QPersistentModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(TABLE_COLUMNS)

    def data(self, index: QModelIndex | QPersistentModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid():
            return None
        value = self.visible_rows()[index.row()].values[index.column()]

        if role == Qt.ItemDataRole.DisplayRole:
            if isinstance(value, float):
                return f"{value:g}"
            return str(value)
        if role == Qt.ItemDataRole.UserRole:
            return value
        if role == Qt.ItemDataRole.TextAlignmentRole and isinstance(value, (int, float)):
            return int(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        return None

    def headerData(self, section: int, orientation: Qt.Orientation, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if role != Qt.ItemDataRole.DisplayRole:
            return None
        if orientation == Qt.Orientation.Horizontal:
            return TABLE_COLUMNS[section]
        return None


class RecordsTableView(QWidget):
    """Table of collected records, refreshed on every store change."""

    def __init__(self, session: Session, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.session = session

        root = QVBoxLayout(self)
        root.addWidget(QLabel(f"<h3>{self.tr('Entry History')}</h3>", self))

        # Page size selector
        top = QHBoxLayout()
        top.addWidget(QLabel(self.tr("Show"), self))
        self.page_size_combo = QComboBox(self)
        for size in config.TABLE_PAGE_SIZES:
            self.page_size_combo.addItem(str(size), userData=size)
        self.page_size_combo.setCurrentIndex(config.TABLE_PAGE_SIZES.index(config.DEFAULT_PAGE_SIZE))
        top.addWidget(self.page_size_combo)
        top.addWidget(QLabel(self.tr("entries"), self))
        top.addStretch()
        root.addLayout(top)

        self.model = RecordsTableModel(self)
        self.table = QTableView(self)
        self.table.setModel(self.model)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        self.table.setSelectionBehavior(QTableView.SelectionBehavior.SelectRows)
        self.table.setEditTriggers(QTableView.EditTrigger.NoEditTriggers)
        root.addWidget(self.table, 1)

        # Navigation
        nav = QHBoxLayout()
        self.info_label = QLabel("", self)
        nav.addWidget(self.info_label)
        nav.addStretch()
        self.prev_button = QPushButton(self.tr("Previous"), self)
        self.next_button = QPushButton(self.tr("Next"), self)
        nav.addWidget(self.prev_button)
        nav.addWidget(self.next_button)
        root.addLayout(nav)

        # wiring
        self.page_size_combo.currentIndexChanged.connect(self._on_page_size_changed)
        self.prev_button.clicked.connect(lambda: self._go_to(self.model.page() - 1))
        self.next_button.clicked.connect(lambda: self._go_to(self.model.page() + 1))
        self.session.store.records_changed.connect(self.refresh)

        self.refresh()

    @Slot()
    def refresh(self) -> None:
        """Pull the table projection of the current snapshot."""
        self.model.set_rows(self.session.table())
        self._update_navigation()

    def _go_to(self, page: int) -> None:
        self.model.set_page(page)
        self._update_navigation()

    @Slot()
    def _on_page_size_changed(self) -> None:
        self.model.set_page_size(self.page_size_combo.currentData())
        self._update_navigation()

    def _update_navigation(self) -> None:
        total = self.model.total_rows()
        if total == 0:
            self.info_label.setText(self.tr("No data available"))
        else:
            first = self.model.page() * self.model.page_size() + 1
            last = first + len(self.model.visible_rows()) - 1
            self.info_label.setText(
                self.tr("Showing {first} to {last} of {total} entries").format(first=first, last=last, total=total)
            )
        self.prev_button.setEnabled(self.model.page() > 0)
        self.next_button.setEnabled(self.model.page() < self.model.page_count() - 1)
