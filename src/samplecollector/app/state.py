from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from samplecollector.model.record import Record, RecordDraft

logger = logging.getLogger(__name__)


class SessionStore(QObject):
    """
    Append-only record store of one session, with a signal for view sync.

    Views never hold on to the records: they connect to `records_changed` and
    pull a fresh snapshot through the projections each time it fires.
    """
    records_changed = Signal(int)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._records: list[Record] = []
        self._version = 0

    def append(self, draft: RecordDraft) -> Record:
        """Store a validated draft under the next id and notify the views."""
        record = Record.from_draft(self.count() + 1, draft)
        self._records.append(record)
        self._version += 1
        logger.debug(f"Appended record {record.id} ('{record.project_name}').")
        self.records_changed.emit(self._version)
        return record

    def snapshot(self) -> tuple[Record, ...]:
        """All records in insertion order, unaffected by later appends."""
        return tuple(self._records)

    def count(self) -> int:
        return len(self._records)

    def version(self) -> int:
        return self._version
