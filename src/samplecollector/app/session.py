"""
Session
=======
Owns everything that lives for exactly one user session.

Why is this file needed?
------------------------
1. Ownership: One Session holds one SessionStore and one session id. The main
   window creates it and passes it to its panels; nothing is module-global,
   so two windows never see each other's records.
2. Pipeline: `submit` runs validation and the append as one step and turns
   the result into an outcome the form can display.

Classes:
    SubmissionOutcome: Result of one submission attempt.
    Session: The per-session container.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import random
from typing import Any, Mapping, Optional

from PySide6.QtCore import QObject

from samplecollector import config
from samplecollector.app.state import SessionStore
from samplecollector.model.plot import PlotData, project_plot
from samplecollector.model.record import Record
from samplecollector.model.table import DisplayRow, project_table
from samplecollector.model.validation import InvalidInput, validate_submission

logger = logging.getLogger(__name__)


def new_session_id(rng: random.Random) -> str:
    low, high = config.SESSION_ID_RANGE
    return f"User-{rng.randint(low, high)}"


@dataclass(frozen=True)
class SubmissionOutcome:
    ok: bool
    message: str
    record: Optional[Record] = None
    field: Optional[str] = None


class Session:
    """A single user session: one store, one identity label."""

    def __init__(self, rng: random.Random | None = None, parent: QObject | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._session_id = new_session_id(self._rng)
        self.store = SessionStore(parent)
        logger.info(f"Session {self._session_id} started.")

    @property
    def session_id(self) -> str:
        return self._session_id

    def submit(self, payload: Mapping[str, Any]) -> SubmissionOutcome:
        """
        Validate a form payload and append it to the store.

        A rejected payload never reaches the store, so no view is refreshed.
        """
        try:
            draft = validate_submission(payload)
        except InvalidInput as exc:
            logger.warning(f"Submission rejected: {exc}")
            return SubmissionOutcome(
                ok=False,
                message=f"Submission rejected: invalid value for '{exc.field}'.",
                field=exc.field,
            )

        record = self.store.append(draft)
        logger.info(f"Record {record.id} collected for project '{record.project_name}'.")
        return SubmissionOutcome(
            ok=True,
            message=f"Data for project '{record.project_name}' collected successfully.",
            record=record,
        )

    def status_text(self) -> str:
        return f"Session ID: {self._session_id} | Entry count: {self.store.count()}"

    def new_project_placeholder(self) -> str:
        """Fresh auto-generated project name for the entry form."""
        low, high = config.PROJECT_PLACEHOLDER_RANGE
        return f"P-{self._rng.randint(low, high)}"

    def table(self) -> tuple[DisplayRow, ...]:
        return project_table(self.store.snapshot())

    def plot(self) -> Optional[PlotData]:
        return project_plot(self.store.snapshot())
