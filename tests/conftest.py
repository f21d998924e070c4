import os
import random
from typing import Any, Callable

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from samplecollector.app.session import Session  # noqa: E402


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    """
    A Qt application for the whole test run.
    The offscreen platform lets the window tests build widgets without a display.
    """
    return QApplication.instance() or QApplication([])


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def session(qapp, rng: random.Random) -> Session:
    return Session(rng=rng)


@pytest.fixture
def make_payload() -> Callable[..., dict[str, Any]]:
    """Factory for a valid submission payload; keyword arguments override fields."""
    def _make(**overrides: Any) -> dict[str, Any]:
        payload = {
            "projectName": "Pont-Nord-01",
            "material": "Reinforced Concrete",
            "concreteStrengthMPa": 35,
            "maxLoadKN": 600,
            "latitude": 48.85,
            "longitude": 2.35,
        }
        payload.update(overrides)
        return payload
    return _make
