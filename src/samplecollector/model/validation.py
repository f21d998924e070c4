"""
Form Input Validation
=====================
Converts the raw values coming from the entry form into a typed RecordDraft.

Why is this file needed?
------------------------
1. Parsing: Widget values arrive untyped (numbers, numeric text). They are
   converted explicitly here instead of relying on implicit coercion.
2. Data fidelity: Out-of-range values are rejected, never clamped, so every
   record that reaches the SessionStore is valid by construction.

Payload keys:
    projectName, material, concreteStrengthMPa, maxLoadKN, latitude, longitude
"""
from __future__ import annotations

import logging
import math
from typing import Any, Mapping

from samplecollector import config
from samplecollector.model.materials import Material
from samplecollector.model.record import RecordDraft

logger = logging.getLogger(__name__)

FIELD_PROJECT_NAME = "projectName"
FIELD_MATERIAL = "material"
FIELD_STRENGTH = "concreteStrengthMPa"
FIELD_MAX_LOAD = "maxLoadKN"
FIELD_LATITUDE = "latitude"
FIELD_LONGITUDE = "longitude"

PAYLOAD_FIELDS = (
    FIELD_PROJECT_NAME,
    FIELD_MATERIAL,
    FIELD_STRENGTH,
    FIELD_MAX_LOAD,
    FIELD_LATITUDE,
    FIELD_LONGITUDE,
)


class InvalidInput(ValueError):
    """A submitted value violates the constraint of its field."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid value for field '{field}'.")
        self.field = field


def _parse_number(payload: Mapping[str, Any], field: str) -> float:
    """Parse a finite float from an int, float or numeric string."""
    if field not in payload:
        raise InvalidInput(field)
    raw = payload[field]

    # bool is an int subclass, a checkbox value is not a measurement
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise InvalidInput(field)

    try:
        value = float(raw.strip()) if isinstance(raw, str) else float(raw)
    except (ValueError, OverflowError):
        raise InvalidInput(field) from None

    if not math.isfinite(value):
        raise InvalidInput(field)
    return value


def _parse_project_name(payload: Mapping[str, Any]) -> str:
    raw = payload.get(FIELD_PROJECT_NAME)
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidInput(FIELD_PROJECT_NAME)
    return raw.strip()


def _parse_material(payload: Mapping[str, Any]) -> Material:
    raw = payload.get(FIELD_MATERIAL)
    if not isinstance(raw, str):
        raise InvalidInput(FIELD_MATERIAL)
    try:
        return Material(raw)
    except ValueError:
        raise InvalidInput(FIELD_MATERIAL) from None


def validate_submission(payload: Mapping[str, Any]) -> RecordDraft:
    """
    Validate a raw submission and return the record lacking only its id.

    Fields are checked in payload order, the first offending field is raised.

    Raises:
        InvalidInput: with the name of the offending payload field.
    """
    project_name = _parse_project_name(payload)
    material = _parse_material(payload)

    strength = _parse_number(payload, FIELD_STRENGTH)
    if not config.STRENGTH_MIN_MPA <= strength <= config.STRENGTH_MAX_MPA:
        raise InvalidInput(FIELD_STRENGTH)

    max_load = _parse_number(payload, FIELD_MAX_LOAD)
    if max_load < config.LOAD_MIN_KN:
        raise InvalidInput(FIELD_MAX_LOAD)

    # Coordinates are arbitrary positions, only parsing applies
    latitude = _parse_number(payload, FIELD_LATITUDE)
    longitude = _parse_number(payload, FIELD_LONGITUDE)

    draft = RecordDraft(
        project_name=project_name,
        material=material,
        concrete_strength_mpa=strength,
        max_load_kn=max_load,
        latitude=latitude,
        longitude=longitude,
    )
    logger.debug(f"Validated submission for project '{project_name}'.")
    return draft
