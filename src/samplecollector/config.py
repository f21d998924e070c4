"""
Configuration & Constants
=========================
This module serves as the central registry for the global constants of the
application.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (strength limits, default form
   values, page sizes) scattered throughout the model and the widgets.
2. Consistency: The validator and the form widgets read the same limits, so
   the entry form and the validation rules cannot drift apart.

Exports:
    STRENGTH_MIN_MPA, STRENGTH_MAX_MPA (float): Accepted concrete strength range.
    LOAD_MIN_KN (float): Smallest accepted maximum load.
    STEEL_PLACEHOLDER_STRENGTH_MPA (float): Plot x-position of steel samples.
    TABLE_PAGE_SIZES (tuple[int, ...]): Page sizes offered by the records table.
"""
import logging
from typing import Optional

# Validation limits
STRENGTH_MIN_MPA: float = 15.0
STRENGTH_MAX_MPA: float = 100.0
LOAD_MIN_KN: float = 0.0

# Steel strength is not measured by the form; steel samples are drawn at a
# fixed strength so both series share one axis.
STEEL_PLACEHOLDER_STRENGTH_MPA: float = 60.0

# Random label ranges (inclusive)
SESSION_ID_RANGE: tuple[int, int] = (100, 999)
PROJECT_PLACEHOLDER_RANGE: tuple[int, int] = (1000, 9999)

# Entry form defaults
DEFAULT_STRENGTH_MPA: float = 30.0
DEFAULT_MAX_LOAD_KN: float = 500.0
DEFAULT_LATITUDE: float = 48.85
DEFAULT_LONGITUDE: float = 2.35
STRENGTH_STEP: float = 1.0
LOAD_STEP: float = 10.0
COORDINATE_STEP: float = 0.01
PROJECT_NAME_HINT: str = "e.g. Pont-Nord-01"

# The spin boxes allow values outside the validation limits on purpose,
# out-of-range input must reach the validator and be rejected there.
STRENGTH_INPUT_RANGE: tuple[float, float] = (0.0, 1000.0)
LOAD_INPUT_RANGE: tuple[float, float] = (-1.0e6, 1.0e6)
COORDINATE_INPUT_RANGE: tuple[float, float] = (-1.0e3, 1.0e3)

# Records table
TABLE_PAGE_SIZES: tuple[int, ...] = (5, 10, 20)
DEFAULT_PAGE_SIZE: int = 10

# Notifications
NOTIFICATION_DURATION_MS: int = 5000

# Chart
SERIES_COLORS: dict[str, str] = {
    "Reinforced Concrete": "#1f77b4",  # Blue
    "Structural Steel": "#d62728",  # Red
}
FALLBACK_SERIES_COLOR: str = "#7f7f7f"  # Gray
POINT_SIZE: int = 12

# Logging
LOG_LEVEL: int = logging.INFO
LOG_FILE: Optional[str] = None
