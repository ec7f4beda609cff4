"""Interactive Spring Initializr wizard."""

from initializr.constants import (
    WIZARD_CANCELLED,
    WIZARD_FETCH_FAILED,
    WIZARD_SPAWN_FAILED,
    WIZARD_SUCCESS,
)

__all__ = [
    "WIZARD_SUCCESS",
    "WIZARD_FETCH_FAILED",
    "WIZARD_SPAWN_FAILED",
    "WIZARD_CANCELLED",
]
