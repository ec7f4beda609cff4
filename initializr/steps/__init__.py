"""Wizard steps."""

from initializr.steps.dependency_step import run_dependency_step
from initializr.steps.select_step import run_select_step
from initializr.steps.text_step import run_text_step

__all__ = ["run_select_step", "run_text_step", "run_dependency_step"]
