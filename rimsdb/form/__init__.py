"""
Form logic behind the submission user interface.

This module provides:
- The form controller with per-section error state
- Editors for saturation curves and references
- The hand-off channel for file dialog results
- Form state kept between sessions
"""

from rimsdb.form.controller import (
    FormController,
    SaturationCurveEditor,
    ReferenceEditor,
    SchemeImport,
)
from rimsdb.form.handoff import FileHandoff, run_in_background
from rimsdb.form.state import load_state, save_state

__all__ = [
    "FormController",
    "SaturationCurveEditor",
    "ReferenceEditor",
    "SchemeImport",
    "FileHandoff",
    "run_in_background",
    "load_state",
    "save_state",
]
