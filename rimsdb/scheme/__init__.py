"""
Domain model of a scheme submission.

This module provides:
- The closed set of elements with their ionization potentials
- Ground state, transition and scheme representations
- Saturation curves and references
- The submission document that is exported
"""

from rimsdb.scheme.elements import Element
from rimsdb.scheme.structures import (
    TransitionUnit,
    Lasers,
    SaturationCurveUnit,
    GroundState,
    Transition,
    Scheme,
    SaturationCurve,
    ReferenceEntry,
    SubmissionDocument,
)

__all__ = [
    "Element",
    "TransitionUnit",
    "Lasers",
    "SaturationCurveUnit",
    "GroundState",
    "Transition",
    "Scheme",
    "SaturationCurve",
    "ReferenceEntry",
    "SubmissionDocument",
]
