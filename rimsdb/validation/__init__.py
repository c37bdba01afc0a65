"""
Validation of user input.

This module provides:
- Numeric field validators for levels and transition strengths
- Delimited number-list parsing for saturation curve data
- DOI and publication year checks for references
"""

from rimsdb.validation.fields import (
    parse_float,
    validate_number,
    validate_ground_state_level,
    validate_transition_level,
    validate_transition_strength,
    parse_number_list,
    is_doi,
    parse_year,
)

__all__ = [
    "parse_float",
    "validate_number",
    "validate_ground_state_level",
    "validate_transition_level",
    "validate_transition_strength",
    "parse_number_list",
    "is_doi",
    "parse_year",
]
