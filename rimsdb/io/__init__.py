"""
Input/output utilities.

This module provides:
- JSON submission documents (current and legacy RIMSSchemeDrawer layout)
- Saturation curve measurements from CSV or plain text files
"""

from rimsdb.io.document import (
    encode_document,
    decode_document,
    to_json,
    from_json,
    load_document,
    save_document,
    suggested_filename,
)
from rimsdb.io.saturation import load_saturation_curve, save_saturation_curve

__all__ = [
    # Documents
    "encode_document",
    "decode_document",
    "to_json",
    "from_json",
    "load_document",
    "save_document",
    "suggested_filename",
    # Saturation curves
    "load_saturation_curve",
    "save_saturation_curve",
]
