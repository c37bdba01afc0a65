"""
rimsdb: Resonance Ionization Scheme Submission

Validates resonance ionization schemes entered through a form, converts them
to and from the JSON documents shared with the RIMSSchemeDrawer, and prepares
submissions to the scheme database via GitHub issues or e-mail.
"""

__version__ = "0.1.0"
__author__ = "RIMS-Code"

# Core imports for convenience
from rimsdb.core import constants
from rimsdb.scheme import Element, SubmissionDocument

__all__ = [
    "constants",
    "Element",
    "SubmissionDocument",
]
