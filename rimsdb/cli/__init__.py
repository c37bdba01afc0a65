"""
Command-line interface for rimsdb.

This module provides CLI tools for:
- Listing elements and their ionization potentials
- Checking and converting RIMSSchemeDrawer files
- Creating submission links
"""

__all__ = []
