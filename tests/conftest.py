"""
Pytest configuration and shared fixtures for rimsdb tests.

This module provides:
- Scheme documents in the current and the legacy layout
- A complete submission document
- Temporary files for round-trips through disk
"""

import json
import os
import tempfile
from pathlib import Path

import pytest

from rimsdb.scheme.elements import Element
from rimsdb.scheme.structures import (
    GroundState,
    Lasers,
    ReferenceEntry,
    SaturationCurve,
    SaturationCurveUnit,
    Scheme,
    SubmissionDocument,
    Transition,
    TransitionUnit,
)


@pytest.fixture
def scheme_fields():
    """Scheme object of a two-step titanium scheme in nm."""
    return {
        "element": "Ti",
        "lasers": "Ti:Sa",
        "last_step_to_ip": True,
        "gs_term": "3F2",
        "gs_level": "0",
        "ip_term": "",
        "unit": "nm",
        "step_level0": "465.647",
        "step_term0": "3G3",
        "trans_strength0": "1.2e7",
        "step_forbidden0": False,
        "step_lowlying0": False,
        "step_level1": "25107.4",
        "step_term1": "",
        "trans_strength1": "",
        "step_forbidden1": True,
        "step_lowlying1": True,
    }


@pytest.fixture
def current_dict(scheme_fields):
    """Document in the current layout."""
    return {
        "notes": "Measured at the test bench.",
        "rims_scheme": {"scheme": dict(scheme_fields)},
        "references": [
            {"id": "10.1016/j.sab.2020.105913", "authors": "", "year": 0},
            {"id": "https://example.org/paper", "authors": "Doe et al.", "year": 2021},
        ],
        "saturation_curves": [
            {
                "title": "Step 1",
                "notes": "Beam diameter 2 mm",
                "unit": "W",
                "fit": False,
                "data": {"x": [1.0, 2.0, 3.0], "y": [4.0, 5.0, 6.0], "y_err": [0.1, 0.2, 0.3]},
            }
        ],
        "submitted_by": "Jane Doe",
    }


@pytest.fixture
def legacy_dict(scheme_fields):
    """RIMSSchemeDrawer config file (scheme at top level)."""
    return {"scheme": dict(scheme_fields), "settings": {"fig_width": 5}}


@pytest.fixture
def sample_document():
    """Complete submission document."""
    transitions = [Transition() for _ in range(7)]
    transitions[0] = Transition(level="21000.5", term_symbol="5D0", transition_strength="1e8")
    transitions[1] = Transition(level="41000.2", forbidden=True)
    transitions[3] = Transition(level="500.3", low_lying=True)

    scheme = Scheme(
        element=Element.FE,
        ground_state=GroundState(level="0", term_symbol="5D4"),
        ip_term_symbol="6D9/2",
        lasers=Lasers.BOTH,
        transitions=transitions,
        unit=TransitionUnit.WAVENUMBER,
        last_step_to_ip=False,
    )
    return SubmissionDocument(
        notes="Some *notes*",
        scheme=scheme,
        references=[
            ReferenceEntry.from_doi("10.500/123456789"),
            ReferenceEntry.from_url("https://example.org/fe", "Smith and Jones", 2019),
        ],
        saturation_curves=[
            SaturationCurve(
                title="Fe step 1",
                unit=SaturationCurveUnit.IRRADIANCE,
                xdat=[0.5, 1.0, 2.0],
                ydat=[10.0, 18.0, 25.0],
                xdat_unc=[0.05, 0.1, 0.2],
            ),
            SaturationCurve(
                title="Fe step 2",
                notes="no fit",
                unit=SaturationCurveUnit.POWER,
                fit=False,
                xdat=[1.0],
                ydat=[2.0],
            ),
        ],
        submitted_by="Jane Doe",
    )


@pytest.fixture
def temp_json_file():
    """Factory writing a dictionary to a temporary JSON file."""
    paths = []

    def _write(data):
        fd, path = tempfile.mkstemp(suffix=".json")
        os.close(fd)  # Close file descriptor to prevent leaks
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f)
        paths.append(Path(path))
        return Path(path)

    yield _write

    for path in paths:
        if path.exists():
            path.unlink()
