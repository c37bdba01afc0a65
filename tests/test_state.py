"""
Tests for form state kept between sessions.
"""

import json
import tempfile
from pathlib import Path

import pytest

from rimsdb.form.state import load_state, save_state
from rimsdb.scheme.elements import Element
from rimsdb.scheme.structures import SubmissionDocument


def test_load_state_missing_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        assert load_state(Path(tmpdir) / "none.json") == SubmissionDocument()


def test_save_and_load_unfinished_form():
    """Test that incomplete documents are stored."""
    doc = SubmissionDocument(notes="draft")
    doc.scheme.element = Element.GD
    doc.scheme.transitions[1].term_symbol = "9D"

    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "nested" / "state.json"
        save_state(doc, path)
        assert path.exists()
        assert load_state(path) == doc


def test_load_state_older_version():
    """Test that fields missing from older state files get defaults."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "state.json"
        path.write_text(json.dumps({"rims_scheme": {"scheme": {"element": "Yb"}}}))
        doc = load_state(path)
    assert doc.scheme.element is Element.YB
    assert doc.scheme.ground_state.level == "0"
    assert doc.notes == ""


@pytest.mark.parametrize("content", ["{broken", "[]", '{"rims_scheme": {"scheme": {"element": "Q"}}}'])
def test_load_state_unusable(content):
    """Test that a corrupt state file starts an empty form."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "state.json"
        path.write_text(content)
        assert load_state(path) == SubmissionDocument()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
