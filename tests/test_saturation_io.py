"""
Tests for saturation curve file I/O.
"""

import os
import tempfile
from pathlib import Path

import numpy as np
import pytest

from rimsdb.io.saturation import load_saturation_curve, save_saturation_curve
from rimsdb.scheme.structures import SaturationCurve, SaturationCurveUnit


@pytest.fixture
def temp_path():
    paths = []

    def _make(suffix):
        fd, path = tempfile.mkstemp(suffix=suffix)
        os.close(fd)  # Close file descriptor to prevent leaks
        paths.append(Path(path))
        return Path(path)

    yield _make

    for path in paths:
        if path.exists():
            path.unlink()


def test_load_csv(temp_path):
    """Test loading a CSV file with named columns."""
    path = temp_path(".csv")
    path.write_text("# measured 2024\nPower, Signal, signal_err\n0.1, 10, 1\n0.2, 18, 1.5\n0.4, 25, 2\n")

    curve = load_saturation_curve(path, "Step 1", unit=SaturationCurveUnit.POWER)
    assert curve.title == "Step 1"
    assert curve.unit is SaturationCurveUnit.POWER
    assert curve.xdat == [0.1, 0.2, 0.4]
    assert curve.ydat == [10.0, 18.0, 25.0]
    assert curve.xdat_unc is None
    assert curve.ydat_unc == [1.0, 1.5, 2.0]


def test_load_csv_missing_column(temp_path):
    path = temp_path(".csv")
    path.write_text("a,b\n1,2\n")
    with pytest.raises(ValueError, match="Could not find x data column"):
        load_saturation_curve(path, "Step 1")


def test_load_csv_non_numeric(temp_path):
    path = temp_path(".csv")
    path.write_text("x,y\n1,2\n3,abc\n")
    with pytest.raises(ValueError, match="None-numeric value found in column 'y'"):
        load_saturation_curve(path, "Step 1")


def test_load_csv_non_finite(temp_path):
    path = temp_path(".csv")
    path.write_text("x,y\n1,2\n3,inf\n")
    with pytest.raises(ValueError, match="finite"):
        load_saturation_curve(path, "Step 1")


def test_load_text_two_columns(temp_path):
    path = temp_path(".txt")
    np.savetxt(path, np.column_stack([[1.0, 2.0], [3.0, 4.0]]))
    curve = load_saturation_curve(path, "plain")
    assert curve.xdat == [1.0, 2.0]
    assert curve.ydat == [3.0, 4.0]


def test_load_text_four_columns(temp_path):
    """Test the x, x_err, y, y_err column layout."""
    path = temp_path(".dat")
    np.savetxt(path, np.array([[1.0, 0.1, 5.0, 0.5], [2.0, 0.2, 6.0, 0.6]]))
    curve = load_saturation_curve(path, "four")
    assert curve.xdat_unc == [0.1, 0.2]
    assert curve.ydat == [5.0, 6.0]
    assert curve.ydat_unc == [0.5, 0.6]


def test_load_not_found():
    with pytest.raises(FileNotFoundError):
        load_saturation_curve("nonexistent.csv", "x")


def test_save_and_load_csv(temp_path):
    curve = SaturationCurve(
        title="Round", xdat=[1.0, 2.0], ydat=[3.0, 4.0], xdat_unc=[0.1, 0.2]
    )
    path = temp_path(".csv")
    save_saturation_curve(path, curve)
    assert path.read_text().splitlines()[0] == "x,x_err,y"
    assert load_saturation_curve(path, "Round") == curve


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
