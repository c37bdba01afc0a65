"""
I/O utilities for saturation curve measurements.
"""

from pathlib import Path
from typing import List, Optional, Union

import numpy as np
import pandas as pd

from rimsdb.core.logging_config import get_logger
from rimsdb.scheme.structures import SaturationCurve, SaturationCurveUnit

logger = get_logger("io.saturation")

X_COLUMNS = ["x", "power", "power_w", "irradiance", "irradiance_w_cm2", "intensity"]
Y_COLUMNS = ["y", "signal", "counts", "ion_signal"]
X_ERR_COLUMNS = ["x_err", "xerr", "x_unc", "power_err", "irradiance_err"]
Y_ERR_COLUMNS = ["y_err", "yerr", "y_unc", "signal_err", "counts_err"]


def _find_column(df: pd.DataFrame, candidates: List[str]) -> Optional[str]:
    columns = {str(col).strip().lower(): col for col in df.columns}
    for name in candidates:
        if name in columns:
            return columns[name]
    return None


def _column_values(df: pd.DataFrame, column: str) -> List[float]:
    values = pd.to_numeric(df[column], errors="coerce")
    if values.isna().any():
        raise ValueError(f"None-numeric value found in column '{column}'.")
    return values.astype(np.float64).tolist()


def load_saturation_curve(
    file_path: Union[str, Path],
    title: str,
    notes: str = "",
    unit: SaturationCurveUnit = SaturationCurveUnit.IRRADIANCE,
    fit: bool = True,
) -> SaturationCurve:
    """
    Load a saturation curve measurement from file.

    Supports CSV files with named columns (x / power / irradiance, y / signal,
    and optional x_err, y_err) and whitespace-separated text files with
    columns x, y, [y_err] or x, x_err, y, y_err.

    Parameters
    ----------
    file_path : str or Path
        Path to the measurement file
    title : str
        Title of the curve
    notes : str, optional
        Notes for the curve
    unit : SaturationCurveUnit
        Unit of the x data (default: irradiance)
    fit : bool
        Whether the curve should be fitted (default: True)

    Returns
    -------
    SaturationCurve
        Validated curve

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    ValueError
        If columns are missing or the data is inconsistent
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Saturation curve file not found: {file_path}")

    xdat_unc = None
    ydat_unc = None

    if file_path.suffix.lower() == ".csv":
        df = pd.read_csv(file_path, comment="#", skipinitialspace=True)

        x_col = _find_column(df, X_COLUMNS)
        if x_col is None:
            raise ValueError("Could not find x data column in CSV")
        y_col = _find_column(df, Y_COLUMNS)
        if y_col is None:
            raise ValueError("Could not find y data column in CSV")

        xdat = _column_values(df, x_col)
        ydat = _column_values(df, y_col)

        x_err_col = _find_column(df, X_ERR_COLUMNS)
        if x_err_col is not None:
            xdat_unc = _column_values(df, x_err_col)
        y_err_col = _find_column(df, Y_ERR_COLUMNS)
        if y_err_col is not None:
            ydat_unc = _column_values(df, y_err_col)

    else:
        data = np.loadtxt(file_path, ndmin=2)
        n_cols = data.shape[1]
        if n_cols < 2:
            raise ValueError("Saturation curve file must have at least 2 columns")
        if n_cols == 4:
            xdat, xdat_unc, ydat, ydat_unc = (data[:, i].tolist() for i in range(4))
        else:
            xdat = data[:, 0].tolist()
            ydat = data[:, 1].tolist()
            if n_cols == 3:
                ydat_unc = data[:, 2].tolist()

    curve = SaturationCurve(
        title=title,
        notes=notes,
        unit=unit,
        fit=fit,
        xdat=xdat,
        ydat=ydat,
        xdat_unc=xdat_unc,
        ydat_unc=ydat_unc,
    )
    logger.info(f"Loaded saturation curve '{title}' from {file_path}: {len(xdat)} points")
    return curve


def save_saturation_curve(file_path: Union[str, Path], curve: SaturationCurve) -> None:
    """
    Save a saturation curve as CSV.

    Columns are x, [x_err], y, [y_err]; notes are not written.
    """
    file_path = Path(file_path)

    columns = {"x": curve.xdat}
    if curve.xdat_unc is not None:
        columns["x_err"] = curve.xdat_unc
    columns["y"] = curve.ydat
    if curve.ydat_unc is not None:
        columns["y_err"] = curve.ydat_unc

    pd.DataFrame(columns).to_csv(file_path, index=False)
    logger.info(f"Saved saturation curve '{curve.title}' to {file_path}")
