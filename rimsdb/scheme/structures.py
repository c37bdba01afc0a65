"""
Data structures for resonance ionization scheme submissions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from rimsdb.core.constants import GROUND_STATE_LEVEL, N_STEPS
from rimsdb.scheme.elements import Element
from rimsdb.validation.fields import parse_number_list


class TransitionUnit(Enum):
    """Unit in which the (non low-lying) levels of a scheme are entered."""

    WAVENUMBER = "cm<sup>-1</sup>"
    WAVELENGTH = "nm"

    @property
    def display(self) -> str:
        """Human readable unit label."""
        return "cm⁻¹" if self is TransitionUnit.WAVENUMBER else "nm"


class Lasers(Enum):
    """Laser technology the scheme was developed with."""

    TISA = "Ti:Sa"
    DYE = "Dye"
    BOTH = "Ti:Sa and Dye"


class SaturationCurveUnit(Enum):
    """Unit of the x-axis of a saturation curve."""

    IRRADIANCE = "W * cm^-2"
    POWER = "W"

    @property
    def display(self) -> str:
        """Human readable unit label."""
        return "W/cm²" if self is SaturationCurveUnit.IRRADIANCE else "W"

    @property
    def quantity(self) -> str:
        """Name of the quantity on the x-axis."""
        return "Irradiance" if self is SaturationCurveUnit.IRRADIANCE else "Power"


@dataclass
class GroundState:
    """
    Ground state of the scheme.

    Attributes
    ----------
    level : str
        Level energy in cm^-1, kept as entered
    term_symbol : str
        Optional term symbol
    """

    level: str = GROUND_STATE_LEVEL
    term_symbol: str = ""


@dataclass
class Transition:
    """
    One excitation step of a scheme.

    Attributes
    ----------
    level : str
        Level the step excites to; empty if the step is unused
    term_symbol : str
        Term symbol of the level
    transition_strength : str
        Transition strength in s^-1; empty if unknown
    low_lying : bool
        Level belongs to the ground state manifold (always in cm^-1)
    forbidden : bool
        Transition is dipole forbidden
    """

    level: str = ""
    term_symbol: str = ""
    transition_strength: str = ""
    low_lying: bool = False
    forbidden: bool = False

    @property
    def is_empty(self) -> bool:
        """True if every field is still at its default."""
        return self == Transition()


def _empty_transitions() -> List[Transition]:
    return [Transition() for _ in range(N_STEPS)]


@dataclass
class Scheme:
    """
    Resonance ionization scheme for one element.

    The scheme always owns exactly ``N_STEPS`` transitions; the position of a
    transition in the list is its step number.
    """

    element: Element = Element.H
    ground_state: GroundState = field(default_factory=GroundState)
    ip_term_symbol: str = ""
    lasers: Lasers = Lasers.TISA
    transitions: List[Transition] = field(default_factory=_empty_transitions)
    unit: TransitionUnit = TransitionUnit.WAVENUMBER
    last_step_to_ip: bool = False

    def __post_init__(self):
        self.transitions = list(self.transitions)
        if len(self.transitions) != N_STEPS:
            raise ValueError(
                f"A scheme holds exactly {N_STEPS} transitions, got {len(self.transitions)}"
            )

    @property
    def is_complete(self) -> bool:
        """A scheme is complete once its first step has a level."""
        return bool(self.transitions[0].level)

    @property
    def ip(self) -> float:
        """Ionization potential of the element in cm^-1."""
        return self.element.ip

    def transition_label(self, index: int) -> str:
        """Row label for a step, e.g. "Step 2 (nm):" or "Low-lying 1 (cm⁻¹):"."""
        trans = self.transitions[index]
        if trans.low_lying:
            return f"Low-lying {index + 1} ({TransitionUnit.WAVENUMBER.display}):"
        return f"Step {index + 1} ({self.unit.display}):"


def _format_values(values: Optional[List[float]]) -> str:
    """Render values as editor text without exponents."""
    if values is None:
        return ""
    return ", ".join(np.format_float_positional(v, trim="-") for v in values)


@dataclass
class SaturationCurve:
    """
    Measured saturation curve of one transition.

    Attributes
    ----------
    title : str
        Unique title within a submission
    notes : str
        Free-text notes (beam size, conditions, ...)
    unit : SaturationCurveUnit
        Unit of the x data
    fit : bool
        Whether the database should fit this curve
    xdat, ydat : List[float]
        Data, of equal length
    xdat_unc, ydat_unc : List[float], optional
        Uncertainties, same length as the corresponding data if present
    """

    title: str
    notes: str = ""
    unit: SaturationCurveUnit = SaturationCurveUnit.IRRADIANCE
    fit: bool = True
    xdat: List[float] = field(default_factory=list)
    ydat: List[float] = field(default_factory=list)
    xdat_unc: Optional[List[float]] = None
    ydat_unc: Optional[List[float]] = None

    def __post_init__(self):
        if not self.title:
            raise ValueError("Title cannot be empty.")
        if len(self.xdat) != len(self.ydat):
            raise ValueError("The x and y data must have the same length.")
        if self.xdat_unc is not None and len(self.xdat_unc) != len(self.xdat):
            raise ValueError("The x uncertainty must have the same length as the x data.")
        if self.ydat_unc is not None and len(self.ydat_unc) != len(self.ydat):
            raise ValueError("The y uncertainty must have the same length as the y data.")
        for values in self._data_lists():
            if not np.all(np.isfinite(np.asarray(values, dtype=np.float64))):
                raise ValueError("Data must only contain finite numbers.")

    @classmethod
    def from_parts(
        cls,
        title: str,
        notes: str,
        unit: SaturationCurveUnit,
        fit: bool,
        xdat: str,
        xunc: str,
        ydat: str,
        yunc: str,
    ) -> "SaturationCurve":
        """
        Create a saturation curve from the raw text of the editor fields.

        Parameters
        ----------
        title, notes : str
            Metadata of the curve
        unit : SaturationCurveUnit
            Unit of the x data
        fit : bool
            Whether the curve should be fitted
        xdat, xunc, ydat, yunc : str
            Delimited numbers; the uncertainty fields may be empty

        Returns
        -------
        SaturationCurve
            Validated curve

        Raises
        ------
        ValueError
            With a user-facing message if any field is invalid
        """
        if not title:
            raise ValueError("Title cannot be empty.")
        if not xdat.strip() or not ydat.strip():
            raise ValueError("Please enter some data.")

        x = parse_number_list(xdat, "x")
        y = parse_number_list(ydat, "y")
        x_unc = parse_number_list(xunc, "x uncertainty") if xunc.strip() else None
        y_unc = parse_number_list(yunc, "y uncertainty") if yunc.strip() else None
        if not x or not y:
            raise ValueError("Please enter some data.")

        return cls(
            title=title,
            notes=notes,
            unit=unit,
            fit=fit,
            xdat=x,
            ydat=y,
            xdat_unc=x_unc,
            ydat_unc=y_unc,
        )

    def _data_lists(self) -> List[List[float]]:
        return [v for v in (self.xdat, self.ydat, self.xdat_unc, self.ydat_unc) if v is not None]

    @property
    def has_negative_values(self) -> bool:
        """True if any value cannot be written with the hyphen-delimited editor text."""
        return any(value < 0 for values in self._data_lists() for value in values)

    def format_xdat(self) -> str:
        return _format_values(self.xdat)

    def format_xdat_unc(self) -> str:
        return _format_values(self.xdat_unc)

    def format_ydat(self) -> str:
        return _format_values(self.ydat)

    def format_ydat_unc(self) -> str:
        return _format_values(self.ydat_unc)

    def as_arrays(
        self,
    ) -> Tuple[np.ndarray, np.ndarray, Optional[np.ndarray], Optional[np.ndarray]]:
        """
        Data as float64 arrays.

        Returns
        -------
        x, y, x_unc, y_unc : np.ndarray
            Uncertainty arrays are None where no uncertainty was given
        """
        x_unc = None if self.xdat_unc is None else np.asarray(self.xdat_unc, dtype=np.float64)
        y_unc = None if self.ydat_unc is None else np.asarray(self.ydat_unc, dtype=np.float64)
        return (
            np.asarray(self.xdat, dtype=np.float64),
            np.asarray(self.ydat, dtype=np.float64),
            x_unc,
            y_unc,
        )


@dataclass
class ReferenceEntry:
    """
    Bibliographic reference.

    An entry without authors and year is a bare DOI; otherwise the
    identifier is a URL shown with its authors and year.
    """

    id: str
    authors: str = ""
    year: int = 0

    @classmethod
    def from_doi(cls, doi: str) -> "ReferenceEntry":
        return cls(id=doi)

    @classmethod
    def from_url(cls, url: str, authors: str, year: int) -> "ReferenceEntry":
        return cls(id=url, authors=authors, year=year)

    @property
    def is_doi_entry(self) -> bool:
        return not self.authors and self.year == 0

    @property
    def url(self) -> str:
        """Link that opens the reference."""
        if self.is_doi_entry:
            return f"https://doi.org/{self.id}"
        return self.id

    @property
    def label(self) -> str:
        """Hover text for the reference list."""
        if self.is_doi_entry:
            return self.url
        return f"{self.authors} ({self.year})"


@dataclass
class SubmissionDocument:
    """
    Everything that is submitted to the database.

    Attributes
    ----------
    notes : str
        Free-text notes (Markdown)
    scheme : Scheme
        The ionization scheme
    references : List[ReferenceEntry]
        References, in display order
    saturation_curves : List[SaturationCurve]
        Saturation curves, in display order
    submitted_by : str
        Name of the submitter
    """

    notes: str = ""
    scheme: Scheme = field(default_factory=Scheme)
    references: List[ReferenceEntry] = field(default_factory=list)
    saturation_curves: List[SaturationCurve] = field(default_factory=list)
    submitted_by: str = ""

    @property
    def element(self) -> Element:
        return self.scheme.element
