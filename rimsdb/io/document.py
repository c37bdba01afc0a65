"""
Conversion between submission documents and their JSON representation.

Two layouts are read:

- current: scheme fields under ``rims_scheme.scheme``
- legacy: scheme fields directly under ``scheme`` (RIMSSchemeDrawer config
  files)

Only the current layout is written. Per-step values are stored under keys
with the step index as suffix (``step_level0`` ... ``step_level6``); unused
steps are left out of the document.

Example
-------
>>> from rimsdb.io.document import from_json, to_json
>>> doc = from_json(open("Ti.json").read())
>>> doc.submitted_by = "Jane Doe"
>>> print(to_json(doc))
"""

import json
import math
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from rimsdb.core.constants import GROUND_STATE_LEVEL, N_STEPS
from rimsdb.core.logging_config import get_logger
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
from rimsdb.validation.fields import (
    validate_ground_state_level,
    validate_transition_level,
    validate_transition_strength,
)

logger = get_logger("io.document")

PathLike = Union[str, Path]

JSON_INDENT = 2

# Per-step key prefixes; the step index is appended
STEP_LEVEL = "step_level"
STEP_TERM = "step_term"
STEP_STRENGTH = "trans_strength"
STEP_FORBIDDEN = "step_forbidden"
STEP_LOWLYING = "step_lowlying"


def _step_key(prefix: str, index: int) -> str:
    return f"{prefix}{index}"


# --- Encoding ---


def _check_complete(doc: SubmissionDocument) -> None:
    """Raise ValueError if the document cannot be submitted."""
    if not doc.scheme.is_complete:
        raise ValueError("No transitions entered")
    if not doc.submitted_by:
        raise ValueError("Please enter your name.")

    validate_ground_state_level(doc.scheme.ground_state.level)
    for trans in doc.scheme.transitions:
        if trans.level:
            validate_transition_level(trans.level)
            validate_transition_strength(trans.transition_strength)


def _encode_scheme(scheme: Scheme, strict: bool) -> Dict[str, Any]:
    out = {
        "element": scheme.element.symbol,
        "lasers": scheme.lasers.value,
        "last_step_to_ip": scheme.last_step_to_ip,
        "gs_term": scheme.ground_state.term_symbol,
        "gs_level": scheme.ground_state.level,
        "ip_term": scheme.ip_term_symbol,
        "unit": scheme.unit.value,
    }
    for it, trans in enumerate(scheme.transitions):
        keep = bool(trans.level) if strict else not trans.is_empty
        if not keep:
            continue
        out[_step_key(STEP_LEVEL, it)] = trans.level
        out[_step_key(STEP_TERM, it)] = trans.term_symbol
        out[_step_key(STEP_STRENGTH, it)] = trans.transition_strength
        out[_step_key(STEP_FORBIDDEN, it)] = trans.forbidden
        out[_step_key(STEP_LOWLYING, it)] = trans.low_lying
    return out


def _encode_reference(ref: ReferenceEntry) -> Dict[str, Any]:
    return {"id": ref.id, "authors": ref.authors, "year": ref.year}


def _encode_saturation_curve(curve: SaturationCurve) -> Dict[str, Any]:
    data = {"x": list(curve.xdat), "y": list(curve.ydat)}
    if curve.xdat_unc is not None:
        data["x_err"] = list(curve.xdat_unc)
    if curve.ydat_unc is not None:
        data["y_err"] = list(curve.ydat_unc)
    return {
        "title": curve.title,
        "notes": curve.notes,
        "unit": curve.unit.value,
        "fit": curve.fit,
        "data": data,
    }


def encode_document(doc: SubmissionDocument, strict: bool = True) -> Dict[str, Any]:
    """
    Convert a submission document to its JSON structure.

    Parameters
    ----------
    doc : SubmissionDocument
        Document to encode
    strict : bool
        Check that the document is complete and all numeric fields are
        numbers (default: True). Non-strict encoding is used to keep
        unfinished forms and writes every step that has any content.

    Returns
    -------
    dict
        JSON-compatible dictionary, keys in output order

    Raises
    ------
    ValueError
        In strict mode, if the document is incomplete or a field is invalid
    """
    if strict:
        _check_complete(doc)

    return {
        "notes": doc.notes,
        "rims_scheme": {"scheme": _encode_scheme(doc.scheme, strict)},
        "references": [_encode_reference(ref) for ref in doc.references],
        "saturation_curves": [_encode_saturation_curve(sc) for sc in doc.saturation_curves],
        "submitted_by": doc.submitted_by,
    }


def to_json(doc: SubmissionDocument, strict: bool = True) -> str:
    """
    Serialize a document to pretty-printed JSON text.

    Raises
    ------
    ValueError
        If the document is invalid (strict mode) or holds non-finite numbers
    """
    data = encode_document(doc, strict=strict)
    try:
        return json.dumps(data, indent=JSON_INDENT, ensure_ascii=False, allow_nan=False)
    except ValueError:
        raise ValueError("Data must only contain finite numbers.") from None


# --- Decoding ---


def _as_text(value: Any, key: str) -> str:
    """Read a text field; numbers are accepted and kept as written."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise ValueError(f"Invalid value for '{key}': expected a string.")


def _as_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    raise ValueError(f"Invalid value for '{key}': expected true or false.")


def _get_text(source: Dict[str, Any], key: str, default: str = "") -> str:
    if key not in source:
        return default
    return _as_text(source[key], key)


def _get_bool(source: Dict[str, Any], key: str, default: bool = False) -> bool:
    if key not in source:
        return default
    return _as_bool(source[key], key)


def _number_list(values: Any) -> List[float]:
    """Strict list of finite JSON numbers (booleans are not numbers)."""
    if not isinstance(values, list):
        raise ValueError("None-numeric value found in data.")
    out = []
    for value in values:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("None-numeric value found in data.")
        try:
            number = float(value)
        except OverflowError:
            raise ValueError("None-numeric value found in data.") from None
        if not math.isfinite(number):
            raise ValueError("None-numeric value found in data.")
        out.append(number)
    return out


def _find_scheme(data: Dict[str, Any]) -> Dict[str, Any]:
    """Locate the scheme object in either document layout."""
    scheme = None
    if "rims_scheme" in data:
        rims_scheme = data["rims_scheme"]
        if isinstance(rims_scheme, dict):
            scheme = rims_scheme.get("scheme")
    elif "scheme" in data:
        logger.debug("Reading legacy document layout")
        scheme = data["scheme"]

    if not isinstance(scheme, dict):
        raise ValueError("No 'rims_scheme' or 'scheme' key found.")
    return scheme


def _decode_element(source: Dict[str, Any], strict: bool) -> Element:
    if "element" not in source:
        if strict:
            raise ValueError("No element found in scheme.")
        return Element.H
    value = source["element"]
    if not isinstance(value, str):
        raise ValueError(f"Unknown element: '{value}'")
    return Element.from_symbol(value)


def _decode_lasers(source: Dict[str, Any], strict: bool) -> Lasers:
    if "lasers" not in source:
        if strict:
            raise ValueError("No lasers found in scheme.")
        return Lasers.TISA
    value = source["lasers"]
    for lasers in Lasers:
        if value == lasers.value:
            return lasers
    raise ValueError(f"Unknown lasers: '{value}'")


def _decode_unit(source: Dict[str, Any], strict: bool) -> TransitionUnit:
    if "unit" not in source:
        if strict:
            raise ValueError("No unit found in scheme.")
        return TransitionUnit.WAVENUMBER
    if source["unit"] == TransitionUnit.WAVELENGTH.value:
        return TransitionUnit.WAVELENGTH
    return TransitionUnit.WAVENUMBER


def _decode_transition(source: Dict[str, Any], index: int) -> Transition:
    return Transition(
        level=_get_text(source, _step_key(STEP_LEVEL, index)),
        term_symbol=_get_text(source, _step_key(STEP_TERM, index)),
        transition_strength=_get_text(source, _step_key(STEP_STRENGTH, index)),
        forbidden=_get_bool(source, _step_key(STEP_FORBIDDEN, index)),
        low_lying=_get_bool(source, _step_key(STEP_LOWLYING, index)),
    )


def _decode_scheme(source: Dict[str, Any], strict: bool) -> Scheme:
    transitions = []
    for it in range(N_STEPS):
        if _step_key(STEP_LEVEL, it) in source:
            transitions.append(_decode_transition(source, it))
        else:
            transitions.append(Transition())

    return Scheme(
        element=_decode_element(source, strict),
        ground_state=GroundState(
            level=_get_text(source, "gs_level", GROUND_STATE_LEVEL),
            term_symbol=_get_text(source, "gs_term"),
        ),
        ip_term_symbol=_get_text(source, "ip_term"),
        lasers=_decode_lasers(source, strict),
        transitions=transitions,
        unit=_decode_unit(source, strict),
        last_step_to_ip=_get_bool(source, "last_step_to_ip"),
    )


def _decode_references(entries: Any) -> List[ReferenceEntry]:
    if not isinstance(entries, list):
        raise ValueError("'references' must be a list.")

    references = []
    for entry in entries:
        if not isinstance(entry, dict) or not isinstance(entry.get("id"), str):
            logger.warning(f"Skipping reference without id: {entry!r}")
            continue
        year = entry.get("year", 0)
        if isinstance(year, bool) or not isinstance(year, int) or year < 0:
            raise ValueError(f"Invalid year for reference '{entry['id']}'.")
        references.append(
            ReferenceEntry(id=entry["id"], authors=_get_text(entry, "authors"), year=year)
        )
    return references


def _decode_saturation_curve(entry: Dict[str, Any]) -> SaturationCurve:
    title = entry["title"]
    unit = SaturationCurveUnit.IRRADIANCE
    if entry.get("unit") == SaturationCurveUnit.POWER.value:
        unit = SaturationCurveUnit.POWER

    data = entry.get("data")
    if not isinstance(data, dict):
        data = {}
    if "x" not in data:
        raise ValueError(f"No x data found for saturation curve '{title}'.")
    if "y" not in data:
        raise ValueError(f"No y data found for saturation curve '{title}'.")

    xdat = _number_list(data["x"])
    ydat = _number_list(data["y"])
    xdat_unc = _number_list(data["x_err"]) if "x_err" in data else None
    ydat_unc = _number_list(data["y_err"]) if "y_err" in data else None

    try:
        return SaturationCurve(
            title=title,
            notes=_get_text(entry, "notes"),
            unit=unit,
            fit=_get_bool(entry, "fit", True),
            xdat=xdat,
            ydat=ydat,
            xdat_unc=xdat_unc,
            ydat_unc=ydat_unc,
        )
    except ValueError as e:
        raise ValueError(f"Saturation curve '{title}': {e}") from None


def _decode_saturation_curves(entries: Any) -> List[SaturationCurve]:
    if not isinstance(entries, list):
        raise ValueError("'saturation_curves' must be a list.")

    curves = []
    for entry in entries:
        if not isinstance(entry, dict) or not isinstance(entry.get("title"), str):
            logger.warning("Skipping saturation curve without title")
            continue
        curves.append(_decode_saturation_curve(entry))
    return curves


def decode_document(data: Any, strict: bool = True) -> SubmissionDocument:
    """
    Build a submission document from a parsed JSON structure.

    Parameters
    ----------
    data : dict
        Parsed JSON in the current or the legacy layout
    strict : bool
        Require element, lasers and unit to be present (default: True).
        Non-strict decoding falls back to their defaults instead.

    Returns
    -------
    SubmissionDocument
        Newly created document

    Raises
    ------
    ValueError
        If no scheme is found or a field is missing or malformed
    """
    if not isinstance(data, dict):
        raise ValueError("No 'rims_scheme' or 'scheme' key found.")

    scheme = _decode_scheme(_find_scheme(data), strict)

    return SubmissionDocument(
        notes=_get_text(data, "notes"),
        scheme=scheme,
        references=_decode_references(data.get("references", [])),
        saturation_curves=_decode_saturation_curves(data.get("saturation_curves", [])),
        submitted_by=_get_text(data, "submitted_by"),
    )


def from_json(text: Union[str, bytes], strict: bool = True) -> SubmissionDocument:
    """
    Parse JSON text into a submission document.

    Bytes are decoded as UTF-8, replacing invalid sequences.
    """
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Could not parse JSON: {e}") from None
    return decode_document(data, strict=strict)


# --- Files ---


def suggested_filename(doc: SubmissionDocument) -> str:
    """Default file name for a download, e.g. "Fe.json"."""
    return f"{doc.scheme.element.symbol}.json"


def load_document(path: PathLike, strict: bool = True) -> SubmissionDocument:
    """
    Load a submission document or RIMSSchemeDrawer file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    ValueError
        If the content is not a valid document
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Document not found: {path}")

    doc = from_json(path.read_bytes(), strict=strict)
    logger.info(f"Loaded {doc.scheme.element.symbol} scheme from {path}")
    return doc


def save_document(doc: SubmissionDocument, path: Optional[PathLike] = None) -> Path:
    """
    Write a document in the canonical layout.

    Parameters
    ----------
    doc : SubmissionDocument
        Document to write; must be complete
    path : str or Path, optional
        Output file or directory (default: suggested file name in the
        working directory)

    Returns
    -------
    Path
        The file written
    """
    if path is None:
        path = Path(suggested_filename(doc))
    path = Path(path)
    if path.is_dir():
        path = path / suggested_filename(doc)

    text = to_json(doc)
    path.write_text(text + "\n", encoding="utf-8")
    logger.info(f"Saved submission document to {path}")
    return path
