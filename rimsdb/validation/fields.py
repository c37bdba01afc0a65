"""
Validators for text typed into the submission form.

All validators take the raw text of a field and either return the accepted
value or raise ``ValueError`` with a message that can be shown next to the
field. Numeric fields are kept as text since the document format stores
levels and transition strengths as strings.

Notes
-----
The hyphen is one of the list delimiters, so negative numbers and numbers
with a negative exponent (``1e-5``) cannot be entered through
:func:`parse_number_list`.
"""

import math
import re
from typing import List

from rimsdb.core.logging_config import get_logger

logger = get_logger("validation.fields")

LIST_DELIMITERS = " ,:-\t\n\r"

_DELIMITER_RE = re.compile("[" + re.escape(LIST_DELIMITERS) + "]")


def parse_float(text: str) -> float:
    """
    Parse text that is lexically a floating-point number.

    Unlike ``float()``, surrounding whitespace, digit-grouping underscores
    and non-finite values (nan, inf) are rejected.

    Raises
    ------
    ValueError
        If the text is not a number
    """
    if text != text.strip() or "_" in text:
        raise ValueError(f"could not convert string to float: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {text!r}")
    return value


def validate_number(text: str, name: str, allow_empty: bool = True) -> str:
    """
    Validate a numeric text field.

    Parameters
    ----------
    text : str
        Raw field content
    name : str
        Field name used in messages, e.g. "Transition level"
    allow_empty : bool
        Whether an empty field means "unspecified" (default: True)

    Returns
    -------
    str
        The accepted text, unchanged

    Raises
    ------
    ValueError
        "{name} is empty." or "{name} is not a number."
    """
    if not text:
        if allow_empty:
            return text
        raise ValueError(f"{name} is empty.")
    try:
        parse_float(text)
    except ValueError:
        logger.debug(f"Rejected {name.lower()}: {text!r}")
        raise ValueError(f"{name} is not a number.") from None
    return text


def validate_ground_state_level(text: str) -> str:
    return validate_number(text, "Ground state level", allow_empty=False)


def validate_transition_level(text: str) -> str:
    return validate_number(text, "Transition level")


def validate_transition_strength(text: str) -> str:
    return validate_number(text, "Transition strength")


def parse_number_list(text: str, name: str) -> List[float]:
    """
    Parse a delimited list of numbers.

    Tokens are separated by any of space, comma, colon, hyphen, tab,
    newline or carriage return; empty tokens are dropped.

    Parameters
    ----------
    text : str
        Raw field content, e.g. pasted from a spreadsheet
    name : str
        Data name used in the error message, e.g. "x"

    Returns
    -------
    List[float]
        Parsed values in input order

    Raises
    ------
    ValueError
        "None-numeric value found in {name} data."
    """
    values = []
    for token in _DELIMITER_RE.split(text):
        if not token:
            continue
        try:
            values.append(parse_float(token))
        except ValueError:
            raise ValueError(f"None-numeric value found in {name} data.") from None
    return values


def is_doi(text: str) -> bool:
    """A DOI contains exactly one slash, e.g. "10.500/123456789"."""
    return text.count("/") == 1


def parse_year(text: str) -> int:
    """
    Parse a publication year.

    Raises
    ------
    ValueError
        If the text is not a non-negative integer
    """
    if not (text.isascii() and text.isdigit()):
        raise ValueError("Cannot parse year. Please check it is a number.")
    return int(text)
