"""
Tests for field validators.
"""

import pytest

from rimsdb.validation.fields import (
    is_doi,
    parse_float,
    parse_number_list,
    parse_year,
    validate_ground_state_level,
    validate_number,
    validate_transition_level,
    validate_transition_strength,
)


def test_validate_number_accepts_floats():
    """Test that valid numbers are returned unchanged."""
    assert validate_transition_level("25000.123") == "25000.123"
    assert validate_transition_strength("1.2e7") == "1.2e7"
    assert validate_number("-3", "Value") == "-3"


def test_validate_number_empty_is_unspecified():
    """Test that empty transition fields are valid."""
    assert validate_transition_level("") == ""
    assert validate_transition_strength("") == ""


def test_ground_state_level_empty():
    """Test that the ground state level is required."""
    with pytest.raises(ValueError, match="Ground state level is empty."):
        validate_ground_state_level("")


def test_ground_state_level_not_a_number():
    with pytest.raises(ValueError, match="Ground state level is not a number."):
        validate_ground_state_level("zero")


def test_transition_level_not_a_number():
    with pytest.raises(ValueError, match="Transition level is not a number."):
        validate_transition_level("25000,1")


def test_transition_strength_not_a_number():
    with pytest.raises(ValueError, match="Transition strength is not a number."):
        validate_transition_strength("fast")


def test_parse_float_rejects_whitespace_and_underscores():
    """Test that only lexical floats are accepted."""
    with pytest.raises(ValueError):
        parse_float(" 1.0")
    with pytest.raises(ValueError):
        parse_float("1_000")
    assert parse_float("1e3") == 1000.0


@pytest.mark.parametrize(
    "text",
    ["1,2,3", "1 2 3", "1:2:3", "1-2-3", "1\t2\t3", "1\n2\r\n3", "1, 2,, 3 ", " 1 : 2 - 3"],
)
def test_parse_number_list_delimiters(text):
    """Test all supported delimiters and dropping of empty tokens."""
    assert parse_number_list(text, "x") == [1.0, 2.0, 3.0]


def test_parse_number_list_empty():
    assert parse_number_list("", "x") == []


def test_parse_number_list_non_numeric():
    """Test the error message for non-numeric tokens."""
    with pytest.raises(ValueError, match="None-numeric value found in y data."):
        parse_number_list("1, 2, a", "y")


def test_parse_number_list_hyphen_splits_negative_numbers():
    """Test that a leading hyphen is a delimiter, not a sign."""
    assert parse_number_list("-1, -2", "x") == [1.0, 2.0]


def test_parse_number_list_negative_exponent_not_representable():
    """Test that 1e-5 is split at the hyphen and rejected."""
    with pytest.raises(ValueError, match="None-numeric"):
        parse_number_list("1e-5", "x")


@pytest.mark.parametrize("text", ["nan", "inf", "Infinity", "1e400"])
def test_non_finite_values_rejected(text):
    """Test that values which cannot be written as JSON are not accepted."""
    with pytest.raises(ValueError):
        parse_float(text)
    with pytest.raises(ValueError, match="None-numeric value found in y data."):
        parse_number_list(f"1, {text}, 3", "y")
    with pytest.raises(ValueError, match="Transition level is not a number."):
        validate_transition_level(text)


def test_is_doi():
    """Test the one-slash DOI heuristic."""
    assert is_doi("10.500/123456789") is True
    assert is_doi("https://doi.org/10.500/123456789") is False
    assert is_doi("no-slash-here") is False


def test_parse_year():
    assert parse_year("2021") == 2021
    with pytest.raises(ValueError, match="Cannot parse year"):
        parse_year("twenty")
    with pytest.raises(ValueError, match="Cannot parse year"):
        parse_year("-2021")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
