"""
Tests for the element enumeration and ionization potentials.
"""

import pytest

from rimsdb.core import constants
from rimsdb.scheme.elements import Element


def test_element_count():
    """Test that the enumeration covers hydrogen to hassium."""
    members = list(Element)
    assert len(members) == 108
    assert members[0] is Element.H
    assert members[-1] is Element.HS


@pytest.mark.parametrize("element", list(Element))
def test_symbol_round_trip(element):
    """Test that every element parses back from its symbol."""
    assert Element.from_symbol(element.symbol) is element


def test_every_element_has_ip():
    """Test that each element has exactly one ionization potential."""
    assert set(constants.IONIZATION_POTENTIALS) == {e.symbol for e in Element}
    for element in Element:
        assert element.ip > 0


@pytest.mark.parametrize(
    "symbol, ip",
    [
        ("H", 109678.77174307),
        ("He", 198310.66637),
        ("Ti", 55072.5),
        ("Fe", 63737.704),
        ("Sr", 45932.2036),
        ("Cs", 31406.4677325),
        ("U", 49958.4),
        ("Hs", 61000.0),
    ],
)
def test_ip_values(symbol, ip):
    """Test published ionization potentials to the stored precision."""
    assert Element.from_symbol(symbol).ip == ip


def test_from_symbol_case_insensitive():
    """Test that symbols are matched regardless of case."""
    assert Element.from_symbol("fe") is Element.FE
    assert Element.from_symbol(" TI ") is Element.TI


def test_from_symbol_unknown():
    """Test that unknown symbols raise."""
    with pytest.raises(ValueError, match="Unknown element"):
        Element.from_symbol("Xx")
    with pytest.raises(ValueError, match="Unknown element"):
        Element.from_symbol("")


def test_str_is_symbol():
    assert str(Element.NB) == "Nb"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
