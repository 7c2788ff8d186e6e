"""
Tests for street line parsing.
"""

import pytest

from mundipagg_service.adapters.mundipagg.address import StreetAddress, parse_street_address


class TestParseStreetAddress:
    """Test the first-digit-run street/number split."""

    def test_number_first(self):
        assert parse_street_address("123 Main Street") == StreetAddress("Main Street", "123")

    def test_number_last(self):
        assert parse_street_address("Av. Paulista 900") == StreetAddress("Av. Paulista", "900")

    def test_only_first_digit_run_is_the_number(self):
        """Apartment numbers after the house number stay in the street part."""
        result = parse_street_address("12 Main St Apt 4")

        assert result.number == "12"
        assert result.street == "Main St Apt 4"

    def test_no_digits(self):
        result = parse_street_address("  Rua das Flores  ")

        assert result.street == "Rua das Flores"
        assert result.number is None

    def test_only_digits(self):
        assert parse_street_address("4500") == StreetAddress("", "4500")

    @pytest.mark.parametrize("address1", [None, ""])
    def test_missing_line(self, address1):
        assert parse_street_address(address1) == StreetAddress(None, None)

    @pytest.mark.parametrize(
        "address1",
        ["456 My Street", "My Street 456", "Rua Augusta, 1508", "  77 Sunset Blvd "],
    )
    def test_single_run_keeps_all_characters(self, address1):
        """Street and number together hold every non-space character of the line."""
        street, number = parse_street_address(address1)

        assert sorted((street + number).replace(" ", "")) == sorted(address1.replace(" ", ""))
        assert number in address1
