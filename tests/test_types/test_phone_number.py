"""Tests for apiwrap.types.phone_number."""

from __future__ import annotations

import pytest
from pydantic import BaseModel

from apiwrap.types import PhoneNumber


class _Contact(BaseModel):
    phone: PhoneNumber = PhoneNumber()


class TestParse:
    @pytest.mark.parametrize(
        "text",
        [
            "+1-555-555-5555",
            "555-555-5555",
            "(555) 555-5555",
            "+15555555555",
            "+1 555-555-5555",
            "5555555555",
        ],
    )
    def test_north_american_forms_normalise(self, text: str) -> None:
        assert str(PhoneNumber.parse(text)) == "+1 555-555-5555"

    @pytest.mark.parametrize("text", ["(510) 864-1234", "(510)8641234"])
    def test_parentheses_are_stripped(self, text: str) -> None:
        assert str(PhoneNumber.parse(text)) == "+1 510-864-1234"

    def test_international_number_keeps_country(self) -> None:
        assert str(PhoneNumber.parse("+49 30  1234 1234")) == "+49 30 12341234"

    @pytest.mark.parametrize("text", ["", "   "])
    def test_blank_is_absent(self, text: str) -> None:
        number = PhoneNumber.parse(text)
        assert number.is_absent()
        assert str(number) == ""

    def test_equivalent_inputs_compare_equal(self) -> None:
        assert PhoneNumber.parse("555-555-5555") == PhoneNumber.parse("+1 (555) 555-5555")

    def test_unparseable_input_raises(self) -> None:
        with pytest.raises(ValueError, match="invalid phone number"):
            PhoneNumber.parse("not a number")


class TestPydanticField:
    def test_parses_on_validation(self) -> None:
        contact = _Contact.model_validate({"phone": "(510) 864-1234"})
        assert str(contact.phone) == "+1 510-864-1234"

    def test_null_is_absent(self) -> None:
        assert _Contact.model_validate({"phone": None}).phone.is_absent()

    def test_missing_defaults_to_absent(self) -> None:
        assert _Contact().phone.is_absent()

    def test_serializes_display_form(self) -> None:
        contact = _Contact(phone=PhoneNumber.parse("5555555555"))
        assert contact.model_dump(mode="json") == {"phone": "+1 555-555-5555"}
