"""Phone numbers normalised through :mod:`phonenumbers`.

Vendor APIs return phone numbers in whatever shape the user typed them.
:class:`PhoneNumber` normalises on the way in:

* blank input is an *absent* number (not an error) and displays as ``""``;
* input without a leading ``+`` is taken as North American and gets ``+1``;
* ``-``, ``(``, ``)`` and spaces are stripped before parsing.

Numbers always display (and serialise) in international format, e.g.
``+1 555-555-5555``.
"""

from __future__ import annotations

from typing import Any, Optional

import phonenumbers
from pydantic_core import core_schema

_SEPARATORS = str.maketrans("", "", "-() ")


class PhoneNumber:
    """A possibly-absent, parsed phone number."""

    __slots__ = ("number",)

    def __init__(self, number: Optional[phonenumbers.PhoneNumber] = None) -> None:
        self.number = number

    @classmethod
    def parse(cls, text: str) -> PhoneNumber:
        """Parse free-form *text*.

        Raises:
            ValueError: If the cleaned string is not a parseable number.
        """
        if not text.strip():
            return cls(None)
        if not text.strip().startswith("+"):
            text = f"+1{text}"
        cleaned = text.translate(_SEPARATORS)
        try:
            number = phonenumbers.parse(cleaned, None)
        except phonenumbers.NumberParseException as exc:
            raise ValueError(f"invalid phone number `{cleaned}`: {exc}") from exc
        return cls(number)

    def is_absent(self) -> bool:
        return self.number is None

    def __str__(self) -> str:
        if self.number is None:
            return ""
        return phonenumbers.format_number(
            self.number, phonenumbers.PhoneNumberFormat.INTERNATIONAL
        )

    def __repr__(self) -> str:
        return f"PhoneNumber({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PhoneNumber):
            return self.number == other.number
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    @classmethod
    def _validate(cls, value: Any) -> PhoneNumber:
        if isinstance(value, cls):
            return value
        if value is None:
            return cls(None)
        if isinstance(value, str):
            return cls.parse(value)
        raise ValueError("a phone number string")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> dict[str, Any]:
        return {"type": "string", "format": "phone"}
