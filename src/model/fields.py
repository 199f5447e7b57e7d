"""Validated contact field values (Pydantic models).

Every value type owns its validation pattern. The token extractor reuses the compiled phone and
email patterns, so a token the extractor finds is always a token the field type accepts.
"""

from __future__ import annotations

import re
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

NAME_VALIDATION_REGEX = r"[A-Za-z0-9][A-Za-z0-9 ]*"
PHONE_VALIDATION_REGEX = r"\d{3,}"
EMAIL_VALIDATION_REGEX = r"[\w\.]+@[\w\.]+"
ADDRESS_VALIDATION_REGEX = r"[^\s].*"
TAG_VALIDATION_REGEX = r"[A-Za-z0-9]+"


class InvalidValueError(ValueError):
    """Raised when a raw string is not an acceptable value for a field type."""


class FieldValue(BaseModel):
    """A single validated, immutable string value.

    Subclasses set `PATTERN` (full-match validation; `None` accepts anything) and
    `MESSAGE_CONSTRAINTS` (the user-facing reason a value was rejected).
    """

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    PATTERN: ClassVar[re.Pattern[str] | None] = None
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Value is invalid."

    value: str

    def __init__(self, value: Any = None, /, **data: Any) -> None:
        if value is not None:
            data["value"] = value
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidValueError(type(self).MESSAGE_CONSTRAINTS) from exc

    @classmethod
    def is_valid(cls, text: str) -> bool:
        """Whether `text` (already stripped) satisfies this type's pattern."""

        if cls.PATTERN is None:
            return True
        return cls.PATTERN.fullmatch(text) is not None

    @model_validator(mode="after")
    def validate_value(self) -> FieldValue:
        if not type(self).is_valid(self.value):
            raise ValueError(type(self).MESSAGE_CONSTRAINTS)
        return self

    def sort_key(self) -> str:
        """Case-insensitive ordering key."""

        return self.value.lower()

    def __str__(self) -> str:
        return self.value


class Name(FieldValue):
    PATTERN: ClassVar[re.Pattern[str] | None] = re.compile(NAME_VALIDATION_REGEX)
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Person names should only contain alphanumeric characters and spaces, and it should not be blank"
    )


class Phone(FieldValue):
    PATTERN: ClassVar[re.Pattern[str] | None] = re.compile(PHONE_VALIDATION_REGEX, flags=re.ASCII)
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers can only contain numbers, and should be at least 3 digits long"
    )


class Email(FieldValue):
    PATTERN: ClassVar[re.Pattern[str] | None] = re.compile(EMAIL_VALIDATION_REGEX, flags=re.ASCII)
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Person emails should be 2 alphanumeric/period strings separated by '@'"
    )


class Address(FieldValue):
    PATTERN: ClassVar[re.Pattern[str] | None] = re.compile(ADDRESS_VALIDATION_REGEX)
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Person addresses can take any values, and it should not be blank"


class Remark(FieldValue):
    """Free-form note; any text (including empty) is accepted."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Person remarks can take any values"


class Tag(FieldValue):
    PATTERN: ClassVar[re.Pattern[str] | None] = re.compile(TAG_VALIDATION_REGEX)
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tags names should be alphanumeric"
