"""Quick-add parsing: pick an email and a phone number out of a free-form line.

`"John Doe 98765432 john@example.com"` gives email `john@example.com`, phone `98765432` and the
leftover text `John Doe`. Email is taken first because an email may contain digits.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.model.fields import Email, Phone
from src.parser.extract import extract_first_email, extract_first_phone, try_extract_email, try_extract_phone


@dataclass(frozen=True)
class QuickAddDetails:
    email: Email | None
    phone: Phone | None
    rest: str


def parse_quick_add(text: str) -> QuickAddDetails:
    remaining = (text or "").strip()

    email = None
    if try_extract_email(remaining):
        result = extract_first_email(remaining)
        email, remaining = Email(result.matched_text), result.residual

    phone = None
    if try_extract_phone(remaining):
        result = extract_first_phone(remaining)
        phone, remaining = Phone(result.matched_text), result.residual

    return QuickAddDetails(email=email, phone=phone, rest=remaining)
