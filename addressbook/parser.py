"""
Strict single-row validation.

A row is `name,email,phone,city` split on every comma. Any rule violation
raises InvalidContactFormat; nothing is repaired.
"""

from __future__ import annotations

from .models import Contact
from .rules import FIELD_COUNT, FIELD_SEPARATOR, TRIM_CHARS


class InvalidContactFormat(ValueError):
    """Raised when a CSV line cannot become a Contact."""

    def __init__(self, message: str, issue: str, line: str):
        super().__init__(message)
        self.issue = issue
        self.line = line


def is_likely_email(email: str) -> bool:
    at = email.find("@")
    return 0 < at < len(email) - 1 and " " not in email


def parse_line(line: str) -> Contact:
    """
    Parse one data line into a Contact.

    Rules:
    - Exactly four fields after a raw comma split (empty fields kept).
    - Each field trimmed of ASCII whitespace and non-empty afterwards.
    - Email has something before and after its first '@' and no spaces.
    """
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) != FIELD_COUNT:
        raise InvalidContactFormat(
            f"Wrong number of fields: {line}", issue="wrong_field_count", line=line
        )

    name, email, phone, city = (p.strip(TRIM_CHARS) for p in parts)

    if not (name and email and phone and city):
        raise InvalidContactFormat(
            f"Missing required field(s): {line}", issue="missing_field", line=line
        )
    if not is_likely_email(email):
        raise InvalidContactFormat(
            f"Invalid email: {email}", issue="invalid_email", line=line
        )

    return Contact(name=name, email=email, phone=phone, city=city)
