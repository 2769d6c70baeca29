"""
Deterministic parsing rules for the contacts CSV.

This file exists to make the simplified format explicit and enforceable.
"""

import string

SOURCE_ENCODING = "utf-8"
FIELD_SEPARATOR = ","  # raw split, no quoting
FIELD_COUNT = 4
FIELD_NAMES = ("name", "email", "phone", "city")
HEADER_LINES = 1  # discarded unconditionally, column names are not inspected

# ASCII only; str.strip() with no argument would also eat unicode spaces
TRIM_CHARS = string.whitespace

SKIP_MESSAGE_PREFIX = "Skipping invalid row: "

BUNDLED_RESOURCE = "contacts.csv"
