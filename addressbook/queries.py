"""
Read-only queries over a sequence of contacts.

Every function returns a fresh list/dict and treats a None argument as
"nothing to match", returning the empty result instead of raising.
"""

from __future__ import annotations

import string
from typing import Dict, Iterable, List, Optional

from .models import Contact

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold(value: str) -> str:
    # Locale-neutral: only A-Z are folded.
    return value.translate(_ASCII_LOWER)


def search_by_name(contacts: Optional[Iterable[Contact]], query: Optional[str]) -> List[Contact]:
    """Contacts whose name contains `query`, ignoring ASCII case."""
    if contacts is None or query is None:
        return []
    q = _fold(query)
    return [c for c in contacts if q in _fold(c.name)]


def filter_by_city(contacts: Optional[Iterable[Contact]], city: Optional[str]) -> List[Contact]:
    """Contacts whose city equals `city` exactly. Case-sensitive."""
    if contacts is None or city is None:
        return []
    return [c for c in contacts if c.city == city]


def filter_by_phone_prefix(contacts: Optional[Iterable[Contact]], prefix: Optional[str]) -> List[Contact]:
    """Contacts whose phone starts with `prefix` as written (no digit normalization)."""
    if contacts is None or prefix is None:
        return []
    return [c for c in contacts if c.phone.startswith(prefix)]


def unique_cities(contacts: Optional[Iterable[Contact]]) -> List[str]:
    if contacts is None:
        return []
    return list(dict.fromkeys(c.city for c in contacts))


def sorted_by_name(contacts: Optional[Iterable[Contact]]) -> List[Contact]:
    """New list ordered by ASCII-folded name; ties keep their input order."""
    if contacts is None:
        return []
    return sorted(contacts, key=lambda c: _fold(c.name))


def group_count_by_city(contacts: Optional[Iterable[Contact]]) -> Dict[str, int]:
    if contacts is None:
        return {}
    counts: Dict[str, int] = {}
    for c in contacts:
        counts[c.city] = counts.get(c.city, 0) + 1
    return counts
