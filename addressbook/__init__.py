from .models import Contact
from .parser import InvalidContactFormat, is_likely_email, parse_line
from .loader import decode_upload, load_from_csv, load_with_report
from .queries import (
    filter_by_city,
    filter_by_phone_prefix,
    group_count_by_city,
    search_by_name,
    sorted_by_name,
    unique_cities,
)

__all__ = [
    "Contact",
    "InvalidContactFormat",
    "is_likely_email",
    "parse_line",
    "decode_upload",
    "load_from_csv",
    "load_with_report",
    "search_by_name",
    "filter_by_city",
    "filter_by_phone_prefix",
    "unique_cities",
    "sorted_by_name",
    "group_count_by_city",
]
