"""
Tolerant bulk ingestion of a contacts CSV.

Responsibilities:
- decode the stream (UTF-8 for streams, best-effort detection for uploads)
- drop the header line unconditionally
- skip blank lines silently
- parse every other line, reporting and dropping the ones that fail
"""

from __future__ import annotations

import io
import logging
import sys
from typing import IO, Dict, List, Optional, TextIO, Tuple, Union

from charset_normalizer import from_bytes

from .models import Contact
from .parser import InvalidContactFormat, parse_line
from .rules import HEADER_LINES, SKIP_MESSAGE_PREFIX, SOURCE_ENCODING, TRIM_CHARS

logger = logging.getLogger(__name__)

Stream = Union[IO[bytes], IO[str]]


def _open_text(stream: Stream) -> IO[str]:
    if isinstance(stream, io.TextIOBase) or "b" not in getattr(stream, "mode", "b"):
        return stream
    # Universal newlines: \r\n and \n both end a line.
    return io.TextIOWrapper(stream, encoding=SOURCE_ENCODING, errors="replace", newline=None)


def load_with_report(
    stream: Stream, sink: Optional[TextIO] = None
) -> Tuple[List[Contact], List[Dict]]:
    """
    Load contacts and return them together with one report item per skipped row.

    Each skipped row is also written to `sink` (default: sys.stderr, resolved at
    call time) as "Skipping invalid row: <reason>" and logged at WARNING.
    OSError from the stream propagates and no partial result is returned.
    """
    if sink is None:
        sink = sys.stderr

    contacts: List[Contact] = []
    skipped: List[Dict] = []

    with _open_text(stream) as reader:
        for row_no, raw in enumerate(reader, start=1):
            if row_no <= HEADER_LINES:
                continue

            line = raw.rstrip("\r\n")
            if not line.strip(TRIM_CHARS):
                continue

            try:
                contacts.append(parse_line(line))
            except InvalidContactFormat as e:
                message = SKIP_MESSAGE_PREFIX + str(e)
                sink.write(message + "\n")
                logger.warning("%s (line %d)", message, row_no)
                skipped.append({
                    "row": row_no,
                    "column": None,
                    "issue": e.issue,
                    "value": line,
                    "action": "skipped",
                })

    logger.debug("Loaded %d contacts, skipped %d rows", len(contacts), len(skipped))
    return contacts, skipped


def load_from_csv(stream: Stream, sink: Optional[TextIO] = None) -> List[Contact]:
    """Load contacts from a CSV stream, in stream order. Invalid rows are reported and dropped."""
    contacts, _ = load_with_report(stream, sink=sink)
    return contacts


def decode_upload(raw: bytes) -> str:
    """
    Decode uploaded bytes whose encoding is not known up front.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - A UTF-8 BOM is dropped so it does not end up in the header line.
    - If decode fails, fall back to UTF-8, then UTF-8 with replacement characters.
    """
    match = from_bytes(raw).best()
    decode_used = match.encoding if match is not None else SOURCE_ENCODING

    if raw.startswith(b"\xef\xbb\xbf") and decode_used.lower().replace("-", "_") in ("utf_8", "utf8"):
        decode_used = "utf-8-sig"

    try:
        return raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        logger.info("Decoding as %s failed, falling back to %s", decode_used, SOURCE_ENCODING)

    try:
        return raw.decode(SOURCE_ENCODING)
    except UnicodeDecodeError:
        # Last resort: keep going deterministically with replacement characters
        return raw.decode(SOURCE_ENCODING, errors="replace")
