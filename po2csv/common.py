# -*- coding: utf-8 -*-
"""Shared PO line and CSV field helpers plus the types used by convert.py."""

import logging
from enum import Enum
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)

# Characters that force a CSV field to be quoted
CSV_SPECIAL = (",", '"', "\r", "\n")


class ConversionError(Exception):
    """Input or output file could not be opened. Fatal for the whole run."""


class ParserState(Enum):
    NONE = 0
    IN_MSGID = 1
    IN_MSGSTR = 2


class Entry(NamedTuple):
    msgid: str = ""
    msgstr: str = ""


def extract_quoted(line: str) -> Optional[str]:
    """Return the text between the first and the last double quote of a line.

    Backslash sequences are kept as-is. Returns None when the line has fewer
    than two quotes or nothing between them.
    """
    start = line.find('"')
    if start == -1:
        return None
    start += 1
    end = line.rfind('"', start)
    if end == -1 or end == start:
        return None
    return line[start:end]


def escape_csv(value: str, limit: Optional[int] = None) -> str:
    """Escape one CSV field.

    Fields containing a comma, quote, CR or LF are wrapped in quotes with
    embedded quotes doubled; anything else comes back unchanged.

    If ``limit`` is set the result never exceeds that many characters. The
    content is cut to fit, the closing quote is kept and a doubled quote is
    never split in half.
    """
    needs_quotes = any(c in value for c in CSV_SPECIAL)
    body = value.replace('"', '""') if needs_quotes else value

    if limit is not None:
        room = max(limit - 2, 0) if needs_quotes else max(limit, 0)
        if len(body) > room:
            logger.warning("CSV field truncated from %d to %d characters",
                           len(body), room)
            body = body[:room]
            # an odd run of trailing quotes means we cut a "" pair
            trailing = len(body) - len(body.rstrip('"'))
            if needs_quotes and trailing % 2:
                body = body[:-1]

    return f'"{body}"' if needs_quotes else body
