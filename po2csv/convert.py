# -*- coding: utf-8 -*-
"""
Assemble msgid/msgstr pairs from a PO file and write them out as CSV.

Workflow:
 1. Read the PO file line by line.
 2. PoEntryAssembler collects msgid/msgstr values, continuation lines included.
 3. Each time a new msgid starts (and once more at end of input) the pending
    entry is escaped and written as one CSV record.

Problems on a single line are logged as warnings and skipped. Only failing to
open or write the files stops the run.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional

from po2csv.common import (
    ConversionError, Entry, ParserState, escape_csv, extract_quoted
)
from config import (
    BUFFER_SIZE, CSV_HEADER, ESCAPED_FIELD_LIMIT, INPUT_ENCODING,
    INPUT_ERRORS, OUTPUT_ENCODING, OUTPUT_ERRORS
)

logger = logging.getLogger(__name__)


class PoEntryAssembler:
    """Line-driven state machine for one conversion run.

    feed() returns the previous Entry when a new msgid line completes it;
    finish() returns whatever is still pending at end of input.
    """

    def __init__(self, capacity: int = BUFFER_SIZE):
        self.capacity = capacity
        self.state = ParserState.NONE
        self.msgid = ""
        self.msgstr = ""

    def feed(self, line: str, line_num: int = 0) -> Optional[Entry]:
        line = line.rstrip("\r\n")

        # Blank lines and comments never touch the state
        if not line or line.startswith("#"):
            return None

        if line.startswith("msgid "):
            done = self._flush()
            self.state = ParserState.IN_MSGID
            self.msgid = self._value(line, line_num, "msgid")
            return done

        if line.startswith("msgstr "):
            self.state = ParserState.IN_MSGSTR
            self.msgstr = self._value(line, line_num, "msgstr")
            return None

        if line.startswith('"'):
            self._continue(line, line_num)
            return None

        logger.debug("Line %d: unsupported directive skipped", line_num)
        return None

    def finish(self) -> Optional[Entry]:
        self.state = ParserState.NONE
        return self._flush()

    def _flush(self) -> Optional[Entry]:
        # Buffers only reset once an entry is actually emitted
        if not self.msgid:
            return None
        entry = Entry(self.msgid, self.msgstr)
        self.msgid = ""
        self.msgstr = ""
        return entry

    def _value(self, line: str, line_num: int, keyword: str) -> str:
        content = extract_quoted(line)
        if content is None:
            # `msgstr ""` marks an untranslated entry, only warn on bad quoting
            if line.count('"') < 2:
                logger.warning("Line %d: no quoted string after %s",
                               line_num, keyword)
            else:
                logger.debug("Line %d: empty %s", line_num, keyword)
            return ""
        if len(content) > self.capacity:
            logger.warning("Line %d: %s truncated to %d characters",
                           line_num, keyword, self.capacity)
            content = content[:self.capacity]
        return content

    def _continue(self, line: str, line_num: int):
        if self.state is ParserState.NONE:
            logger.warning("Line %d: continuation line outside msgid/msgstr "
                           "ignored", line_num)
            return

        content = extract_quoted(line)
        if content is None:
            logger.warning("Line %d: failed to process continuation line",
                           line_num)
            return

        current = self.msgid if self.state is ParserState.IN_MSGID else self.msgstr
        if len(current) + len(content) > self.capacity:
            logger.warning("Line %d: continuation would exceed %d characters, "
                           "skipped", line_num, self.capacity)
            return

        if self.state is ParserState.IN_MSGID:
            self.msgid += content
        else:
            self.msgstr += content


def format_record(entry: Entry, limit: Optional[int] = ESCAPED_FIELD_LIMIT) -> str:
    return f"{escape_csv(entry.msgid, limit)},{escape_csv(entry.msgstr, limit)}\n"


def convert_lines(lines: Iterable[str],
                  capacity: int = BUFFER_SIZE,
                  limit: Optional[int] = ESCAPED_FIELD_LIMIT) -> Iterator[str]:
    """Yield the CSV header, then one record per completed entry."""
    yield ",".join(CSV_HEADER) + "\n"

    assembler = PoEntryAssembler(capacity)
    for line_num, line in enumerate(lines, 1):
        entry = assembler.feed(line, line_num)
        if entry is not None:
            yield format_record(entry, limit)

    entry = assembler.finish()
    if entry is not None:
        yield format_record(entry, limit)


def convert_file(input_path, output_path) -> int:
    """Convert one PO file to CSV. Returns the number of entries written."""
    input_path = Path(input_path)
    output_path = Path(output_path)

    try:
        # Only LF ends a line; a lone CR stays part of the quoted text
        in_fp = input_path.open("r", encoding=INPUT_ENCODING,
                                errors=INPUT_ERRORS, newline="\n")
    except OSError as exc:
        raise ConversionError(
            f"Could not open input file {input_path}: {exc.strerror or exc}"
        ) from exc

    with in_fp:
        try:
            out_fp = output_path.open("w", encoding=OUTPUT_ENCODING,
                                      errors=OUTPUT_ERRORS, newline="")
        except OSError as exc:
            raise ConversionError(
                f"Could not open output file {output_path}: {exc.strerror or exc}"
            ) from exc

        with out_fp:
            count = 0
            try:
                records = convert_lines(in_fp)
                out_fp.write(next(records))
                for record in records:
                    out_fp.write(record)
                    count += 1
            except OSError as exc:
                raise ConversionError(
                    f"Failed converting {input_path} to {output_path}: "
                    f"{exc.strerror or exc}"
                ) from exc

    logger.info("Wrote %d entries into %s", count, output_path)
    return count
