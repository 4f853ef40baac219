# -*- coding: utf-8 -*-
"""Tunable constants for the PO to CSV converter.

These values are read at import time by the modules under po2csv/. Edit them
here rather than passing flags on the command line.
"""


# --- Accumulation buffers ---------------------------------------------------

# Maximum number of characters held for a single msgid or msgstr value.
# Continuation lines that would push a value past this size are rejected with
# a warning; over-long msgid/msgstr lines are truncated with a warning.
BUFFER_SIZE = 4096

# Hard cap on the length of one escaped CSV field, quotes included. None keeps
# every field whole. Set an int to truncate (a warning is logged per field).
ESCAPED_FIELD_LIMIT = None


# --- Input & output ---------------------------------------------------------

# First row written to every CSV file.
CSV_HEADER = ("msgid", "msgstr")

# PO files are read as UTF-8. Bytes that are not valid UTF-8 are carried
# through to the CSV unchanged instead of aborting the run.
INPUT_ENCODING = "utf-8"
INPUT_ERRORS = "surrogateescape"

OUTPUT_ENCODING = "utf-8"
OUTPUT_ERRORS = "surrogateescape"


# --- Logging ----------------------------------------------------------------

# Per-line warnings go to stderr through the logging module.
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s: %(message)s"
