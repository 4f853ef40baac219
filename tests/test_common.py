# -*- coding: utf-8 -*-
import csv
import io
import logging

import pytest

from po2csv.common import Entry, ParserState, escape_csv, extract_quoted


def read_field(escaped):
    return next(csv.reader(io.StringIO(escaped + "\n")))[0]


@pytest.mark.parametrize("line, expected", [
    ('msgid "Hello"', "Hello"),
    ('msgstr "Bonjour"', "Bonjour"),
    ('"world"', "world"),
    ('msgstr "He said "hi""', 'He said "hi"'),
    ('msgid "  padded  "   ', "  padded  "),
    ('"a\\nb"', "a\\nb"),
])
def test_extract_quoted_returns_span_between_first_and_last_quote(line, expected):
    assert extract_quoted(line) == expected


@pytest.mark.parametrize("line", [
    "msgid Hello",
    'msgid "Hello',
    'Hello"',
    'msgid ""',
    '""',
    "",
])
def test_extract_quoted_fails_without_content(line):
    assert extract_quoted(line) is None


@pytest.mark.parametrize("value", ["Hello", "", "plain text", "tab\tseparated", "Grüße"])
def test_escape_csv_leaves_plain_values_alone(value):
    assert escape_csv(value) == value


@pytest.mark.parametrize("value, expected", [
    ("Hello, world", '"Hello, world"'),
    ('He said "hi"', '"He said ""hi"""'),
    ("two\nlines", '"two\nlines"'),
    ("carriage\rreturn", '"carriage\rreturn"'),
    ('"', '""""'),
])
def test_escape_csv_quotes_special_values(value, expected):
    assert escape_csv(value) == expected


@pytest.mark.parametrize("value", [
    "Hello, world",
    'He said "hi", twice',
    'multi\nline "quoted", text',
    '""',
])
def test_escape_csv_output_is_read_back_by_csv_module(value):
    assert read_field(escape_csv(value)) == value


def test_escape_csv_truncates_plain_value_to_limit(caplog):
    with caplog.at_level(logging.WARNING):
        assert escape_csv("abcdef", limit=4) == "abcd"
    assert "truncated" in caplog.text


def test_escape_csv_limit_keeps_closing_quote():
    result = escape_csv("abc,def", limit=5)
    assert result == '"abc"'
    assert len(result) == 5


def test_escape_csv_limit_never_splits_doubled_quote():
    # body is a""bc, and only two characters fit inside the quotes
    assert escape_csv('a"bc,', limit=4) == '"a"'
    assert escape_csv('ab"cd,', limit=6) == '"ab"""'


def test_escape_csv_within_limit_is_unchanged(caplog):
    with caplog.at_level(logging.WARNING):
        assert escape_csv("a,b", limit=10) == '"a,b"'
    assert caplog.text == ""


def test_entry_defaults_to_empty_strings():
    assert Entry() == ("", "")
    assert Entry("id").msgstr == ""


def test_parser_states_are_distinct():
    assert len({ParserState.NONE, ParserState.IN_MSGID, ParserState.IN_MSGSTR}) == 3
