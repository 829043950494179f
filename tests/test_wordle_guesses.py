import io
import sys
from pathlib import Path

import pytest

# Add repository root to path
sys.path.append(str(Path(__file__).resolve().parents[1]))
import wordle_guesses


@pytest.mark.parametrize("raw,expected", [
    ("s.ick", "s.ick"),
    (".ance", ".ance"),
    ("cra.e", "cra.e"),
    ("____.", "____."),
    ("CrA.E", "cra.e"),
    ("_r._e", "_r._e"),
])
def test_parse_template_valid(raw, expected):
    assert wordle_guesses.parse_template(raw) == expected


@pytest.mark.parametrize("raw", ["", "s.ic", "s.icks", ".", "crane.", "a" * 20])
def test_parse_template_wrong_length(raw):
    with pytest.raises(wordle_guesses.TemplateLengthError) as excinfo:
        wordle_guesses.parse_template(raw)
    assert str(excinfo.value) == "template must be 5 characters long"


@pytest.mark.parametrize("raw", ["toooo", "s..ck", ".....", "s.ic1", "s.ic-", "s ick", "s.ic\n"])
def test_parse_template_bad_format(raw):
    with pytest.raises(wordle_guesses.TemplateFormatError) as excinfo:
        wordle_guesses.parse_template(raw)
    assert str(excinfo.value) == (
        "template must contain only letters, underscores, and a single period"
    )


def test_template_errors_share_base():
    assert issubclass(wordle_guesses.TemplateLengthError, wordle_guesses.ValidationError)
    assert issubclass(wordle_guesses.TemplateFormatError, wordle_guesses.ValidationError)
    assert issubclass(wordle_guesses.ValidationError, ValueError)


@pytest.mark.parametrize("template", ["s.ick", ".ance", "cra.e", "____.", "ab.__"])
def test_split_template_lengths_sum_to_four(template):
    prefix, suffix = wordle_guesses.split_template(template)
    assert len(prefix) + len(suffix) == 4
    assert prefix + "." + suffix == template


def test_split_template_edges():
    assert wordle_guesses.split_template(".ance") == ("", "ance")
    assert wordle_guesses.split_template("cran.") == ("cran", "")


def test_parse_letters_dedupes_and_lowercases():
    assert wordle_guesses.parse_letters("dbrtDB") == frozenset("bdrt")
    assert wordle_guesses.parse_letters("AZ") == frozenset("az")


def test_parse_letters_empty():
    assert wordle_guesses.parse_letters("") == frozenset()


def test_parse_letters_reports_first_bad_char_in_sorted_order():
    # '1' sorts before '?' and before any letter
    with pytest.raises(wordle_guesses.InvalidLetterError) as excinfo:
        wordle_guesses.parse_letters("ab?1")
    assert str(excinfo.value) == "invalid letter: '1'"
    assert excinfo.value.letter == "1"


@pytest.mark.parametrize("raw", ["a,b", "a b", "é"])
def test_parse_letters_rejects_non_letters(raw):
    with pytest.raises(wordle_guesses.InvalidLetterError):
        wordle_guesses.parse_letters(raw)


@pytest.mark.parametrize("raw,expected", [
    ("5", 5), ("1", 1), (" 12 ", 12), (3, 3), ("+5", 5),
    ("5.0", 5), ("1e1", 10), (4.0, 4),
])
def test_parse_line_width_valid(raw, expected):
    assert wordle_guesses.parse_line_width(raw) == expected


@pytest.mark.parametrize("raw", [
    "0", "-1", "2.5", "abc", "", 0, -3, True,
    "1_0", "0.0", "inf", "nan", "1e400", 2.5,
])
def test_parse_line_width_invalid(raw):
    with pytest.raises(wordle_guesses.InvalidLineWidthError) as excinfo:
        wordle_guesses.parse_line_width(raw)
    assert str(excinfo.value) == "num_guesses must be a positive integer"


def test_tested_alphabet_default():
    assert wordle_guesses.tested_alphabet() == list("abcdefghijklmnopqrstuvwxyz")


def test_tested_alphabet_include_is_sorted():
    assert wordle_guesses.tested_alphabet(include={"t", "d", "r", "b"}) == ["b", "d", "r", "t"]


def test_tested_alphabet_exclude():
    letters = wordle_guesses.tested_alphabet(exclude={"a", "z"})
    assert len(letters) == 24
    assert letters[0] == "b" and letters[-1] == "y"


def test_tested_alphabet_include_wins():
    assert wordle_guesses.tested_alphabet(include={"q"}, exclude={"q"}) == ["q"]


def test_capitalize_first():
    assert wordle_guesses.capitalize_first("stick") == "Stick"
    assert wordle_guesses.capitalize_first("_rate") == "_rate"
    assert wordle_guesses.capitalize_first("") == ""


def test_generate_guesses_keeps_blanks():
    guesses = wordle_guesses.generate_guesses("_r", "_e", ["a", "o"])
    assert guesses == ["_ra_e", "_ro_e"]


def test_generate_guesses_capitalizes_substituted_letter():
    assert wordle_guesses.generate_guesses("", "ance", ["b", "d"]) == ["Bance", "Dance"]


def test_format_rows():
    rows = list(wordle_guesses.format_rows(["A", "B", "C", "D", "E"], 2))
    assert rows == ["A\tB", "C\tD", "E"]
    assert list(wordle_guesses.format_rows([], 3)) == []


def test_write_guesses_partial_last_row():
    out = io.StringIO()
    count = wordle_guesses.write_guesses(["A", "B", "C"], 2, out)
    assert count == 3
    assert out.getvalue() == "A\tB\nC\n"


def test_write_guesses_exact_rows():
    out = io.StringIO()
    wordle_guesses.write_guesses(["A", "B", "C", "D"], 2, out)
    assert out.getvalue() == "A\tB\nC\tD\n"


def test_write_guesses_empty_writes_nothing():
    out = io.StringIO()
    assert wordle_guesses.write_guesses([], 5, out) == 0
    assert out.getvalue() == ""


def test_write_guesses_accepts_iterator():
    guesses = wordle_guesses.generate_guesses("s", "ick", wordle_guesses.tested_alphabet())
    out = io.StringIO()
    assert wordle_guesses.write_guesses(iter(guesses), 4, out) == 26
    lines = out.getvalue().splitlines()
    assert len(lines) == 7
    assert lines[0] == "Saick\tSbick\tScick\tSdick"
    assert lines[-1] == "Syick\tSzick"


def test_minimal_formatter():
    import logging

    formatter = wordle_guesses.MinimalFormatter()
    record_info = logging.LogRecord("name", logging.INFO, "path", 10, "message", None, None)
    assert formatter.format(record_info) == "message"

    record_error = logging.LogRecord("name", logging.ERROR, "path", 10, "error message", None, None)
    assert formatter.format(record_error) == "ERROR: error message"
