from __future__ import annotations

from otpextract.core.models import CodeType
from otpextract.pipeline.candidates import (
    alphanumeric_matches,
    has_mixed_alpha_digit,
    is_plain_word,
    numeric_matches,
)


def test_numeric_lengths(clean):
    cleaned = clean("a 123 1234 12345 123456 1234567 12345678 123456789")
    assert [c.value for c in numeric_matches(cleaned)] == ["1234", "123456", "12345678"]


def test_numeric_offsets_and_type(clean):
    cleaned = clean("pin 4821")
    (candidate,) = list(numeric_matches(cleaned))
    assert (candidate.start, candidate.end) == (4, 8)
    assert candidate.code.type is CodeType.NUMERIC


def test_numeric_needs_word_boundary(clean):
    assert list(numeric_matches(clean("abc123456 1234x"))) == []


def test_alphanumeric_requires_letter_and_digit(clean):
    cleaned = clean("A1B2C3 123456 please x9y8z7")
    values = [c.value for c in alphanumeric_matches(cleaned)]
    assert values == ["A1B2C3", "x9y8z7"]
    assert all(c.code.type is CodeType.ALPHANUMERIC for c in alphanumeric_matches(cleaned))


def test_alphanumeric_is_exactly_six_chars(clean):
    assert list(alphanumeric_matches(clean("HELLOOO A1B2C A1B2C3D"))) == []


def test_case_is_preserved(clean):
    (candidate,) = list(alphanumeric_matches(clean("Code Ab12Cd")))
    assert candidate.value == "Ab12Cd"


def test_mixed_alpha_digit():
    assert has_mixed_alpha_digit("a1")
    assert not has_mixed_alpha_digit("123456")
    assert not has_mixed_alpha_digit("abcdef")
    assert not has_mixed_alpha_digit("")


def test_plain_word():
    assert is_plain_word("Please")
    assert not is_plain_word("Pl3ase")
    assert not is_plain_word("")
