from __future__ import annotations

import time

import pytest

from otpextract import extract
from otpextract.pipeline.preprocess import preprocess


def test_urls_collapse_to_single_space():
    cleaned = preprocess("a https://x.y/123456 b")
    assert cleaned.text == "a   b"


def test_any_scheme_is_stripped():
    cleaned = preprocess("see ftp://files.example.com/9999 now")
    assert "9999" not in cleaned.text


def test_email_addresses_are_stripped():
    cleaned = preprocess("Contact user123456@example.com for help")
    assert cleaned.text == "Contact   for help"


def test_lower_copy_matches_offsets():
    cleaned = preprocess("İstanbul CODE: 482913")
    assert len(cleaned.lower) == len(cleaned.text)
    assert cleaned.lower.endswith("code: 482913")
    assert cleaned.lower[0] == "İ"


def test_window_is_clamped_to_text():
    cleaned = preprocess("abc 1234 xyz")
    assert cleaned.window(4, 8, 2) == "c 1234 x"
    assert cleaned.window(4, 8, 100) == "abc 1234 xyz"


def test_link_keeps_text_before_scheme():
    assert preprocess("(https://x.y/482913) code").text == "(  code"


def test_scheme_must_start_with_letter():
    assert preprocess("see 1+x://host/482913").text == "see 1+ "
    assert preprocess("see 123://host").text == "see 123://host"


def test_separator_needs_a_target():
    assert preprocess("ends with http://").text == "ends with http://"


def test_address_before_link_is_stripped_too():
    assert preprocess("user@host.com/https://x/482913").text == "  "


@pytest.mark.parametrize(
    "token, stripped",
    [
        ("a@b.c", True),
        ("@b.c", False),
        ("a@.c", False),
        ("a@b.", False),
        ("a@b@c.d", True),
        ("x@" * 20, False),
    ],
)
def test_email_shape(token, stripped):
    assert (preprocess(token).text == " ") is stripped


@pytest.mark.parametrize("blob", ["a" * 64000, "x@" * 2000, "x@" * 8000, "a:/" * 8000, "a." * 32000])
def test_long_tokens_stay_fast(blob):
    started = time.perf_counter()
    extract(f"Your code is 482913 {blob}")
    assert time.perf_counter() - started < 1.0
