from __future__ import annotations

import pytest

from otpextract.core.models import Code, CodeType
from otpextract.core.rules import ScoringRules
from otpextract.services import OtpReader

MESSAGE = "Your PIN is 1234 and your verification code is 567890. Backup: A1B2C3"


def test_parse_returns_best_code():
    assert OtpReader().parse(MESSAGE) == "567890"


def test_parse_without_code():
    reader = OtpReader()
    assert reader.parse("Thanks for signing up!") is None
    assert reader.parse(None) is None


def test_top_uses_default_limit():
    reader = OtpReader(default_limit=2)
    assert [c.value for c in reader.top(MESSAGE)] == ["567890", "1234"]


def test_top_with_explicit_limit():
    codes = OtpReader().top(MESSAGE, limit=5)
    assert codes[-1] == Code(value="A1B2C3", type=CodeType.ALPHANUMERIC)
    assert OtpReader().top(MESSAGE, limit=0) == []


def test_custom_rules_are_used():
    reader = OtpReader(ScoringRules(four_digit_bonus=100))
    assert reader.parse(MESSAGE) == "1234"


def test_invalid_default_limit():
    with pytest.raises(ValueError):
        OtpReader(default_limit=0)
