from __future__ import annotations

import pytest

from otpextract.pipeline.preprocess import CleanedText, preprocess


@pytest.fixture
def clean():
    def _clean(text: str) -> CleanedText:
        return preprocess(text)

    return _clean


def find_span(cleaned: CleanedText, value: str) -> tuple[int, int]:
    start = cleaned.text.index(value)
    return start, start + len(value)


@pytest.fixture
def span():
    return find_span
