"""Strip links and addresses before any code matching happens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from otpextract.core.patterns import ASCII_LETTERS, SCHEME_CHARS, TOKEN_RE, ascii_lower


@dataclass(frozen=True, slots=True)
class CleanedText:
    """Message text with URLs and emails blanked out, plus its lowercase twin.

    Offsets are relative to ``text``, not to the original message: every
    removed URL or address collapses to a single space. ``lower`` always has
    the same length as ``text``.
    """

    text: str
    lower: str

    def __len__(self) -> int:
        return len(self.text)

    def window(self, start: int, end: int, radius: int) -> str:
        """Lowercase text within ``radius`` characters around ``[start, end)``."""
        return self.lower[max(0, start - radius) : min(len(self.lower), end + radius)]


def url_start(token: str) -> Optional[int]:
    """Index where a ``scheme://rest`` link begins inside ``token``, if any.

    The link runs to the end of the token. Each ``://`` is inspected once and
    the scheme is walked back only as far as the previous separator, so the
    scan stays linear in the token length.
    """
    search_from = 0
    while True:
        sep = token.find("://", search_from)
        if sep < 0 or sep + 3 >= len(token):
            return None
        run = sep
        while run > 0 and token[run - 1] in SCHEME_CHARS:
            run -= 1
        for pos in range(run, sep):
            if token[pos] in ASCII_LETTERS:
                return pos
        search_from = sep + 1


def looks_like_email(token: str) -> bool:
    """``local@domain.tld`` shape: an ``@`` past the first char, then an inner ``.``."""
    at = token.find("@", 1)
    return at >= 0 and token.find(".", at + 2, len(token) - 1) >= 0


def _strip_token(token: str) -> str:
    start = url_start(token)
    if start is None:
        return " " if looks_like_email(token) else token
    head = token[:start]
    if looks_like_email(head):
        head = " "
    return head + " "


def preprocess(text: str) -> CleanedText:
    cleaned = TOKEN_RE.sub(lambda match: _strip_token(match.group()), text)
    return CleanedText(text=cleaned, lower=ascii_lower(cleaned))
