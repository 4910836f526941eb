from __future__ import annotations

import re

PUNCTUATION = frozenset({".", "!", "?"})

# [^\W_] is a unicode letter or digit
_TOKEN_RE = re.compile(r"(?:[^\W_]|[-'])+|[.!?]")


def tokenize(text: str | None) -> list[str]:
    if not text:
        return []
    return _TOKEN_RE.findall(text.lower())


def is_punctuation(token: str) -> bool:
    return token in PUNCTUATION


def last_word(tokens: list[str]) -> str | None:
    for token in reversed(tokens):
        if not is_punctuation(token):
            return token
    return None
