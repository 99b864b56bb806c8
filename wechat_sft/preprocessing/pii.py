"""
Pattern-based PII redaction for chat messages.

Patterns are applied in a fixed order. National IDs go before phone numbers
because an 18-digit ID contains 11-digit runs that look like mobile numbers.

Digit patterns (ID, phone) only match whole digit runs: the character before
and after a match must not be a digit, so a long number such as an order or
bank card number is never partially redacted. An ID whose check character is
X already ends its digit run, so it is matched even when digits follow.

File: preprocessing/pii.py
Created: 2026-10-12
Last Modified: 2026-10-17
"""

import re
from typing import List, NamedTuple, Tuple


class PIIPattern(NamedTuple):
    name: str
    pattern: re.Pattern
    placeholder: str


PII_PATTERNS: Tuple[PIIPattern, ...] = (
    PIIPattern(
        "id_card",
        re.compile(
            r"(?<!\d)[1-9]\d{5}(?:18|19|20)\d{2}(?:0[1-9]|1[0-2])(?:0[1-9]|[12]\d|3[01])\d{3}(?:\d(?!\d)|[Xx])"
        ),
        "[ID_REMOVED]",
    ),
    PIIPattern("phone", re.compile(r"(?<!\d)1[3-9]\d{9}(?!\d)"), "[PHONE_REMOVED]"),
    PIIPattern("email", re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"), "[EMAIL_REMOVED]"),
    PIIPattern("url", re.compile(r"https?://[^\s<>\"{}|\\^\[\]`]+"), "[URL_REMOVED]"),
)


def clean_pii(text: str) -> str:
    """
    Replace ID numbers, mobile numbers, emails and URLs with placeholders.

    Idempotent: placeholders never match any pattern, so cleaning twice
    gives the same text as cleaning once.

    Examples:
        >>> clean_pii("call me at 13912345678 or a@b.com")
        'call me at [PHONE_REMOVED] or [EMAIL_REMOVED]'
    """
    if not text:
        return text

    for pii in PII_PATTERNS:
        text = pii.pattern.sub(pii.placeholder, text)
    return text


def find_pii(text: str) -> List[str]:
    """Names of the PII categories that clean_pii would redact in text."""
    if not text:
        return []

    found = []
    for pii in PII_PATTERNS:
        if pii.pattern.search(text):
            found.append(pii.name)
            text = pii.pattern.sub(pii.placeholder, text)
    return found
