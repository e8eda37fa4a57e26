"""Text normalization for phrase matching.

Both stored phrases and incoming queries pass through :func:`normalize`, so
substring comparison ignores case, sentence punctuation and incidental
whitespace.
"""

from __future__ import annotations

import re

# Turkish dotted/dotless I: str.lower() alone maps "I" to "i" and "İ" to "i̇".
_TURKISH_UPPER_I = str.maketrans({"I": "ı", "İ": "i"})

# Only sentence punctuation is stripped; hyphens, parentheses etc. survive.
_PUNCTUATION_RE = re.compile(r"[.,!?;:\"']")
_WHITESPACE_RE = re.compile(r"\s+")
_NON_SLUG_RE = re.compile(r"[^a-zçğıöşü0-9\s]")


def normalize(text: str) -> str:
    """Return the canonical matching form of *text*.

    >>> normalize("Merhaba,   NASILSIN?")
    'merhaba nasılsın'
    """
    folded = text.translate(_TURKISH_UPPER_I).lower()
    stripped = _PUNCTUATION_RE.sub("", folded)
    return _WHITESPACE_RE.sub(" ", stripped).strip()


def slugify(text: str, max_words: int = 5, max_length: int = 50) -> str:
    """Build a filename-safe fragment from the first words of *text*."""
    cleaned = _NON_SLUG_RE.sub("", normalize(text))
    words = cleaned.split()[:max_words]
    return "-".join(words)[:max_length]
