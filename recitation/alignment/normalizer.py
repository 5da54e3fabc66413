"""Arabic text normalization for alignment."""
from __future__ import annotations

import re
from typing import Optional

# Harakat, superscript alif and the Quranic small signs / annotation marks
DIACRITICS_RE = re.compile(
    r"[\u0610-\u061A\u064B-\u065F\u0670\u06D6-\u06DC\u06DF-\u06E8\u06EA-\u06ED]"
)
TATWEEL_RE = re.compile(r"\u0640")

# Isolated hamza, alif with hamza above/below, alif maddah, alif wasla
ALIF_VARIANTS_RE = re.compile(r"[\u0621\u0623\u0625\u0622\u0671]")

# Alif maksura, Farsi (dotless) yaa
YAA_VARIANTS_RE = re.compile(r"[\u0649\u06CC]")

TAA_MARBUTA_RE = re.compile(r"\u0629")

# Anything outside the Arabic block, plus punctuation/ornaments inside it
NON_ARABIC_RE = re.compile(
    r"[^\u0600-\u06FF\s]|[\u0600-\u060F\u061B-\u061F\u066A-\u066D\u06D4\u06DD\u06DE\u06E9]"
)
WHITESPACE_RE = re.compile(r"\s+")

PLAIN_ALIF = "ا"
PLAIN_YAA = "ي"
HAA = "ه"


def normalize_arabic(text: Optional[str]) -> str:
    """Canonicalize Arabic text for comparison.

    Strips diacritics, Quranic marks and tatweel, unifies alif/hamza and yaa
    variants, maps taa marbuta to haa, drops anything that is not an Arabic
    letter or whitespace, and collapses whitespace.

    Normalizing an already normalized string returns it unchanged.

    Args:
        text: Raw (possibly mixed-script) text

    Returns:
        Normalized text, "" for empty input
    """
    if not text:
        return ""

    text = DIACRITICS_RE.sub("", text)
    text = TATWEEL_RE.sub("", text)
    text = ALIF_VARIANTS_RE.sub(PLAIN_ALIF, text)
    text = YAA_VARIANTS_RE.sub(PLAIN_YAA, text)
    text = TAA_MARBUTA_RE.sub(HAA, text)
    text = NON_ARABIC_RE.sub("", text)
    text = WHITESPACE_RE.sub(" ", text)
    return text.strip()
