"""Filler word removal and stutter collapsing.

Cleans up artifacts of spontaneous speech in raw transcription text:
1. Filler words (uh, um, hmm, ...) are removed along with one trailing
   comma or period
2. Runs of three or more repeated one- or two-letter words collapse to a
   single instance ("wh wh wh why" -> "wh why")
3. Runs of whitespace are collapsed and the result is trimmed
"""

from __future__ import annotations

import re
import threading

from dictation_cleanup.logging import get_logger
from dictation_cleanup.text import is_alphabetic

logger = get_logger(__name__)

FILLER_WORDS: tuple[str, ...] = (
    "uh", "um", "uhm", "umm", "uhh", "uhhh", "ah", "eh", "hmm", "hm", "mmm", "mm", "mh", "ha",
    "ehh",
)

# Words up to this length are candidates for stutter collapsing
MAX_STUTTER_LENGTH = 2

# A run must repeat at least this many times to be collapsed.
# Two in a row ("no no") is usually intentional.
MIN_STUTTER_RUN = 3

MULTI_SPACE_PATTERN = re.compile(r"\s{2,}")

_filler_patterns: tuple[re.Pattern[str], ...] | None = None
_filler_patterns_lock = threading.Lock()


def get_filler_patterns() -> tuple[re.Pattern[str], ...]:
    """Get the compiled filler word patterns, building them on first use.

    Each pattern matches one filler as a whole word, case-insensitively,
    plus an optional trailing comma or period.

    Returns:
        One pattern per entry in FILLER_WORDS, in the same order
    """
    global _filler_patterns

    if _filler_patterns is None:
        with _filler_patterns_lock:
            if _filler_patterns is None:
                _filler_patterns = tuple(
                    re.compile(rf"\b{re.escape(word)}\b[,.]?", re.IGNORECASE)
                    for word in FILLER_WORDS
                )

    return _filler_patterns


def remove_filler_words(text: str) -> str:
    """Remove every filler word, one pattern at a time over the whole text."""
    removed = 0

    for pattern in get_filler_patterns():
        text, count = pattern.subn("", text)
        removed += count

    if removed:
        logger.debug(f"Removed {removed} filler words", extra={"removed": removed})

    return text


def _is_stutter_candidate(word_lower: str) -> bool:
    return len(word_lower) <= MAX_STUTTER_LENGTH and all(is_alphabetic(c) for c in word_lower)


def collapse_stutters(text: str) -> str:
    """Collapse repeated one- or two-letter words to a single instance.

    Repetitions are compared case-insensitively and the first occurrence
    is kept. Words containing non-letters are never collapsed.

    Args:
        text: Text to scan

    Returns:
        Text rejoined with single spaces, or the input unchanged when it
        contains no words

    Example:
        collapse_stutters("I I I I think")  # "I think"
    """
    words = text.split()
    if not words:
        return text

    result = []
    i = 0

    while i < len(words):
        word = words[i]
        word_lower = word.lower()
        count = 1

        if _is_stutter_candidate(word_lower):
            while i + count < len(words) and words[i + count].lower() == word_lower:
                count += 1

        result.append(word)

        if count >= MIN_STUTTER_RUN:
            logger.debug(
                f'Collapsed stutter "{word}" x{count}',
                extra={"repetitions": count},
            )
            i += count
        else:
            i += 1

    return " ".join(result)


def normalize_whitespace(text: str) -> str:
    """Collapse runs of two or more whitespace characters to one space and trim."""
    return MULTI_SPACE_PATTERN.sub(" ", text).strip()


def filter_transcription_output(text: str) -> str:
    """Remove filler words and stutter artifacts from transcription text.

    Args:
        text: The raw transcription text to filter

    Returns:
        The filtered text; empty if nothing but fillers and stutters remain
    """
    filtered = remove_filler_words(text)
    filtered = collapse_stutters(filtered)
    return normalize_whitespace(filtered)
