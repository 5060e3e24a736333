"""Punctuation and case helpers shared by the correction passes.

A token is split into a leading run of non-alphabetic characters, an
alphabetic core, and a trailing run of non-alphabetic characters. The core
is what gets compared and replaced; the outer runs are carried over
untouched.
"""

from __future__ import annotations

import regex

# Unicode Alphabetic property: letters plus dependent vowel signs
ALPHABETIC_PATTERN = regex.compile(r"\p{Alphabetic}")


def is_alphabetic(char: str) -> bool:
    """Check whether a single character has the Unicode Alphabetic property.

    Unlike str.isalpha(), this accepts dependent vowel signs such as the
    Devanagari "े", so the final sign of "नमस्ते" is not stripped as
    punctuation.
    """
    return ALPHABETIC_PATTERN.match(char) is not None


def split_punctuation(token: str) -> tuple[str, str, str]:
    """Split a token into (prefix, core, suffix).

    The prefix and suffix are the non-alphabetic characters at either end.
    Characters between the first and last letter (apostrophes, hyphens)
    stay in the core.

    Args:
        token: Whitespace-delimited token

    Returns:
        Tuple of (prefix, core, suffix). A token with no letters at all
        comes back as (token, "", "").

    Example:
        split_punctuation("!hello?")  # ("!", "hello", "?")
    """
    start = 0
    end = len(token)

    while start < end and not is_alphabetic(token[start]):
        start += 1

    if start == end:
        return token, "", ""

    while end > start and not is_alphabetic(token[end - 1]):
        end -= 1

    return token[:start], token[start:end], token[end:]


def clean_word(token: str) -> str:
    """Return the lowercase alphabetic core of a token, used for matching only."""
    return split_punctuation(token)[1].lower()


def preserve_case_pattern(original: str, replacement: str) -> str:
    """Apply the case pattern of the original word to the replacement.

    - Every character of the original is uppercase: replacement is
      uppercased
    - First character of the original is uppercase: only the first
      character of the replacement is uppercased
    - Anything else: replacement is returned unchanged

    The original is the raw token, punctuation included. Punctuation is
    not uppercase, so "HELO!" only counts as capitalized and "(Helo)"
    does not count as capitalized at all.

    Args:
        original: Token whose casing should be kept
        replacement: Word to adjust

    Returns:
        Replacement with the original's case pattern
    """
    if not original or not replacement:
        return replacement

    if all(c.isupper() for c in original):
        return replacement.upper()
    elif original[0].isupper():
        return replacement[0].upper() + replacement[1:]
    else:
        return replacement
