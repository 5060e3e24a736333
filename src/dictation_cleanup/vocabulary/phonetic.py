"""Phonetic encoding and edit distance for fuzzy word matching.

Implements American Soundex for coarse pronunciation matching, plus
Levenshtein distance and its length-normalized form.
"""

from __future__ import annotations

# Letters that sound similar share a digit.
# A, E, I, O, U, Y are vowels; H and W are ignored entirely.
SOUNDEX_CODES = {
    "B": "1", "F": "1", "P": "1", "V": "1",
    "C": "2", "G": "2", "J": "2", "K": "2", "Q": "2", "S": "2", "X": "2", "Z": "2",
    "D": "3", "T": "3",
    "L": "4",
    "M": "5", "N": "5",
    "R": "6",
}

SOUNDEX_SEPARATORS = frozenset("AEIOUY")


def soundex(word: str) -> str:
    """Generate the Soundex code for a word.

    Soundex keeps the first letter and encodes the following consonants
    by sound. Adjacent letters with the same digit collapse into one,
    including across H and W; a vowel between them keeps both.

    Args:
        word: Word to encode

    Returns:
        Four-character code (e.g., "R163" for "Robert"), or an empty
        string if the word contains no ASCII letters
    """
    letters = [c for c in word.upper() if "A" <= c <= "Z"]

    if not letters:
        return ""

    result = letters[0]
    prev_code = SOUNDEX_CODES.get(letters[0], "")

    for char in letters[1:]:
        code = SOUNDEX_CODES.get(char)
        if code:
            if code != prev_code:
                result += code
            prev_code = code
        elif char in SOUNDEX_SEPARATORS:
            prev_code = ""

        if len(result) == 4:
            break

    return (result + "000")[:4]


def sounds_alike(word1: str, word2: str) -> bool:
    """Check whether two words share the same Soundex code.

    Words without any encodable letters never match.
    """
    code1 = soundex(word1)
    if not code1:
        return False
    return code1 == soundex(word2)


def levenshtein_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein (edit) distance between two strings.

    The Levenshtein distance is the minimum number of single-character
    edits (insertions, deletions, substitutions) required to change
    one string into the other.

    Args:
        s1: First string
        s2: Second string

    Returns:
        Number of edits needed
    """
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    # Use two rows for space optimization
    previous_row = list(range(len(s2) + 1))
    current_row = [0] * (len(s2) + 1)

    for i, c1 in enumerate(s1):
        current_row[0] = i + 1

        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)

            current_row[j + 1] = min(insertions, deletions, substitutions)

        previous_row, current_row = current_row, previous_row

    return previous_row[len(s2)]


def normalized_edit_distance(s1: str, s2: str) -> float:
    """Edit distance divided by the longer string's length.

    Args:
        s1: First string
        s2: Second string

    Returns:
        Score from 0.0 (identical) to 1.0 (completely different).
        Two empty strings score 1.0 so that they never count as a match.
    """
    max_len = max(len(s1), len(s2))
    if max_len == 0:
        return 1.0
    return levenshtein_distance(s1, s2) / max_len
