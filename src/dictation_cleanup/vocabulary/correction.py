"""Custom vocabulary correction for transcribed text.

Replaces words the recognizer likely mis-heard with user-supplied terms,
scoring each token against the vocabulary with a blend of normalized edit
distance and Soundex agreement.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from dictation_cleanup.logging import get_logger
from dictation_cleanup.text import preserve_case_pattern, split_punctuation
from dictation_cleanup.vocabulary.phonetic import normalized_edit_distance, sounds_alike

logger = get_logger(__name__)

# Cleaned words longer than this are never compared
# Lengths are counted in characters, not encoded bytes
MAX_WORD_LENGTH = 50

# Vocabulary entries whose length differs by more than this are skipped
MAX_LENGTH_DIFFERENCE = 5

# Multiplier applied to the edit distance when the Soundex codes agree
PHONETIC_MATCH_WEIGHT = 0.3


@dataclass
class Correction:
    """Represents a single substitution made by the corrector."""

    original: str
    corrected: str
    score: float  # 0.0 (identical) to 1.0
    phonetic: bool  # Soundex codes matched
    position: int  # Token index in the input

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "original": self.original,
            "corrected": self.corrected,
            "score": self.score,
            "phonetic": self.phonetic,
            "position": self.position,
        }


@dataclass
class CorrectionLog:
    """Log of all corrections made during a correction pass."""

    corrections: list[Correction] = field(default_factory=list)
    vocabulary_terms: int = 0
    threshold: float = 0.0

    def add(self, correction: Correction) -> None:
        """Add a correction to the log."""
        self.corrections.append(correction)

    def __len__(self) -> int:
        """Return number of corrections."""
        return len(self.corrections)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "vocabulary_terms": self.vocabulary_terms,
            "threshold": self.threshold,
            "correction_count": len(self.corrections),
            "corrections": [c.to_dict() for c in self.corrections],
        }


class VocabularyCorrector:
    """Applies custom vocabulary corrections to transcribed text.

    The lowercase form of every vocabulary entry is derived once on
    construction; the original spelling is what gets substituted.

    Example:
        corrector = VocabularyCorrector(["Kubernetes", "Postgres"], threshold=0.18)
        text, log = corrector.correct("deploy it on kubernetis")
    """

    def __init__(self, custom_words: Sequence[str], threshold: float):
        """Initialize corrector.

        Args:
            custom_words: Canonical spellings, in priority order
            threshold: Combined scores must be strictly below this to match
        """
        self.custom_words = list(custom_words)
        self.threshold = threshold
        self._custom_words_lower = [w.lower() for w in self.custom_words]

    def __len__(self) -> int:
        return len(self.custom_words)

    def correct(self, text: str) -> tuple[str, CorrectionLog]:
        """Apply corrections to text.

        Tokens are split on whitespace and rejoined with single spaces.

        Args:
            text: Text to correct

        Returns:
            Tuple of (corrected_text, correction_log)
        """
        log = CorrectionLog(
            vocabulary_terms=len(self.custom_words),
            threshold=self.threshold,
        )

        if not self.custom_words:
            return text, log

        corrected_words = []

        for position, word in enumerate(text.split()):
            prefix, core, suffix = split_punctuation(word)
            cleaned_word = core.lower()

            if not cleaned_word or len(cleaned_word) > MAX_WORD_LENGTH:
                corrected_words.append(word)
                continue

            best_match = self._find_best_match(cleaned_word)

            if best_match is None:
                corrected_words.append(word)
                continue

            index, score, phonetic = best_match
            replacement = preserve_case_pattern(word, self.custom_words[index])
            corrected = f"{prefix}{replacement}{suffix}"
            corrected_words.append(corrected)

            log.add(Correction(
                original=word,
                corrected=corrected,
                score=score,
                phonetic=phonetic,
                position=position,
            ))
            logger.debug(
                f'Corrected "{word}" -> "{corrected}"',
                extra={"score": round(score, 3), "phonetic": phonetic},
            )

        return " ".join(corrected_words), log

    def score(self, cleaned_word: str, candidate_lower: str) -> tuple[float, bool]:
        """Score a cleaned word against a lowercase vocabulary entry.

        Args:
            cleaned_word: Lowercase alphabetic core of a token
            candidate_lower: Lowercase vocabulary entry

        Returns:
            Tuple of (combined_score, phonetic_match)
        """
        distance = normalized_edit_distance(cleaned_word, candidate_lower)
        phonetic = sounds_alike(cleaned_word, candidate_lower)

        if phonetic:
            return distance * PHONETIC_MATCH_WEIGHT, True
        return distance, False

    def _find_best_match(self, cleaned_word: str) -> tuple[int, float, bool] | None:
        """Find the lowest-scoring vocabulary entry below the threshold.

        The first entry seen keeps the match on equal scores.

        Args:
            cleaned_word: Lowercase alphabetic core of a token

        Returns:
            Tuple of (vocabulary_index, score, phonetic_match) or None
        """
        best_match = None
        best_score = float("inf")

        for index, candidate in enumerate(self._custom_words_lower):
            if abs(len(cleaned_word) - len(candidate)) > MAX_LENGTH_DIFFERENCE:
                continue

            combined, phonetic = self.score(cleaned_word, candidate)

            if combined < self.threshold and combined < best_score:
                best_match = (index, combined, phonetic)
                best_score = combined

        return best_match


def apply_custom_words(text: str, custom_words: Sequence[str], threshold: float) -> str:
    """Correct words in text against a custom vocabulary.

    Args:
        text: The input text to correct
        custom_words: Custom words to match against
        threshold: Maximum combined score to accept
            (0.0 disables corrections, 1.0 allows broad matching)

    Returns:
        The corrected text, or the input unchanged if the vocabulary is empty
    """
    if not custom_words:
        return text

    corrected, _ = VocabularyCorrector(custom_words, threshold).correct(text)
    return corrected
