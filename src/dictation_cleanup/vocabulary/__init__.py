"""Vocabulary module for transcript correction.

Provides phonetic matching and fuzzy correction of custom terms
that are commonly mis-transcribed by speech-to-text systems.
"""

from dictation_cleanup.vocabulary.correction import (
    Correction,
    CorrectionLog,
    VocabularyCorrector,
    apply_custom_words,
)
from dictation_cleanup.vocabulary.phonetic import (
    levenshtein_distance,
    normalized_edit_distance,
    soundex,
    sounds_alike,
)

__all__ = [
    "Correction",
    "CorrectionLog",
    "VocabularyCorrector",
    "apply_custom_words",
    "levenshtein_distance",
    "normalized_edit_distance",
    "soundex",
    "sounds_alike",
]
