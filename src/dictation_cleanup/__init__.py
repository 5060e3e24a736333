"""Dictation Cleanup - post-processing for speech-to-text output.

Two independent passes over raw transcription text:
1. Custom vocabulary correction: replace likely mis-transcribed words with
   user-supplied terms using lexical and phonetic similarity
2. Disfluency filtering: strip filler words and collapse stutters
"""

__version__ = "0.1.0"

from dictation_cleanup.filtering.disfluency import filter_transcription_output
from dictation_cleanup.vocabulary.correction import apply_custom_words

__all__ = [
    "__version__",
    "apply_custom_words",
    "filter_transcription_output",
]
