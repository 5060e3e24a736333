"""Disfluency filtering for transcription output."""

from dictation_cleanup.filtering.disfluency import (
    FILLER_WORDS,
    collapse_stutters,
    filter_transcription_output,
    get_filler_patterns,
    normalize_whitespace,
    remove_filler_words,
)

__all__ = [
    "FILLER_WORDS",
    "collapse_stutters",
    "filter_transcription_output",
    "get_filler_patterns",
    "normalize_whitespace",
    "remove_filler_words",
]
