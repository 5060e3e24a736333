"""Transcription post-processing pipeline.

Runs vocabulary correction, then disfluency filtering, according to the
caller's settings. Either pass can still be invoked on its own.
"""

from __future__ import annotations

from dictation_cleanup.config import CleanupSettings
from dictation_cleanup.filtering.disfluency import filter_transcription_output
from dictation_cleanup.logging import get_logger
from dictation_cleanup.vocabulary.correction import apply_custom_words

logger = get_logger(__name__)


def post_process_transcription(text: str, settings: CleanupSettings) -> str:
    """Apply the configured cleanup passes to transcribed text.

    Args:
        text: Raw transcription text
        settings: Vocabulary, threshold and filter toggle

    Returns:
        Cleaned text
    """
    result = text

    if settings.custom_words:
        result = apply_custom_words(
            result,
            settings.custom_words,
            settings.word_correction_threshold,
        )

    if settings.filter_filler_words:
        result = filter_transcription_output(result)

    logger.info(
        "Post-processed transcription",
        extra={
            "input_chars": len(text),
            "output_chars": len(result),
            "custom_words": len(settings.custom_words),
            "filtered": settings.filter_filler_words,
        },
    )

    return result
