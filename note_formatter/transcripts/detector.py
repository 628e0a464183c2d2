"""
Transcript format detection and the markers it relies on.
"""

from typing import Optional

from note_formatter.models import Sentiment, TranscriptType

SUMMARY_TITLE = "SENTIMENT ANALYSIS SUMMARY"

# Each marker also appears as UTF-8 bytes decoded as Latin-1/CP1252
POSITIVE_MARKERS = ("🟢", "ðŸŸ¢")
NEUTRAL_MARKERS = ("⚪", "âšª")
NEGATIVE_MARKERS = ("🔴", "ðŸ”´")
CHART_MARKERS = ("📊", "ðŸ“Š")
SEPARATOR_MARKERS = ("═══════", "â•â•â•â•â•â•â•")

SENTIMENT_MARKERS = {
    Sentiment.POSITIVE: POSITIVE_MARKERS,
    Sentiment.NEUTRAL: NEUTRAL_MARKERS,
    Sentiment.NEGATIVE: NEGATIVE_MARKERS,
}

SUMMARY_MARKERS = tuple(f"{chart} {SUMMARY_TITLE}" for chart in CHART_MARKERS)

_DETECTION_MARKERS = (SUMMARY_TITLE,) + NEUTRAL_MARKERS + NEGATIVE_MARKERS + POSITIVE_MARKERS


def detect_transcript_type(transcript_text: Optional[str]) -> TranscriptType:
    """
    Detect whether a transcript carries sentiment annotations.

    Args:
        transcript_text: Raw transcript text

    Returns:
        TranscriptType.SENTIMENT if any sentiment marker is present,
        TranscriptType.STANDARD otherwise (including empty input)
    """
    if not transcript_text:
        return TranscriptType.STANDARD

    if any(marker in transcript_text for marker in _DETECTION_MARKERS):
        return TranscriptType.SENTIMENT

    return TranscriptType.STANDARD
