"""
Dialogue transcript detection, parsing and rendering.
"""

from note_formatter.transcripts.detector import detect_transcript_type
from note_formatter.transcripts.sentiment_parser import parse_sentiment_transcript
from note_formatter.transcripts.standard_parser import parse_standard_transcript
from note_formatter.transcripts.html_formatter import (
    format_sentiment_transcript_html,
    format_standard_transcript_html,
)
from note_formatter.transcripts.processor import (
    TranscriptProcessor,
    get_transcript_processor,
    reset_transcript_processor,
    process_transcript,
    format_transcript_for_display,
    get_transcript_data,
)

__all__ = [
    "detect_transcript_type",
    "parse_sentiment_transcript",
    "parse_standard_transcript",
    "format_sentiment_transcript_html",
    "format_standard_transcript_html",
    "TranscriptProcessor",
    "get_transcript_processor",
    "reset_transcript_processor",
    "process_transcript",
    "format_transcript_for_display",
    "get_transcript_data",
]
