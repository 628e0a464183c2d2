"""
Meeting note and transcript formatter - Main package.
"""

from note_formatter.models import *
from note_formatter.config import get_config, set_config, reset_config
from note_formatter.meeting_notes import (
    get_meeting_note_processor,
    reset_meeting_note_processor,
    parse_meeting_note,
    format_meeting_note_for_display,
    format_meeting_note_as_markdown,
    extract_meeting_info,
    extract_meeting_details,
)
from note_formatter.transcripts import (
    get_transcript_processor,
    reset_transcript_processor,
    detect_transcript_type,
    process_transcript,
    format_transcript_for_display,
    get_transcript_data,
)

__version__ = "1.0.0"
__all__ = [
    "get_config",
    "set_config",
    "reset_config",
    "get_meeting_note_processor",
    "reset_meeting_note_processor",
    "parse_meeting_note",
    "format_meeting_note_for_display",
    "format_meeting_note_as_markdown",
    "extract_meeting_info",
    "extract_meeting_details",
    "get_transcript_processor",
    "reset_transcript_processor",
    "detect_transcript_type",
    "process_transcript",
    "format_transcript_for_display",
    "get_transcript_data",
]
