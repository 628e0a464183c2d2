"""
Parser for plain speaker-turn transcripts.
"""

import re
from typing import List, Optional, Tuple
from loguru import logger

from note_formatter.models import ProcessedTranscript, TranscriptMessage, TranscriptType
from note_formatter.utils.text_normalizer import split_lines

# SPEAKER_1 [5/1/2024 10:00 AM]
SPEAKER_HEADER_RE = re.compile(r'^(\w+)(?:\s+\[([\d/]+\s+[\d:]+\s+[AP]M)\])?', re.IGNORECASE)


def match_speaker_header(line: str) -> Optional[Tuple[str, str]]:
    """Return ``(speaker, timestamp)`` if the line is a speaker header."""
    match = SPEAKER_HEADER_RE.match(line)
    if not match:
        return None
    return match.group(1), match.group(2) or ""


def transcript_lines(transcript_text: Optional[str]) -> List[str]:
    """Non-blank, trimmed transcript lines."""
    return [line.strip() for line in split_lines(transcript_text)]


def parse_standard_transcript(transcript_text: Optional[str]) -> ProcessedTranscript:
    """
    Parse a transcript of speaker headers each followed by one message line.

    Args:
        transcript_text: Raw transcript text

    Returns:
        ProcessedTranscript of type STANDARD
    """
    lines = transcript_lines(transcript_text)
    messages: List[TranscriptMessage] = []

    i = 0
    while i < len(lines):
        header = match_speaker_header(lines[i])
        if header is None:
            logger.debug(f"Skipping non-header line: {lines[i][:60]}")
            i += 1
            continue

        speaker, timestamp = header
        text = lines[i + 1] if i + 1 < len(lines) else ""
        messages.append(TranscriptMessage(speaker=speaker, timestamp=timestamp, text=text))
        i += 2

    return ProcessedTranscript(type=TranscriptType.STANDARD, messages=messages)
