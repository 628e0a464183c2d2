"""
Transcript processor: type detection, parsing and display formatting.
"""

from typing import Optional
from loguru import logger

from note_formatter.config import AppConfig, get_config
from note_formatter.models import ProcessedTranscript, TranscriptType
from note_formatter.transcripts.detector import detect_transcript_type
from note_formatter.transcripts.sentiment_parser import parse_sentiment_transcript
from note_formatter.transcripts.standard_parser import parse_standard_transcript
from note_formatter.transcripts.html_formatter import (
    format_sentiment_transcript_html,
    format_standard_transcript_html,
)


class TranscriptProcessor:
    """Process raw dialogue transcripts into structured and display forms."""

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Initialize the transcript processor.

        Args:
            config: Application configuration; the global one when omitted
        """
        self.config = config or get_config()

    def detect_type(self, transcript_text: Optional[str]) -> TranscriptType:
        return detect_transcript_type(transcript_text)

    def process(self, transcript_text: Optional[str]) -> ProcessedTranscript:
        """
        Process a raw transcript with the parser matching its format.

        Args:
            transcript_text: Raw transcript text

        Returns:
            ProcessedTranscript object
        """
        transcript_type = self.detect_type(transcript_text)

        if transcript_type == TranscriptType.SENTIMENT:
            processed = parse_sentiment_transcript(transcript_text)
        else:
            processed = parse_standard_transcript(transcript_text)

        logger.info(
            f"Processed {transcript_type.value} transcript: {len(processed.messages)} messages, "
            f"{len(processed.speakers())} speakers, summary={'yes' if processed.summary else 'no'}"
        )
        return processed

    def format_for_display(self, transcript_text: Optional[str]) -> str:
        """
        Format a raw transcript as HTML.

        Args:
            transcript_text: Raw transcript text

        Returns:
            HTML string
        """
        return self.render(self.process(transcript_text))

    def render(self, processed: ProcessedTranscript) -> str:
        """Render an already processed transcript as HTML."""
        if processed.type == TranscriptType.SENTIMENT:
            return format_sentiment_transcript_html(processed, self.config.render)
        return format_standard_transcript_html(processed, self.config.render)


# Global processor instance
_processor: Optional[TranscriptProcessor] = None


def get_transcript_processor() -> TranscriptProcessor:
    """Get the global transcript processor instance."""
    global _processor
    if _processor is None:
        _processor = TranscriptProcessor()
    return _processor


def reset_transcript_processor():
    """Reset the global transcript processor instance."""
    global _processor
    _processor = None


def process_transcript(transcript_text: Optional[str]) -> ProcessedTranscript:
    return get_transcript_processor().process(transcript_text)


def format_transcript_for_display(transcript_text: Optional[str]) -> str:
    return get_transcript_processor().format_for_display(transcript_text)


def get_transcript_data(transcript_text: Optional[str]) -> ProcessedTranscript:
    """Structured transcript data for UI components."""
    return process_transcript(transcript_text)
