"""
Meeting note processor: parsing, extraction and display formatting.
"""

from typing import List, Optional
from loguru import logger

from note_formatter.config import AppConfig, get_config
from note_formatter.models import MeetingDetails, MeetingInfo, Section
from note_formatter.utils.text_normalizer import split_lines
from note_formatter.meeting_notes.tree_builder import build_section_tree
from note_formatter.meeting_notes.info_extractor import InfoExtractor
from note_formatter.meeting_notes.html_renderer import render_sections_html
from note_formatter.meeting_notes.markdown_renderer import render_sections_markdown


class MeetingNoteProcessor:
    """Process AI-generated meeting notes into structured and display forms."""

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Initialize the meeting note processor.

        Args:
            config: Application configuration; the global one when omitted
        """
        self.config = config or get_config()
        self.extractor = InfoExtractor(self.config.extraction)

    def parse(self, note_text: Optional[str]) -> List[Section]:
        """
        Parse a raw meeting note into a section forest.

        Args:
            note_text: Raw note text, with literal or escaped newlines

        Returns:
            Top-level sections, empty for empty input
        """
        lines = split_lines(note_text)
        if not lines:
            return []

        sections = build_section_tree(lines, self.config.parser)
        logger.debug(f"Parsed meeting note: {len(lines)} lines, {len(sections)} top-level sections")
        return sections

    def format_for_display(self, note_text: Optional[str]) -> str:
        """Render a raw meeting note as HTML."""
        if not note_text:
            return ""
        return render_sections_html(self.parse(note_text), self.config.render)

    def format_as_markdown(self, note_text: Optional[str]) -> str:
        """Render a raw meeting note as normalized Markdown."""
        if not note_text:
            return ""
        return render_sections_markdown(self.parse(note_text))

    def extract_info(self, note_text: Optional[str]) -> MeetingInfo:
        """Extract the flat meeting summary fields."""
        return self.extractor.extract(self.parse(note_text))

    def extract_details(self, note_text: Optional[str]) -> MeetingDetails:
        """Extract list-valued meeting details."""
        return self.extractor.extract_details(self.parse(note_text))


# Global processor instance
_processor: Optional[MeetingNoteProcessor] = None


def get_meeting_note_processor() -> MeetingNoteProcessor:
    """Get the global meeting note processor instance."""
    global _processor
    if _processor is None:
        _processor = MeetingNoteProcessor()
    return _processor


def reset_meeting_note_processor():
    """Reset the global meeting note processor instance."""
    global _processor
    _processor = None


def parse_meeting_note(note_text: Optional[str]) -> List[Section]:
    return get_meeting_note_processor().parse(note_text)


def format_meeting_note_for_display(note_text: Optional[str]) -> str:
    return get_meeting_note_processor().format_for_display(note_text)


def format_meeting_note_as_markdown(note_text: Optional[str]) -> str:
    return get_meeting_note_processor().format_as_markdown(note_text)


def extract_meeting_info(note_text: Optional[str]) -> MeetingInfo:
    return get_meeting_note_processor().extract_info(note_text)


def extract_meeting_details(note_text: Optional[str]) -> MeetingDetails:
    return get_meeting_note_processor().extract_details(note_text)
