"""
Meeting note parsing, extraction and rendering.
"""

from note_formatter.meeting_notes.line_classifier import classify_line
from note_formatter.meeting_notes.tree_builder import SectionTreeBuilder, build_section_tree
from note_formatter.meeting_notes.info_extractor import InfoExtractor
from note_formatter.meeting_notes.html_renderer import render_sections_html
from note_formatter.meeting_notes.markdown_renderer import render_sections_markdown
from note_formatter.meeting_notes.processor import (
    MeetingNoteProcessor,
    get_meeting_note_processor,
    reset_meeting_note_processor,
    parse_meeting_note,
    format_meeting_note_for_display,
    format_meeting_note_as_markdown,
    extract_meeting_info,
    extract_meeting_details,
)

__all__ = [
    "classify_line",
    "SectionTreeBuilder",
    "build_section_tree",
    "InfoExtractor",
    "render_sections_html",
    "render_sections_markdown",
    "MeetingNoteProcessor",
    "get_meeting_note_processor",
    "reset_meeting_note_processor",
    "parse_meeting_note",
    "format_meeting_note_for_display",
    "format_meeting_note_as_markdown",
    "extract_meeting_info",
    "extract_meeting_details",
]
