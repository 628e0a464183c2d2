"""Tests for meeting note HTML and Markdown rendering."""

from note_formatter import (
    format_meeting_note_as_markdown,
    format_meeting_note_for_display,
    parse_meeting_note,
    set_config,
)
from note_formatter.config import AppConfig, RenderConfig
from note_formatter.meeting_notes.html_renderer import render_sections_html


def test_empty_note_renders_empty_string():
    """No input, no HTML."""
    assert format_meeting_note_for_display("") == ""
    assert format_meeting_note_for_display(None) == ""
    assert render_sections_html([]) == ""


def test_section_headings_by_depth(meeting_note):
    """Depth decides wrapper and heading markup."""
    html = format_meeting_note_for_display(meeting_note)

    assert '<div class="meeting-section mb-6">' in html
    assert '<h2 class="text-xl font-bold text-[var(--color-primary)] mb-3">BIÊN BẢN CUỘC HỌP</h2>' in html
    assert '<div class="meeting-subsection mb-4 mt-4">' in html
    assert '<h3 class="text-lg font-semibold text-[var(--color-secondary)] mb-2">A. THÔNG TIN CHUNG</h3>' in html
    assert '<div class="meeting-subsubsection mb-3 mt-2 pl-4 border-l-2 border-gray-200">' in html
    assert '<h4 class="text-md font-medium mb-2">1. Date</h4>' in html
    assert '<p class="mb-2 text-gray-800">May 5 2024</p>' in html


def test_lists_are_nested(meeting_note):
    """Items, nested items and sub-bullets each get their own list."""
    html = format_meeting_note_for_display(meeting_note)

    assert '<ul class="list-disc pl-5 space-y-1">' in html
    assert '<li class="text-gray-800 font-medium">Adopt the new CI pipeline</li>' in html
    assert '<ul class="list-[circle] pl-5 mt-1 space-y-1">' in html
    assert '<li class="text-gray-700">Include rollback steps' in html
    assert '<ul class="list-[square] pl-5 mt-1 space-y-1"><li class="text-gray-600">Database snapshots</li></ul>' in html


def test_direct_subitems_are_rendered():
    """'+' bullets under a top-level item render as a square list."""
    html = format_meeting_note_for_display("## S\n- Parent\n+ child")
    assert '<li class="text-gray-700">child</li>' in html


def test_markup_is_balanced(meeting_note):
    """Every opened element is closed."""
    html = format_meeting_note_for_display(meeting_note)
    assert html.count("<div") == html.count("</div>")
    assert html.count("<ul") == html.count("</ul>")
    assert html.count("<li") == html.count("</li>")


def test_source_text_is_escaped_by_default():
    """Source text cannot inject markup unless raw output is requested."""
    text = "## <script>alert(1)</script>\nTom & Jerry"
    html = format_meeting_note_for_display(text)

    assert "<script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
    assert "Tom &amp; Jerry" in html


def test_raw_output_opt_in():
    """escape_html=False interpolates text verbatim."""
    set_config(AppConfig(render=RenderConfig(escape_html=False)))
    html = format_meeting_note_for_display("## <b>Bold</b>\n- <i>item</i>")

    assert "<b>Bold</b>" in html
    assert "<i>item</i>" in html


def test_markdown_reparses_to_same_tree(meeting_note):
    """Normalized Markdown parses back into an identical tree."""
    markdown = format_meeting_note_as_markdown(meeting_note)

    assert markdown.startswith("## BIÊN BẢN CUỘC HỌP\n")
    assert "      - Include rollback steps" in markdown
    assert "sẵn sàng" not in markdown
    assert parse_meeting_note(markdown) == parse_meeting_note(meeting_note)


def test_markdown_of_empty_note():
    assert format_meeting_note_as_markdown("") == ""


def test_markdown_keeps_levels_without_heading1():
    """A top-level H2 is written back with its own marker."""
    text = "### Lone\ntext\n#### Child\n- item"
    markdown = format_meeting_note_as_markdown(text)

    assert markdown.startswith("### Lone\n")
    assert "#### Child" in markdown
    reparsed = parse_meeting_note(markdown)
    assert reparsed == parse_meeting_note(text)
    assert reparsed[0].level == 2


def test_markdown_keeps_orphan_wrappers():
    """'Additional Details' wrappers round-trip as level-2 headings."""
    text = "## Top\n#### Deep\nx\n#### Deeper"
    markdown = format_meeting_note_as_markdown(text)

    assert markdown.count("### Additional Details") == 2
    assert parse_meeting_note(markdown) == parse_meeting_note(text)
