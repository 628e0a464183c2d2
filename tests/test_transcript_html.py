"""Tests for transcript HTML rendering."""

from note_formatter import format_transcript_for_display, set_config
from note_formatter.config import AppConfig, RenderConfig
from note_formatter.models import ProcessedTranscript, TranscriptMessage, TranscriptType
from note_formatter.transcripts.html_formatter import (
    assign_speaker_colors,
    format_sentiment_transcript_html,
    format_standard_transcript_html,
)

NO_CONTENT = "Không tìm thấy nội dung bản ghi."
SPEAKER_HEADER = '<div class="font-semibold text-[var(--color-primary)]">'


def test_sentiment_summary_panel(sentiment_transcript):
    """The summary renders as four tiles with localized labels."""
    html = format_transcript_for_display(sentiment_transcript)

    assert "Phân tích cảm xúc" in html
    assert '<div class="text-lg font-semibold">3</div>' in html
    assert '<div class="text-lg font-semibold text-green-600">1 (33.3%)</div>' in html
    assert '<div class="text-lg font-semibold text-red-600">1 (33.3%)</div>' in html
    assert "Tích cực" in html and "Trung lập" in html and "Tiêu cực" in html


def test_sentiment_bubbles(sentiment_transcript):
    """Bubbles are colored by sentiment and show the score."""
    html = format_transcript_for_display(sentiment_transcript)

    assert "bg-green-50 p-3 rounded-lg flex-grow relative border border-green-200" in html
    assert "bg-red-50 p-3 rounded-lg flex-grow relative border border-red-200" in html
    assert "bg-gray-50 p-3 rounded-lg flex-grow relative border border-gray-200" in html
    assert "positive (92.3%)" in html
    assert "negative (80.1%)" in html
    assert "neutral (0%)" in html
    assert "ALICE: </span>Great idea</p>" in html


def test_sentiment_groups_consecutive_turns():
    """One header per run of identical (speaker, timestamp)."""
    text = (
        "ALICE [5/1/2024 10:00 AM]\n🟢 One [POS:90.0%]\n"
        "ALICE [5/1/2024 10:00 AM]\n⚪ Two\n"
        "BOB [5/1/2024 10:01 AM]\n🔴 Three [NEG:75.0%]\n"
    )
    html = format_transcript_for_display(text)

    assert html.count(SPEAKER_HEADER) == 2
    assert html.count('<div class="my-3"></div>') == 1
    assert html.count('<div class="flex gap-2 mb-2">') == 3


def test_sentiment_without_messages():
    """An empty sentiment transcript shows the placeholder."""
    html = format_sentiment_transcript_html(ProcessedTranscript(type=TranscriptType.SENTIMENT))
    assert NO_CONTENT in html
    assert "Phân tích cảm xúc" not in html


def test_speaker_colors_cycle():
    """Palette entries are assigned in first-seen order and reused."""
    messages = [TranscriptMessage(speaker=f"S{i}") for i in range(3)]
    messages.append(TranscriptMessage(speaker="S0"))
    colors = assign_speaker_colors(messages, ["red", "blue"])

    assert colors == {"S0": "red", "S1": "blue", "S2": "red"}
    assert assign_speaker_colors(messages, []) == {}


def test_standard_transcript_html(standard_transcript):
    """Speaker changes are emphasized; repeated turns are muted."""
    html = format_transcript_for_display(standard_transcript)

    assert html.startswith('<div class="p-4"><div class="flex flex-col space-y-4">')
    assert html.count('<div class="flex mt-4 items-start">') == 3
    assert html.count('<div class="flex mt-1 items-start">') == 1
    assert '<div class="bg-blue-50 border-blue-200 p-3 rounded-lg border">Hello everyone</div>' in html
    assert '<div class="bg-green-50 border-green-200 p-3 rounded-lg border">Hi there</div>' in html
    assert '<div class="text-xs text-gray-400">5/1/2024 10:00 AM</div>' in html


def test_standard_without_messages():
    """No messages renders the placeholder only."""
    assert NO_CONTENT in format_transcript_for_display("")
    assert NO_CONTENT in format_standard_transcript_html(ProcessedTranscript())


def test_transcript_text_is_escaped():
    """Message text is escaped unless raw output is configured."""
    text = "SPEAKER_1 [5/1/2024 10:00 AM]\n<b>hi</b>"
    assert "&lt;b&gt;hi&lt;/b&gt;" in format_transcript_for_display(text)

    set_config(AppConfig(render=RenderConfig(escape_html=False)))
    from note_formatter.transcripts.processor import reset_transcript_processor
    reset_transcript_processor()
    assert "<b>hi</b>" in format_transcript_for_display(text)


def test_custom_labels():
    """Labels can be localized."""
    config = RenderConfig(labels={'no_content': "No transcript content."})
    assert "No transcript content." in format_standard_transcript_html(ProcessedTranscript(), config)
