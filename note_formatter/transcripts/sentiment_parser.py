"""
Parser for sentiment-annotated transcripts.

Expected layout::

    📊 SENTIMENT ANALYSIS SUMMARY
    Total paragraphs: 10
    🟢 Positive: 5 (50.0%)
    ⚪ Neutral: 3 (30.0%)
    🔴 Negative: 2 (20.0%)
    ══════════
    SPEAKER_1 [5/1/2024 10:00 AM]
    🟢 Great idea [POS:92.3%]
"""

import re
from typing import List, Optional, Tuple
from loguru import logger

from note_formatter.models import (
    ProcessedTranscript,
    Sentiment,
    TranscriptMessage,
    TranscriptSummary,
    TranscriptType,
)
from note_formatter.transcripts.detector import (
    SENTIMENT_MARKERS,
    SEPARATOR_MARKERS,
    SUMMARY_MARKERS,
)
from note_formatter.transcripts.standard_parser import match_speaker_header, transcript_lines

SCORE_TAG_RE = re.compile(r'\[(POS|NEU|NEG):(\d+(?:\.\d+)?)%\]$', re.IGNORECASE)
TAG_SENTIMENTS = {
    'POS': Sentiment.POSITIVE,
    'NEU': Sentiment.NEUTRAL,
    'NEG': Sentiment.NEGATIVE,
}

TOTAL_RE = re.compile(r'Total paragraphs: (\d+)')
POSITIVE_RE = re.compile(r'Positive: (\d+) \((\d+\.\d+)%\)')
NEUTRAL_RE = re.compile(r'Neutral: (\d+) \((\d+\.\d+)%\)')
NEGATIVE_RE = re.compile(r'Negative: (\d+) \((\d+\.\d+)%\)')

# Separators at least this long belong to the summary banner
SUMMARY_END_MAX_LENGTH = 30

VARIATION_SELECTOR = '\ufe0f'


def parse_sentiment_line(line: str) -> Tuple[Sentiment, str, str]:
    """
    Split a message line into sentiment, score and text.

    A leading emoji marker sets the sentiment; a trailing
    ``[POS|NEU|NEG:NN.N%]`` tag takes precedence and supplies the score.

    Args:
        line: Message line following a speaker header

    Returns:
        Tuple of (sentiment, score, text); neutral with score "0" by default
    """
    sentiment = Sentiment.NEUTRAL
    score = "0"
    text = line.strip()

    for label, markers in SENTIMENT_MARKERS.items():
        marker = next((m for m in markers if text.startswith(m)), None)
        if marker:
            sentiment = label
            text = text[len(marker):].lstrip(VARIATION_SELECTOR).strip()
            break

    tag = SCORE_TAG_RE.search(text)
    if tag:
        sentiment = TAG_SENTIMENTS[tag.group(1).upper()]
        score = tag.group(2)
        text = text[:tag.start()].strip()

    return sentiment, score, text


def parse_summary(summary_lines: List[str]) -> Optional[TranscriptSummary]:
    """
    Parse the buffered summary block.

    Returns:
        TranscriptSummary if every count is present, otherwise None
    """
    if not summary_lines:
        return None

    joined = ' '.join(summary_lines)
    total = TOTAL_RE.search(joined)
    positive = POSITIVE_RE.search(joined)
    neutral = NEUTRAL_RE.search(joined)
    negative = NEGATIVE_RE.search(joined)

    if not (total and positive and neutral and negative):
        logger.warning("Sentiment summary block is incomplete; ignoring it")
        return None

    return TranscriptSummary(
        total_paragraphs=int(total.group(1)),
        positive=int(positive.group(1)),
        neutral=int(neutral.group(1)),
        negative=int(negative.group(1)),
        positive_percentage=positive.group(2),
        neutral_percentage=neutral.group(2),
        negative_percentage=negative.group(2),
    )


def _is_separator(line: str) -> bool:
    return line.startswith(SEPARATOR_MARKERS)


def parse_sentiment_transcript(transcript_text: Optional[str]) -> ProcessedTranscript:
    """
    Parse a sentiment-annotated transcript.

    Args:
        transcript_text: Raw transcript text

    Returns:
        ProcessedTranscript of type SENTIMENT with optional summary
    """
    lines = transcript_lines(transcript_text)
    messages: List[TranscriptMessage] = []
    summary_lines: List[str] = []
    in_summary = False

    i = 0
    while i < len(lines):
        line = lines[i]
        i += 1

        if line.startswith(SUMMARY_MARKERS):
            in_summary = True
            summary_lines.append(line)
            continue

        if in_summary:
            header = match_speaker_header(line)
            # A timestamped turn header always ends the summary
            if header is None or not header[1]:
                summary_lines.append(line)
                if _is_separator(line) and len(line) < SUMMARY_END_MAX_LENGTH:
                    in_summary = False
                continue
            logger.debug("Summary block ended by a speaker header")
            in_summary = False

        if _is_separator(line):
            continue

        header = match_speaker_header(line)
        if header is None:
            continue

        speaker, timestamp = header
        body = ""
        if i < len(lines):
            body = lines[i]
            i += 1

        sentiment, score, text = parse_sentiment_line(body)
        messages.append(TranscriptMessage(
            speaker=speaker,
            timestamp=timestamp,
            text=text,
            sentiment=sentiment,
            sentiment_score=score,
        ))

    return ProcessedTranscript(
        type=TranscriptType.SENTIMENT,
        messages=messages,
        summary=parse_summary(summary_lines),
    )
