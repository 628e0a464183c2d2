"""
Data models for meeting notes and dialogue transcripts.
"""

from typing import List, Optional
from enum import Enum
from pydantic import BaseModel, Field


class LineKind(str, Enum):
    """Kind of a single meeting-note line."""
    HEADING1 = "heading1"
    HEADING2 = "heading2"
    HEADING3 = "heading3"
    LIST_ITEM = "list_item"
    NESTED_LIST_ITEM = "nested_list_item"
    SUB_BULLET = "sub_bullet"
    PLAIN_CONTENT = "plain_content"
    SKIP = "skip"
    IGNORED = "ignored"


class ClassifiedLine(BaseModel):
    """A line of a meeting note together with its classification."""
    kind: LineKind
    text: str = ""
    indent: int = 0
    raw: str = ""


class ListItem(BaseModel):
    """A bullet in a meeting note section."""
    text: str
    level: int = 1
    # Leaf strings from "+ " lines
    subitems: List[str] = Field(default_factory=list)
    # Further-indented "- " / "* " lines
    nested_items: List['ListItem'] = Field(default_factory=list)


class Section(BaseModel):
    """A heading and everything that belongs to it."""
    title: str
    level: int = 1
    content: Optional[str] = None
    subsections: List['Section'] = Field(default_factory=list)
    items: List[ListItem] = Field(default_factory=list)

    def append_content(self, line: str) -> None:
        """Append a line of free text, newline-joined."""
        if self.content:
            self.content += '\n' + line
        else:
            self.content = line


class MeetingInfo(BaseModel):
    """Flat summary fields of a meeting note."""
    title: str = ""
    date: str = ""
    attendees: str = ""
    agenda: str = ""
    goals: str = ""


class MeetingDetails(BaseModel):
    """Richer, list-valued view of a meeting note."""
    title: str = ""
    date: str = ""
    attendees: List[str] = Field(default_factory=list)
    agenda: str = ""
    goals: str = ""
    decisions: List[str] = Field(default_factory=list)
    action_items: List[str] = Field(default_factory=list)
    next_steps: List[str] = Field(default_factory=list)


class TranscriptType(str, Enum):
    """Format of a dialogue transcript."""
    SENTIMENT = "sentiment"
    STANDARD = "standard"


class Sentiment(str, Enum):
    """Sentiment label of a transcript message."""
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class TranscriptMessage(BaseModel):
    """A single speaker turn."""
    speaker: str
    timestamp: str = ""
    text: str = ""
    sentiment: Optional[Sentiment] = None
    sentiment_score: Optional[str] = None


class TranscriptSummary(BaseModel):
    """Aggregate sentiment counts reported by the upstream service."""
    total_paragraphs: int = 0
    positive: int = 0
    neutral: int = 0
    negative: int = 0
    positive_percentage: str = "0"
    neutral_percentage: str = "0"
    negative_percentage: str = "0"


class ProcessedTranscript(BaseModel):
    """Parsed transcript ready for display."""
    type: TranscriptType = TranscriptType.STANDARD
    messages: List[TranscriptMessage] = Field(default_factory=list)
    summary: Optional[TranscriptSummary] = None

    def speakers(self) -> List[str]:
        """Distinct speakers in order of first appearance."""
        seen: List[str] = []
        for message in self.messages:
            if message.speaker not in seen:
                seen.append(message.speaker)
        return seen

    def messages_for(self, speaker: str) -> List[TranscriptMessage]:
        """All turns of one speaker (case-insensitive)."""
        return [
            message for message in self.messages
            if message.speaker.lower() == speaker.lower()
        ]
