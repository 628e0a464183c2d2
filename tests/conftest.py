"""Shared fixtures for the formatter tests."""

import pytest

from note_formatter.config import reset_config
from note_formatter.meeting_notes.processor import reset_meeting_note_processor
from note_formatter.transcripts.processor import reset_transcript_processor


SAMPLE_MEETING_NOTE = """\
Dạ, em đã sẵn sàng tóm tắt cuộc họp.
## BIÊN BẢN CUỘC HỌP
### A. THÔNG TIN CHUNG
#### 1. Date
May 5 2024
#### 2. Attendance
Alice, Bob, Carol
#### 3. Agenda
Review Q2 roadmap
### B. KEY POINTS
#### 5. Goals
Ship v2 by July
### C. DECISIONS
#### Decisions
- Adopt the new CI pipeline
- Freeze API until release
#### Action Items
- Alice drafts migration plan
      - Include rollback steps
        + Database snapshots
- Bob updates docs
### D. FOLLOW-UP
#### Next Steps
Weekly sync on Monday
Demo on Friday
"""

SAMPLE_SENTIMENT_TRANSCRIPT = """\
📊 SENTIMENT ANALYSIS SUMMARY
Total paragraphs: 3
🟢 Positive: 1 (33.3%)
⚪ Neutral: 1 (33.3%)
🔴 Negative: 1 (33.3%)
══════════
ALICE [5/1/2024 10:00 AM]
🟢 Great idea [POS:92.3%]
BOB [5/1/2024 10:01 AM]
🔴 I disagree [NEG:80.1%]
ALICE [5/1/2024 10:02 AM]
⚪ Maybe later
"""

SAMPLE_STANDARD_TRANSCRIPT = """\
SPEAKER_1 [5/1/2024 10:00 AM]
Hello everyone
SPEAKER_1 [5/1/2024 10:00 AM]
Thanks for joining
SPEAKER_2 [5/1/2024 10:01 AM]
Hi there
SPEAKER_1
Shall we start
"""


@pytest.fixture(autouse=True)
def reset_globals():
    """Give every test a fresh configuration and fresh processors."""
    reset_config()
    reset_meeting_note_processor()
    reset_transcript_processor()
    yield
    reset_config()
    reset_meeting_note_processor()
    reset_transcript_processor()


@pytest.fixture
def meeting_note():
    return SAMPLE_MEETING_NOTE


@pytest.fixture
def sentiment_transcript():
    return SAMPLE_SENTIMENT_TRANSCRIPT


@pytest.fixture
def standard_transcript():
    return SAMPLE_STANDARD_TRANSCRIPT
