"""
Configuration management for the meeting note and transcript formatter.
"""

import os
from typing import Dict, Any, Optional, List
from pathlib import Path
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class ParserConfig(BaseModel):
    """Configuration for the meeting-note line parser."""
    # Bullets indented at least this far become nested items
    nested_indent: int = Field(default=6, ge=1)
    # Greeting noise emitted by the summarization service
    skip_prefixes: List[str] = Field(default_factory=lambda: ["Dạ, em đã sẵn sàng"])
    additional_details_title: str = "Additional Details"
    meeting_notes_title: str = "Meeting Notes"


class ExtractionConfig(BaseModel):
    """Keyword sets used to locate summary fields in a section tree.

    ``group_keywords`` identifies second-level sections; ``field_keywords``
    maps each group to the third-level sections it holds. Matching is
    case-sensitive substring containment.
    """
    group_keywords: Dict[str, List[str]] = Field(
        default_factory=lambda: {
            'information': ["THÔNG TIN", "INFORMATION", "A."],
            'key_points': ["KEY POINTS", "ĐIỂM CHÍNH", "B."],
            'decisions': ["DECISIONS", "QUYẾT ĐỊNH"],
            'follow_up': ["FOLLOW-UP", "FOLLOW UP", "THEO DÕI"],
        }
    )
    field_keywords: Dict[str, Dict[str, List[str]]] = Field(
        default_factory=lambda: {
            'information': {
                'date': ["Date", "date", "DATE", "Ngày", "NGÀY", "1."],
                'attendees': [
                    "Attendance", "attendance", "ATTENDANCE",
                    "Attendees", "attendees", "ATTENDEES",
                    "Người tham dự", "NGƯỜI THAM DỰ", "2.",
                ],
                'agenda': [
                    "Agenda", "agenda", "AGENDA", "Outline", "outline", "OUTLINE",
                    "Chương trình", "CHƯƠNG TRÌNH", "3.",
                ],
            },
            'key_points': {
                'goals': ["Goal", "goal", "GOAL", "Mục tiêu", "MỤC TIÊU", "5."],
            },
            'decisions': {
                'decisions': ["Decision", "decision", "DECISION", "Quyết định", "QUYẾT ĐỊNH"],
                'action_items': [
                    "Action Items", "Action items", "action items", "ACTION ITEMS",
                    "Hành động", "HÀNH ĐỘNG",
                ],
            },
            'follow_up': {
                'next_steps': [
                    "Next Steps", "Next steps", "next steps", "NEXT STEPS",
                    "Bước tiếp theo", "BƯỚC TIẾP THEO",
                ],
            },
        }
    )
    item_separator: str = ", "
    attendee_separator: str = ","


class RenderConfig(BaseModel):
    """Configuration for HTML output."""
    # False interpolates source text as raw HTML
    escape_html: bool = True
    speaker_palette: List[str] = Field(
        default_factory=lambda: [
            'bg-blue-50 border-blue-200',
            'bg-green-50 border-green-200',
            'bg-purple-50 border-purple-200',
            'bg-yellow-50 border-yellow-200',
            'bg-pink-50 border-pink-200',
            'bg-indigo-50 border-indigo-200',
            'bg-orange-50 border-orange-200',
        ]
    )
    labels: Dict[str, str] = Field(
        default_factory=lambda: {
            'sentiment_summary': "Phân tích cảm xúc",
            'total': "Tổng",
            'positive': "Tích cực",
            'neutral': "Trung lập",
            'negative': "Tiêu cực",
            'no_content': "Không tìm thấy nội dung bản ghi.",
        }
    )

    def label(self, key: str) -> str:
        """Get a display label, falling back to the key itself."""
        return self.labels.get(key, key)


class AppConfig(BaseSettings):
    """Main application configuration."""
    parser: ParserConfig = Field(default_factory=ParserConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        env_prefix='NOTE_FORMATTER_',
        extra='ignore',
    )

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """Create configuration from environment variables."""
        config = cls()

        if os.getenv('NOTE_FORMATTER_ESCAPE_HTML'):
            config.render.escape_html = os.getenv('NOTE_FORMATTER_ESCAPE_HTML').lower() == 'true'

        if os.getenv('NOTE_FORMATTER_NESTED_INDENT'):
            try:
                config.parser.nested_indent = max(1, int(os.getenv('NOTE_FORMATTER_NESTED_INDENT')))
            except ValueError:
                pass

        if os.getenv('NOTE_FORMATTER_SKIP_PREFIXES'):
            prefixes = os.getenv('NOTE_FORMATTER_SKIP_PREFIXES')
            config.parser.skip_prefixes = [p.strip() for p in prefixes.split('|') if p.strip()]

        if os.getenv('NOTE_FORMATTER_SPEAKER_PALETTE'):
            palette = os.getenv('NOTE_FORMATTER_SPEAKER_PALETTE')
            colors = [c.strip() for c in palette.split(',') if c.strip()]
            if colors:
                config.render.speaker_palette = colors

        return config

    @classmethod
    def from_yaml(cls, path: Path) -> 'AppConfig':
        """Create configuration from YAML file."""
        import yaml

        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'parser': self.parser.model_dump(),
            'extraction': self.extraction.model_dump(),
            'render': self.render.model_dump(),
        }


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def set_config(config: AppConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global configuration instance."""
    global _config
    _config = None
