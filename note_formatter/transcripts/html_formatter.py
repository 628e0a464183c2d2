"""
HTML rendering of parsed transcripts.
"""

from functools import lru_cache
from typing import Dict, List, Optional
import jinja2

from note_formatter.config import RenderConfig
from note_formatter.models import ProcessedTranscript, Sentiment, TranscriptMessage

SENTIMENT_STYLES = {
    Sentiment.POSITIVE: {
        'icon': "🟢",
        'background': "bg-green-50",
        'icon_color': "text-green-500",
        'border': "border-green-200",
    },
    Sentiment.NEUTRAL: {
        'icon': "⚪",
        'background': "bg-gray-50",
        'icon_color': "text-gray-400",
        'border': "border-gray-200",
    },
    Sentiment.NEGATIVE: {
        'icon': "🔴",
        'background': "bg-red-50",
        'icon_color': "text-red-500",
        'border': "border-red-200",
    },
}

SENTIMENT_TEMPLATE = """\
{%- if summary -%}
<div class="bg-gray-100 p-4 rounded-xl mb-6">
<h3 class="text-lg font-bold text-[var(--color-primary)] mb-3"><span class="mr-2">📊</span>{{ labels.sentiment_summary }}</h3>
<div class="grid grid-cols-4 gap-2 mb-3">
<div class="bg-white p-3 rounded-lg text-center">
<div class="text-lg font-semibold">{{ summary.total_paragraphs }}</div>
<div class="text-sm text-gray-500">{{ labels.total }}</div>
</div>
<div class="bg-green-50 p-3 rounded-lg text-center">
<div class="text-lg font-semibold text-green-600">{{ summary.positive }} ({{ summary.positive_percentage }}%)</div>
<div class="text-sm text-gray-500">{{ labels.positive }}</div>
</div>
<div class="bg-gray-50 p-3 rounded-lg text-center">
<div class="text-lg font-semibold text-gray-600">{{ summary.neutral }} ({{ summary.neutral_percentage }}%)</div>
<div class="text-sm text-gray-500">{{ labels.neutral }}</div>
</div>
<div class="bg-red-50 p-3 rounded-lg text-center">
<div class="text-lg font-semibold text-red-600">{{ summary.negative }} ({{ summary.negative_percentage }}%)</div>
<div class="text-sm text-gray-500">{{ labels.negative }}</div>
</div>
</div>
</div>
{%- endif -%}
{%- for entry in entries -%}
{%- if entry.new_group -%}
{%- if not loop.first %}<div class="my-3"></div>{% endif -%}
<div class="flex justify-between items-center mb-1">
<div class="font-semibold text-[var(--color-primary)]">{{ entry.message.speaker }}</div>
<div class="text-sm text-gray-500">{{ entry.message.timestamp }}</div>
</div>
{%- endif -%}
<div class="flex gap-2 mb-2">
<div class="{{ entry.style.icon_color }} text-xl flex-shrink-0">{{ entry.style.icon }}</div>
<div class="{{ entry.style.background }} p-3 rounded-lg flex-grow relative border {{ entry.style.border }}">
<p class="text-gray-800 pr-20"><span class="font-medium text-[var(--color-secondary)] hidden sm:inline">{{ entry.message.speaker }}: </span>{{ entry.message.text }}</p>
<div class="absolute bottom-1 right-2 text-xs text-gray-500 bg-white/80 px-1 rounded">{{ entry.sentiment }} ({{ entry.message.sentiment_score }}%)</div>
</div>
</div>
{%- else -%}
<div class="p-4 text-center text-gray-500">{{ labels.no_content }}</div>
{%- endfor -%}
"""

STANDARD_TEMPLATE = """\
{%- if entries -%}
<div class="p-4"><div class="flex flex-col space-y-4">
{%- for entry in entries %}
<div class="flex {{ 'mt-4' if entry.new_speaker else 'mt-1' }} items-start">
<div class="w-24 flex-shrink-0">
<div class="font-medium text-sm {{ 'text-[var(--color-primary)]' if entry.new_speaker else 'text-gray-400' }}">{{ entry.message.speaker }}</div>
<div class="text-xs text-gray-400">{{ entry.message.timestamp }}</div>
</div>
<div class="flex-grow ml-2">
<div class="{{ entry.color }} p-3 rounded-lg border">{{ entry.message.text }}</div>
</div>
</div>
{%- endfor %}
</div></div>
{%- else -%}
<div class="p-4 text-center text-gray-500">{{ labels.no_content }}</div>
{%- endif -%}
"""


@lru_cache(maxsize=None)
def _template(source: str, escape_html: bool) -> jinja2.Template:
    return jinja2.Environment(autoescape=escape_html).from_string(source)


def assign_speaker_colors(messages: List[TranscriptMessage], palette: List[str]) -> Dict[str, str]:
    """
    Give each distinct speaker a palette entry in first-seen order.

    Args:
        messages: Transcript messages
        palette: CSS class strings, reused cyclically

    Returns:
        Mapping of speaker to CSS classes
    """
    colors: Dict[str, str] = {}
    if not palette:
        return colors
    for message in messages:
        if message.speaker not in colors:
            colors[message.speaker] = palette[len(colors) % len(palette)]
    return colors


def format_sentiment_transcript_html(data: ProcessedTranscript, config: Optional[RenderConfig] = None) -> str:
    """
    Render a sentiment transcript: summary panel, then message bubbles
    grouped by consecutive (speaker, timestamp).
    """
    config = config or RenderConfig()

    entries = []
    previous = None
    for message in data.messages:
        group = (message.speaker, message.timestamp)
        sentiment = message.sentiment or Sentiment.NEUTRAL
        entries.append({
            'message': message,
            'new_group': group != previous,
            'style': SENTIMENT_STYLES[sentiment],
            'sentiment': sentiment.value,
        })
        previous = group

    return _template(SENTIMENT_TEMPLATE, config.escape_html).render(
        labels=config.labels,
        summary=data.summary,
        entries=entries,
    )


def format_standard_transcript_html(data: ProcessedTranscript, config: Optional[RenderConfig] = None) -> str:
    """
    Render a standard transcript with one color per speaker; repeated turns
    by the same speaker are de-emphasized.
    """
    config = config or RenderConfig()
    colors = assign_speaker_colors(data.messages, config.speaker_palette)

    entries = []
    previous = None
    for message in data.messages:
        entries.append({
            'message': message,
            'new_speaker': message.speaker != previous,
            'color': colors.get(message.speaker, ""),
        })
        previous = message.speaker

    return _template(STANDARD_TEMPLATE, config.escape_html).render(
        labels=config.labels,
        entries=entries,
    )
