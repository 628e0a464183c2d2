"""
HTML rendering of parsed meeting notes.
"""

from functools import lru_cache
from typing import List, Optional
import jinja2

from note_formatter.config import RenderConfig
from note_formatter.models import Section

# Wrapper, heading tag, heading classes and paragraph classes per depth
SECTION_STYLES = [
    {
        'wrapper': "meeting-section mb-6",
        'tag': "h2",
        'heading': "text-xl font-bold text-[var(--color-primary)] mb-3",
        'paragraph': "mb-3 text-gray-800",
    },
    {
        'wrapper': "meeting-subsection mb-4 mt-4",
        'tag': "h3",
        'heading': "text-lg font-semibold text-[var(--color-secondary)] mb-2",
        'paragraph': "mb-3 text-gray-800",
    },
    {
        'wrapper': "meeting-subsubsection mb-3 mt-2 pl-4 border-l-2 border-gray-200",
        'tag': "h4",
        'heading': "text-md font-medium mb-2",
        'paragraph': "mb-2 text-gray-800",
    },
]

MEETING_NOTE_TEMPLATE = """\
{%- macro render_subitems(subitems, css) -%}
{%- if subitems -%}
<ul class="list-[square] pl-5 mt-1 space-y-1">
{%- for subitem in subitems %}<li class="{{ css }}">{{ subitem }}</li>{% endfor -%}
</ul>
{%- endif -%}
{%- endmacro -%}

{%- macro render_items(items) -%}
{%- if items -%}
<ul class="list-disc pl-5 space-y-1">
{%- for item in items -%}
<li class="text-gray-800 font-medium">{{ item.text }}
{%- if item.nested_items -%}
<ul class="list-[circle] pl-5 mt-1 space-y-1">
{%- for nested in item.nested_items -%}
<li class="text-gray-700">{{ nested.text }}{{ render_subitems(nested.subitems, 'text-gray-600') }}</li>
{%- endfor -%}
</ul>
{%- endif -%}
{{ render_subitems(item.subitems, 'text-gray-700') }}</li>
{%- endfor -%}
</ul>
{%- endif -%}
{%- endmacro -%}

{%- for section in sections recursive -%}
{%- set style = styles[[loop.depth0, styles|length - 1]|min] -%}
<div class="{{ style.wrapper }}">
<{{ style.tag }} class="{{ style.heading }}">{{ section.title }}</{{ style.tag }}>
{%- if section.content -%}
<p class="{{ style.paragraph }}">{{ section.content }}</p>
{%- endif -%}
{{ render_items(section.items) }}
{%- if section.subsections %}{{ loop(section.subsections) }}{% endif -%}
</div>
{%- endfor -%}
"""


@lru_cache(maxsize=None)
def _environment(escape_html: bool) -> jinja2.Environment:
    return jinja2.Environment(autoescape=escape_html)


@lru_cache(maxsize=None)
def _template(escape_html: bool) -> jinja2.Template:
    return _environment(escape_html).from_string(MEETING_NOTE_TEMPLATE)


def render_sections_html(sections: List[Section], config: Optional[RenderConfig] = None) -> str:
    """
    Render a section forest as HTML.

    Args:
        sections: Parsed meeting note sections
        config: Render configuration; ``escape_html=False`` interpolates
            source text verbatim

    Returns:
        HTML string, empty when there are no sections
    """
    if not sections:
        return ""

    config = config or RenderConfig()
    return _template(config.escape_html).render(
        sections=sections,
        styles=SECTION_STYLES,
    )
