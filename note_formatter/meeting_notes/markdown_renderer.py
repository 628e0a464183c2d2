from __future__ import annotations

from typing import List

from note_formatter.models import ListItem, Section

_NESTED_INDENT = " " * 6
_SUBITEM_INDENT = " " * 2


def _heading_marker(level: int) -> str:
    # Section level 1..3 maps to "##".."####"
    return "#" * (min(max(level, 1), 3) + 1)


def _render_items(items: List[ListItem], lines: List[str]) -> None:
    for item in items:
        lines.append(f"- {item.text}")
        for subitem in item.subitems:
            lines.append(f"{_SUBITEM_INDENT}+ {subitem}")
        for nested in item.nested_items:
            lines.append(f"{_NESTED_INDENT}- {nested.text}")
            for subitem in nested.subitems:
                lines.append(f"{_NESTED_INDENT}{_SUBITEM_INDENT}+ {subitem}")


def _render_section(section: Section, lines: List[str]) -> None:
    lines.append(f"{_heading_marker(section.level)} {section.title}")
    lines.append("")
    if section.content:
        lines.append(section.content)
        lines.append("")
    if section.items:
        _render_items(section.items, lines)
        lines.append("")
    for subsection in section.subsections:
        _render_section(subsection, lines)


def render_sections_markdown(sections: List[Section]) -> str:
    """Serialize a section forest back to normalized Markdown.

    Headings are emitted from each section's level, nested bullets are
    indented six spaces and sub-bullets use ``+``. Trees built from
    headings that had a parent parse back to the same tree; a synthesized
    "Meeting Notes" parent is written as a real heading.
    """
    if not sections:
        return ""

    lines: List[str] = []
    for section in sections:
        _render_section(section, lines)
    return "\n".join(lines).rstrip() + "\n"
