"""
Incremental builder turning classified meeting-note lines into a section tree.
"""

from typing import List, Optional, Iterable
from loguru import logger

from note_formatter.config import ParserConfig
from note_formatter.models import ClassifiedLine, LineKind, ListItem, Section
from note_formatter.meeting_notes.line_classifier import classify_line


class SectionTreeBuilder:
    """Build a forest of sections from a stream of classified lines.

    The builder keeps one cursor per heading level plus the innermost open
    list item and the top-level item that accepts nested bullets. A heading
    of level L closes every open level >= L.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()
        self._sections: List[Section] = []
        self._h1: Optional[Section] = None
        self._h2: Optional[Section] = None
        self._h3: Optional[Section] = None
        self._list_item: Optional[ListItem] = None
        self._parent_item: Optional[ListItem] = None
        # Shared parent for headings that arrive before any H1/H2
        self._meeting_notes: Optional[Section] = None

    @property
    def current_h1(self) -> Optional[Section]:
        return self._h1

    @property
    def current_h2(self) -> Optional[Section]:
        return self._h2

    @property
    def current_h3(self) -> Optional[Section]:
        return self._h3

    @property
    def current_list_item(self) -> Optional[ListItem]:
        return self._list_item

    @property
    def current_parent_item(self) -> Optional[ListItem]:
        return self._parent_item

    def _innermost(self) -> Optional[Section]:
        for section in (self._h3, self._h2, self._h1):
            if section is not None:
                return section
        return None

    def _close_lists(self) -> None:
        self._list_item = None
        self._parent_item = None

    def feed(self, line: ClassifiedLine) -> None:
        """Apply a single classified line to the tree."""
        handler = {
            LineKind.HEADING1: self._on_heading1,
            LineKind.HEADING2: self._on_heading2,
            LineKind.HEADING3: self._on_heading3,
            LineKind.LIST_ITEM: self._on_list_item,
            LineKind.NESTED_LIST_ITEM: self._on_nested_list_item,
            LineKind.SUB_BULLET: self._on_sub_bullet,
            LineKind.PLAIN_CONTENT: self._on_plain_content,
        }.get(line.kind)

        if handler is None:
            logger.debug(f"Dropping {line.kind.value} line: {line.raw.strip()[:60]}")
            return
        handler(line.text)

    def feed_all(self, lines: Iterable[ClassifiedLine]) -> 'SectionTreeBuilder':
        for line in lines:
            self.feed(line)
        return self

    def build(self) -> List[Section]:
        """Return the top-level sections built so far."""
        return self._sections

    def _on_heading1(self, title: str) -> None:
        self._h1 = Section(title=title, level=1)
        self._sections.append(self._h1)
        self._h2 = None
        self._h3 = None
        self._close_lists()

    def _on_heading2(self, title: str) -> None:
        self._h2 = Section(title=title, level=2)
        if self._h1 is not None:
            self._h1.subsections.append(self._h2)
        else:
            self._sections.append(self._h2)
        self._h3 = None
        self._close_lists()

    def _on_heading3(self, title: str) -> None:
        self._h3 = Section(title=title, level=3)

        # Synthesized parents never become current H1/H2
        if self._h2 is not None:
            self._h2.subsections.append(self._h3)
        elif self._h1 is not None:
            logger.debug(f"Synthesizing '{self.config.additional_details_title}' for orphan heading: {title}")
            wrapper = Section(title=self.config.additional_details_title, level=2)
            wrapper.subsections.append(self._h3)
            self._h1.subsections.append(wrapper)
        else:
            if self._meeting_notes is None:
                logger.debug(f"Synthesizing '{self.config.meeting_notes_title}' for orphan heading: {title}")
                self._meeting_notes = Section(title=self.config.meeting_notes_title, level=1)
                self._sections.append(self._meeting_notes)
            self._meeting_notes.subsections.append(self._h3)

        self._close_lists()

    def _on_list_item(self, text: str) -> None:
        item = ListItem(text=text, level=1)
        self._list_item = item
        self._parent_item = item

        section = self._innermost()
        if section is not None:
            section.items.append(item)
        else:
            logger.debug(f"List item outside any section: {text[:60]}")

    def _on_nested_list_item(self, text: str) -> None:
        if self._parent_item is not None:
            item = ListItem(text=text, level=2)
            self._parent_item.nested_items.append(item)
        else:
            item = ListItem(text=text, level=1)
            section = self._innermost()
            if section is not None:
                section.items.append(item)
        self._list_item = item

    def _on_sub_bullet(self, text: str) -> None:
        if self._list_item is not None:
            self._list_item.subitems.append(text)

    def _on_plain_content(self, text: str) -> None:
        section = self._innermost()
        if section is not None:
            section.append_content(text)


def build_section_tree(lines: Iterable[str], config: Optional[ParserConfig] = None) -> List[Section]:
    """
    Classify raw lines and build the section forest.

    Args:
        lines: Non-blank lines with their leading whitespace
        config: Parser configuration

    Returns:
        Top-level sections
    """
    config = config or ParserConfig()
    builder = SectionTreeBuilder(config)
    builder.feed_all(classify_line(line, config) for line in lines)
    return builder.build()
