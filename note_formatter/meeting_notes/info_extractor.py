"""
Best-effort extraction of summary fields from a parsed meeting note.
"""

from typing import Dict, Iterator, List, Optional, Tuple
from loguru import logger

from note_formatter.config import ExtractionConfig
from note_formatter.models import MeetingDetails, MeetingInfo, Section

INFO_FIELDS = ('date', 'attendees', 'agenda', 'goals')
LIST_FIELDS = ('decisions', 'action_items', 'next_steps')


def _contains_any(title: str, keywords: List[str]) -> bool:
    return any(keyword in title for keyword in keywords)


class InfoExtractor:
    """Locate titled subsections by keyword and project them to flat fields.

    Only three levels are searched: top section, its subsections (matched
    against ``group_keywords``) and their subsections (matched against the
    group's ``field_keywords``). The first section matching a field wins.
    """

    def __init__(self, config: Optional[ExtractionConfig] = None):
        self.config = config or ExtractionConfig()

    def _field_sections(self, sections: List[Section]) -> Dict[str, Section]:
        matched: Dict[str, Section] = {}

        for group, subsection in self._group_sections(sections):
            fields = self.config.field_keywords.get(group, {})
            for subsubsection in subsection.subsections:
                for field, keywords in fields.items():
                    if not _contains_any(subsubsection.title, keywords):
                        continue
                    if field not in matched:
                        matched[field] = subsubsection
                    # One field per heading, in keyword-table order
                    break

        return matched

    def _group_sections(self, sections: List[Section]) -> Iterator[Tuple[str, Section]]:
        for section in sections:
            for subsection in section.subsections:
                for group, keywords in self.config.group_keywords.items():
                    if _contains_any(subsection.title, keywords):
                        yield group, subsection

    def _as_text(self, section: Section) -> str:
        if section.content:
            return section.content
        return self.config.item_separator.join(item.text for item in section.items)

    def _as_list(self, section: Section) -> List[str]:
        if section.items:
            return [item.text for item in section.items]
        if section.content:
            return [line.strip() for line in section.content.split('\n') if line.strip()]
        return []

    def extract(self, sections: List[Section]) -> MeetingInfo:
        """
        Extract the flat meeting summary.

        Args:
            sections: Parsed section forest

        Returns:
            MeetingInfo with missing fields left empty
        """
        info = MeetingInfo()
        if not sections:
            return info

        info.title = sections[0].title
        matched = self._field_sections(sections)
        for field in INFO_FIELDS:
            if field in matched:
                setattr(info, field, self._as_text(matched[field]))

        missing = [field for field in INFO_FIELDS if not getattr(info, field)]
        if missing:
            logger.debug(f"Meeting info fields not found: {', '.join(missing)}")
        return info

    def extract_details(self, sections: List[Section]) -> MeetingDetails:
        """
        Extract the list-valued meeting details.

        Args:
            sections: Parsed section forest

        Returns:
            MeetingDetails with attendees split into names
        """
        details = MeetingDetails()
        if not sections:
            return details

        details.title = sections[0].title
        matched = self._field_sections(sections)

        if 'date' in matched:
            details.date = self._as_text(matched['date']).strip()
        if 'agenda' in matched:
            details.agenda = self._as_text(matched['agenda']).strip()
        if 'goals' in matched:
            details.goals = self._as_text(matched['goals']).strip()

        if 'attendees' in matched:
            attendees = matched['attendees']
            if attendees.items:
                details.attendees = [item.text for item in attendees.items]
            elif attendees.content:
                details.attendees = [
                    name.strip()
                    for name in attendees.content.split(self.config.attendee_separator)
                    if name.strip()
                ]

        for field in LIST_FIELDS:
            if field in matched:
                setattr(details, field, self._as_list(matched[field]))

        return details
