"""
Line classification for AI-generated meeting notes.
"""

from typing import Optional

from note_formatter.config import ParserConfig
from note_formatter.models import ClassifiedLine, LineKind
from note_formatter.utils.text_normalizer import indentation

HEADING_PREFIXES = (
    ('#### ', LineKind.HEADING3),
    ('### ', LineKind.HEADING2),
    ('## ', LineKind.HEADING1),
)
BULLET_PREFIXES = ('- ', '* ')
SUB_BULLET_PREFIX = '+ '

HEADING_LEVELS = {
    LineKind.HEADING1: 1,
    LineKind.HEADING2: 2,
    LineKind.HEADING3: 3,
}


def classify_line(line: str, config: Optional[ParserConfig] = None) -> ClassifiedLine:
    """
    Classify a single meeting-note line.

    Args:
        line: The line with its original leading whitespace
        config: Parser configuration (defaults are used when omitted)

    Returns:
        ClassifiedLine with the marker stripped from ``text``
    """
    config = config or ParserConfig()
    trimmed = line.strip()
    indent = indentation(line)

    def _result(kind: LineKind, text: str = "") -> ClassifiedLine:
        return ClassifiedLine(kind=kind, text=text, indent=indent, raw=line)

    if any(trimmed.startswith(prefix) for prefix in config.skip_prefixes):
        return _result(LineKind.SKIP)

    for prefix, kind in HEADING_PREFIXES:
        if trimmed.startswith(prefix):
            return _result(kind, trimmed[len(prefix):].strip())

    if trimmed.startswith(BULLET_PREFIXES):
        text = trimmed[2:].strip()
        if indent < config.nested_indent:
            return _result(LineKind.LIST_ITEM, text)
        return _result(LineKind.NESTED_LIST_ITEM, text)

    if trimmed.startswith(SUB_BULLET_PREFIX):
        return _result(LineKind.SUB_BULLET, trimmed[2:].strip())

    # Unsupported heading depth ("#", "#####", "#tag")
    if trimmed.startswith('#'):
        return _result(LineKind.IGNORED, trimmed)

    return _result(LineKind.PLAIN_CONTENT, trimmed)
