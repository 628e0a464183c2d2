from __future__ import annotations

import re
from typing import List, Optional

_ESCAPED_NEWLINE_RE = re.compile(r"\\r\\n|\\n")
_LEADING_WS_RE = re.compile(r"^\s*")


def normalize_newlines(text: Optional[str]) -> str:
    """Normalize line breaks in text returned by the summarization service.

    - Turn escaped ``\\n`` sequences into real newlines
    - Convert CRLF / CR line endings to LF
    """
    if not text:
        return ""

    out = _ESCAPED_NEWLINE_RE.sub("\n", text)
    return out.replace("\r\n", "\n").replace("\r", "\n")


def split_lines(text: Optional[str]) -> List[str]:
    """Split text into non-blank lines, keeping leading whitespace."""
    out = normalize_newlines(text).strip()
    if not out:
        return []
    return [ln.rstrip() for ln in out.split("\n") if ln.strip()]


def indentation(line: str) -> int:
    """Count the leading whitespace characters of a line."""
    return len(_LEADING_WS_RE.match(line or "").group(0))
