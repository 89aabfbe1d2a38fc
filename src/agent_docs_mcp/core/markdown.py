from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

_HEADING_RE = re.compile(r"^(#{1,6})\s+(.*?)\s*#*\s*$")
_FENCE_RE = re.compile(r"^\s*(```|~~~)")


@dataclass(frozen=True)
class Section:
    heading: str
    text: str


def split_sections(markdown: str) -> List[Section]:
    """
    Split a markdown document at ATX headings.

    Lines inside fenced code blocks never start a section. Text before the
    first heading becomes a section with an empty heading.
    """
    sections: List[Section] = []
    heading = ""
    buf: List[str] = []
    fence = None

    for line in markdown.splitlines():
        m_fence = _FENCE_RE.match(line)
        if m_fence:
            marker = m_fence.group(1)
            if fence is None:
                fence = marker
            elif fence == marker:
                fence = None

        m = _HEADING_RE.match(line) if fence is None else None
        if m:
            if heading or any(b.strip() for b in buf):
                sections.append(Section(heading, "\n".join(buf).strip()))
            heading = m.group(2)
            buf = []
            continue

        buf.append(line)

    if heading or any(b.strip() for b in buf):
        sections.append(Section(heading, "\n".join(buf).strip()))

    return sections
