import re
from typing import List

from backend.app.models.schemas import Section

ABSTRACT_TITLE = "Abstract"

# Exactly level two; "###" and deeper stay part of the section body.
_H2_RE = re.compile(r"^##(?!#)\s+(.*)$")


def _heading_title(line: str) -> str | None:
    m = _H2_RE.match(line.strip())
    return m.group(1).strip() if m else None


def _abstract_content(lines: List[str]) -> str:
    """Text between the '## Abstract' heading and the next H2 (or end of input)."""
    buf: List[str] = []
    inside = False
    for line in lines:
        title = _heading_title(line)
        if title is not None:
            if inside:
                break
            inside = title == ABSTRACT_TITLE
            continue
        if inside:
            buf.append(line)
    return "\n".join(buf).strip()


def segment(document: str) -> List[Section]:
    """
    Split the report into ordered sections.

    The first section is always "Abstract", even when empty. Every other
    section is opened by a second-level heading; headings whose body is only
    whitespace produce no section.
    """
    lines = document.split("\n")
    sections: List[Section] = [Section(title=ABSTRACT_TITLE, content=_abstract_content(lines))]

    title, content = ABSTRACT_TITLE, ""

    def flush():
        if title != ABSTRACT_TITLE and content.strip():
            sections.append(Section(title=title, content=content.strip()))

    for line in lines:
        heading = _heading_title(line)
        if heading is not None:
            flush()
            title, content = heading, ""
        else:
            content += line + "\n"
    flush()
    return sections
