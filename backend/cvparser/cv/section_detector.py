"""
Section Detector - heading-based segmentation of extracted CV text

Sections are delimited by heading lines only. A section starts at the first
heading of its own family and runs until the first later heading belonging
to one of the other families, or to the end of the text.
"""
from typing import List, NamedTuple, Optional

from cvparser.cv.patterns import SECTION_PATTERNS

SKILLS = "skills"
EXPERIENCE = "experience"
EDUCATION = "education"


class Section(NamedTuple):
    """Line range of one section; ``terminated`` is False when it ran to end of text"""

    heading_index: int
    end_index: int
    terminated: bool

    @property
    def body(self) -> range:
        return range(self.heading_index + 1, self.end_index)


def heading_family(line: str) -> Optional[str]:
    """Return the family of a heading line, or None for ordinary lines"""
    trimmed = line.strip()
    if not trimmed:
        return None
    for family, pattern in SECTION_PATTERNS.items():
        if pattern.match(trimmed):
            return family
    return None


def is_heading(line: str, family: str) -> bool:
    return bool(SECTION_PATTERNS[family].match(line.strip()))


def find_section(lines: List[str], family: str) -> Optional[Section]:
    """
    Locate the section of ``family`` in ``lines``

    Returns None when no heading of that family exists.
    """
    start = next((i for i, line in enumerate(lines) if is_heading(line, family)), None)
    if start is None:
        return None

    for i in range(start + 1, len(lines)):
        other = heading_family(lines[i])
        if other is not None and other != family:
            return Section(start, i, True)

    return Section(start, len(lines), False)
