"""
Badge classifier for work history entries

Maps the free text of one entry to technical, management and business tags.
"""
import re
from typing import Iterable, List, Pattern, Tuple

from cvparser.cv.patterns import (
    BUSINESS_SKILL_PATTERNS,
    MANAGEMENT_SKILL_PATTERNS,
    TECHNICAL_SKILLS,
)

# Names this short ("R", "Go", "C#") only count as standalone words
SHORT_SKILL_MAX_LENGTH = 2


def _compile_short_skill(skill: str) -> Pattern:
    return re.compile(rf"(?<!\w){re.escape(skill)}(?!\w)", re.IGNORECASE)


_SHORT_SKILL_PATTERNS = {
    skill: _compile_short_skill(skill)
    for skill in TECHNICAL_SKILLS
    if len(skill) <= SHORT_SKILL_MAX_LENGTH
}


def match_technical_skills(text: str, catalog: Iterable[str] = TECHNICAL_SKILLS) -> List[str]:
    """Catalog names found in ``text``, in catalog order"""
    lower_text = text.lower()
    found = []
    for skill in catalog:
        if len(skill) <= SHORT_SKILL_MAX_LENGTH:
            pattern = _SHORT_SKILL_PATTERNS.get(skill) or _compile_short_skill(skill)
            if pattern.search(text):
                found.append(skill)
        elif skill.lower() in lower_text:
            found.append(skill)
    return found


def match_rules(text: str, rules: Iterable[Tuple[Pattern, str]]) -> List[str]:
    """Labels of every rule whose pattern occurs in ``text``"""
    return [label for pattern, label in rules if pattern.search(text)]


def extract_badges(text: str) -> List[str]:
    """
    Extract deduplicated badges from an entry's text block

    Technical skills come first, then management and business labels, each
    label kept at its first position.
    """
    if not text or not text.strip():
        return []

    badges = match_technical_skills(text)
    badges.extend(match_rules(text, MANAGEMENT_SKILL_PATTERNS))
    badges.extend(match_rules(text, BUSINESS_SKILL_PATTERNS))

    return list(dict.fromkeys(badges))
