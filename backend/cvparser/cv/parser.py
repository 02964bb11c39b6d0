"""
CV parsing service
"""
import re
from typing import Iterable, List, Optional, Pattern

import structlog

from cvparser.core.config import settings
from cvparser.core.exceptions import InsufficientDataError
from cvparser.cv.badge_classifier import extract_badges
from cvparser.cv.patterns import (
    COMMON_SKILLS,
    COMPANY_PATTERNS,
    CURRENT_MARKER_PATTERN,
    DATE_PATTERNS,
    DEGREE_PATTERN,
    DEGREE_TEXT_PATTERN,
    FIELD_PATTERNS,
    INSTITUTION_KEYWORDS,
    INSTITUTION_PATTERN,
    ROLE_KEYWORDS,
    ROLE_PATTERNS,
)
from cvparser.cv.schemas import EducationEntry, ParsedCVData, WorkHistoryEntry
from cvparser.cv.section_detector import (
    EDUCATION,
    EXPERIENCE,
    SKILLS,
    find_section,
    is_heading,
)
from cvparser.cv.text_extractor import Extractor, extract_text

logger = structlog.get_logger()

SKILL_SEPARATORS = re.compile(r"[,;•·|]")
FALLBACK_LINE_LENGTH = 100


def match_date_range(line: str) -> Optional[re.Match]:
    """First date-range pattern matching ``line``, tried in fixed order"""
    for pattern in DATE_PATTERNS:
        match = pattern.search(line)
        if match:
            return match
    return None


def is_current_marker(end_marker: str) -> bool:
    # Spaced markers ("P R E S E N T") count as well
    return bool(CURRENT_MARKER_PATTERN.search(re.sub(r"\s+", "", end_marker or "")))


def _first_group(patterns: Iterable[Pattern], line: str) -> str:
    for pattern in patterns:
        match = pattern.search(line)
        if match and match.group(1).strip():
            return match.group(1).strip()
    return ""


def _previous_line(lines: List[str], index: int) -> str:
    return lines[index - 1].strip() if index > 0 else ""


class CVParser:
    """Parse extracted CV text into skills, work history and education"""

    def __init__(
        self,
        extractor: Optional[Extractor] = None,
        min_text_length: Optional[int] = None,
    ):
        self.extractor = extractor
        self.min_text_length = min_text_length or settings.MIN_TEXT_LENGTH
        self.max_skills = settings.MAX_SKILLS
        self.max_work_history = settings.MAX_WORK_HISTORY
        self.max_education = settings.MAX_EDUCATION

    def parse(self, content: bytes, timeout_ms: Optional[int] = None) -> ParsedCVData:
        """Extract text from a PDF and parse it"""
        text = extract_text(content, timeout_ms, self.extractor)
        return self.parse_text(text)

    def parse_text(self, text: str) -> ParsedCVData:
        """Parse already extracted text; refuses near-empty (scanned) documents"""
        if len(text) < self.min_text_length:
            logger.warning("insufficient_text_extracted", text_length=len(text))
            raise InsufficientDataError(
                details={"text_length": len(text), "min_text_length": self.min_text_length}
            )

        parsed = ParsedCVData(
            skills=self.identify_skills(text),
            work_history=self.identify_work_history(text),
            education=self.identify_education(text),
        )
        logger.info(
            "cv_parsed",
            text_length=len(text),
            skills=len(parsed.skills),
            work_history=len(parsed.work_history),
            education=len(parsed.education),
        )
        return parsed

    def identify_skills(self, text: str) -> List[str]:
        """
        Collect declared skills from the skills section

        Falls back to scanning the whole text for common technologies when
        there is no skills section, or when nothing but the end of the text
        closed it.
        """
        lines = text.splitlines()
        section = find_section(lines, SKILLS)
        skills: List[str] = []

        if section is not None:
            for i in section.body:
                line = lines[i].strip()
                if is_heading(line, SKILLS):
                    continue
                skills.extend(
                    token
                    for token in (part.strip() for part in SKILL_SEPARATORS.split(line))
                    if 1 < len(token) < 50
                )

        if section is None or not section.terminated:
            text_lower = text.lower()
            for skill in COMMON_SKILLS:
                if skill.lower() in text_lower and skill not in skills:
                    skills.append(skill)

        return list(dict.fromkeys(skills))[: self.max_skills]

    def identify_work_history(self, text: str) -> List[WorkHistoryEntry]:
        """Extract work history entries anchored on date-range lines"""
        lines = text.splitlines()
        section = find_section(lines, EXPERIENCE)
        if section is None:
            logger.info("experience_section_not_found")
            return []

        # First pass: one anchor per line carrying a date range
        anchors = [
            i for i in section.body
            if lines[i].strip() and match_date_range(lines[i].strip()) is not None
        ]
        logger.debug(
            "experience_section_found",
            start=section.heading_index,
            end=section.end_index,
            anchors=len(anchors),
        )

        # Second pass: build an entry from each anchor's text block
        work_history: List[WorkHistoryEntry] = []
        for position, start in enumerate(anchors):
            end = anchors[position + 1] if position + 1 < len(anchors) else section.end_index
            line = lines[start].strip()
            block = " ".join(
                entry_line.strip() for entry_line in lines[start:end] if entry_line.strip()
            )

            match = match_date_range(line)
            end_marker = match.group(2) or ""
            current = is_current_marker(end_marker)

            entry = WorkHistoryEntry(
                company=self._extract_company(lines, start),
                role=self._extract_role(lines, start),
                start_date=match.group(1) or "",
                end_date=None if current else end_marker,
                current=current,
                badges=extract_badges(block),
            )
            if entry.company or entry.role:
                work_history.append(entry)

        return work_history[: self.max_work_history]

    def identify_education(self, text: str) -> List[EducationEntry]:
        """Extract education entries anchored on degree keyword lines"""
        lines = text.splitlines()
        section = find_section(lines, EDUCATION)
        if section is None:
            logger.info("education_section_not_found")
            return []

        education: List[EducationEntry] = []
        for i in section.body:
            line = lines[i].strip()
            if not line or not DEGREE_PATTERN.search(line):
                continue

            entry = EducationEntry(
                institution=self._extract_institution(lines, i),
                degree=self._extract_degree(line),
                field=_first_group(FIELD_PATTERNS, line),
            )

            match = match_date_range(line)
            if match:
                end_marker = match.group(2) or ""
                entry.start_date = match.group(1) or ""
                entry.current = is_current_marker(end_marker)
                entry.end_date = None if entry.current else end_marker

            if entry.institution or entry.degree:
                education.append(entry)

        return education[: self.max_education]

    def _extract_company(self, lines: List[str], index: int) -> str:
        company = _first_group(COMPANY_PATTERNS, lines[index].strip())
        if company:
            return company

        prev_line = _previous_line(lines, index)
        if prev_line and match_date_range(prev_line) is None:
            return _first_group(COMPANY_PATTERNS, prev_line) or prev_line[:FALLBACK_LINE_LENGTH]

        return ""

    def _extract_role(self, lines: List[str], index: int) -> str:
        role = _first_group(ROLE_PATTERNS, lines[index].strip())
        if role:
            return role

        prev_line = _previous_line(lines, index)
        if prev_line and any(keyword in prev_line.lower() for keyword in ROLE_KEYWORDS):
            return _first_group(ROLE_PATTERNS, prev_line) or prev_line[:FALLBACK_LINE_LENGTH]

        return ""

    def _extract_institution(self, lines: List[str], index: int) -> str:
        institution = _first_group([INSTITUTION_PATTERN], lines[index].strip())
        if institution:
            return institution

        prev_line = _previous_line(lines, index)
        if prev_line and INSTITUTION_KEYWORDS.search(prev_line):
            return prev_line[:FALLBACK_LINE_LENGTH]

        return ""

    def _extract_degree(self, line: str) -> str:
        match = DEGREE_TEXT_PATTERN.search(line)
        return match.group(0).strip() if match else ""


cv_parser = CVParser()
