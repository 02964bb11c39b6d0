"""
Heuristic CV parsing: section detection, skills, work history, education
and per-entry badges from text extracted out of PDF resumes.
"""
from cvparser.cv.parser import CVParser, cv_parser
from cvparser.cv.schemas import EducationEntry, ParsedCVData, WorkHistoryEntry

__all__ = ["CVParser", "cv_parser", "ParsedCVData", "WorkHistoryEntry", "EducationEntry"]
