"""
CV Pydantic schemas

Attributes are snake_case in Python and camelCase on the wire.
"""
import uuid
from typing import List, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


def new_entry_id() -> str:
    return str(uuid.uuid4())


class CVSchema(BaseModel):
    """Base schema with camelCase aliases"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class WorkHistoryEntry(CVSchema):
    """One position found in the experience section"""
    id: str = Field(default_factory=new_entry_id)
    company: str = ""
    role: str = ""
    start_date: str = ""
    end_date: Optional[str] = None
    current: bool = False
    description: str = ""
    highlights: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    badges: List[str] = Field(default_factory=list)


class EducationEntry(CVSchema):
    """One degree found in the education section"""
    id: str = Field(default_factory=new_entry_id)
    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: Optional[str] = ""
    current: bool = False


class ParsedCVData(CVSchema):
    """Aggregate parser output"""
    skills: List[str] = Field(default_factory=list)
    work_history: List[WorkHistoryEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)

    def sections_found(self) -> int:
        """Number of non-empty sections"""
        return sum(1 for section in (self.skills, self.work_history, self.education) if section)


class CVParseResult(CVSchema):
    """Upload response schema"""
    success: bool
    message: str
    data: Optional[ParsedCVData] = None
    warnings: Optional[List[str]] = None
