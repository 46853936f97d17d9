from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Any
from enum import Enum


def _coerce_text(value: Any) -> Any:
    # Model replies often send null or bare numbers (e.g. gpa: 3.8)
    if value is None:
        return ""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return value


class _Entry(BaseModel):
    @field_validator("*", mode="before")
    @classmethod
    def _text(cls, v):
        return _coerce_text(v)


class PersonalInfo(_Entry):
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    summary: str = ""


class Experience(_Entry):
    company: str = ""
    position: str = ""
    startDate: str = ""
    endDate: str = ""
    description: str = ""


class Education(_Entry):
    school: str = ""
    degree: str = ""
    field: str = ""
    graduationDate: str = ""
    gpa: str = ""


class ExtraCurricular(_Entry):
    organization: str = ""
    role: str = ""
    startDate: str = ""
    endDate: str = ""
    description: str = ""


class ResumeDocument(BaseModel):
    personalInfo: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: List[Experience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    extraCurriculars: List[ExtraCurricular] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)

    @field_validator("skills", mode="before")
    @classmethod
    def _skill_text(cls, v):
        if isinstance(v, list):
            return [_coerce_text(s) for s in v]
        return v

    @classmethod
    def blank(cls) -> "ResumeDocument":
        """Empty document with one editable entry in every repeatable section."""
        return cls(
            personalInfo=PersonalInfo(),
            experience=[Experience()],
            education=[Education()],
            extraCurriculars=[ExtraCurricular()],
            skills=[""],
        )


class Section(str, Enum):
    experience = "experience"
    education = "education"
    extraCurriculars = "extraCurriculars"
    skills = "skills"


# Entry model for each repeatable section; skills are bare strings
SECTION_MODELS = {
    Section.experience: Experience,
    Section.education: Education,
    Section.extraCurriculars: ExtraCurricular,
}


class SessionStatus(str, Enum):
    idle = "idle"
    pending = "pending"
    reviewing = "reviewing"


class FieldUpdate(BaseModel):
    value: str


class SessionOut(BaseModel):
    id: str
    status: SessionStatus
    document: ResumeDocument
    candidate: Optional[ResumeDocument] = None
    lastError: Optional[str] = None


class EnhanceSuccess(BaseModel):
    success: bool = True
    content: ResumeDocument


class EnhanceFailure(BaseModel):
    success: bool = False
    error: str
    details: Optional[str] = None
    timestamp: str
