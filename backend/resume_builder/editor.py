"""Typed, pure edits on a ResumeDocument. Each returns a new document."""
from typing import Union

from .schemas import ResumeDocument, PersonalInfo, Section, SECTION_MODELS

PERSONAL_FIELDS = tuple(PersonalInfo.model_fields)


def _section(section: Union[Section, str]) -> Section:
    try:
        return Section(section)
    except ValueError:
        raise ValueError(f"unknown section: {section}")


def _check_index(items: list, index: int, section: Section) -> None:
    if index < 0 or index >= len(items):
        raise IndexError(f"{section.value} has no entry {index}")


def set_personal_field(doc: ResumeDocument, field: str, value: str) -> ResumeDocument:
    if field not in PERSONAL_FIELDS:
        raise ValueError(f"unknown personalInfo field: {field}")
    info = doc.personalInfo.model_copy(update={field: value})
    return doc.model_copy(update={"personalInfo": info})


def set_entry_field(doc: ResumeDocument, section: Union[Section, str], index: int,
                    field: str, value: str) -> ResumeDocument:
    section = _section(section)
    if section is Section.skills:
        raise ValueError("skills have no fields; use set_skill")
    if field not in SECTION_MODELS[section].model_fields:
        raise ValueError(f"unknown {section.value} field: {field}")
    items = list(getattr(doc, section.value))
    _check_index(items, index, section)
    items[index] = items[index].model_copy(update={field: value})
    return doc.model_copy(update={section.value: items})


def set_skill(doc: ResumeDocument, index: int, value: str) -> ResumeDocument:
    skills = list(doc.skills)
    _check_index(skills, index, Section.skills)
    skills[index] = value
    return doc.model_copy(update={"skills": skills})


def _blank(section: Section):
    if section is Section.skills:
        return ""
    return SECTION_MODELS[section]()


def add_entry(doc: ResumeDocument, section: Union[Section, str]) -> ResumeDocument:
    section = _section(section)
    items = list(getattr(doc, section.value)) + [_blank(section)]
    return doc.model_copy(update={section.value: items})


def remove_entry(doc: ResumeDocument, section: Union[Section, str], index: int) -> ResumeDocument:
    """Drop one entry; removing the last one leaves a blank entry behind."""
    section = _section(section)
    items = list(getattr(doc, section.value))
    _check_index(items, index, section)
    del items[index]
    if not items:
        items = [_blank(section)]
    return doc.model_copy(update={section.value: items})
