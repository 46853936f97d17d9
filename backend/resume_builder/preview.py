"""
Read-only HTML projection of a ResumeDocument.

Pure: same document in, same markup out. Sections with nothing to show
(empty list, or only blank entries) are left out, heading included.
"""
from pathlib import Path
from typing import Any, Dict, List

from jinja2 import Environment, FileSystemLoader

from .schemas import ResumeDocument

_TEMPLATES = Path(__file__).parent / "templates"
env = Environment(loader=FileSystemLoader(_TEMPLATES), autoescape=True)


def _filled(entries) -> List[Any]:
    return [e for e in entries if any(v.strip() for v in e.model_dump().values())]


def preview_context(doc: ResumeDocument) -> Dict[str, Any]:
    info = doc.personalInfo
    return {
        "info": info,
        "contact": [v for v in (info.email, info.phone, info.location) if v.strip()],
        "experience": _filled(doc.experience),
        "education": _filled(doc.education),
        "activities": _filled(doc.extraCurriculars),
        "skills": [s for s in doc.skills if s.strip()],
    }


def render_preview(doc: ResumeDocument) -> str:
    return env.get_template("preview.html").render(**preview_context(doc))
