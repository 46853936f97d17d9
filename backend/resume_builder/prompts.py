import json
import textwrap

from .schemas import ResumeDocument

# Target shape echoed to the model; keys must match ResumeDocument exactly
RESUME_SCHEMA = {
    "personalInfo": {
        "name": "...",
        "email": "...",
        "phone": "...",
        "location": "...",
        "summary": "enhanced summary",
    },
    "experience": [
        {"company": "...", "position": "...", "startDate": "...", "endDate": "...", "description": "..."}
    ],
    "education": [
        {"school": "...", "degree": "...", "field": "...", "graduationDate": "...", "gpa": "..."}
    ],
    "extraCurriculars": [
        {"organization": "...", "role": "...", "startDate": "...", "endDate": "...", "description": "..."}
    ],
    "skills": ["skill1", "skill2"],
}

SYSTEM_PROMPT = textwrap.dedent(
    """
    You are an expert résumé writer. Enhance the provided résumé while maintaining accuracy.
    Focus on:
    1. Strong action verbs and quantifiable achievements
    2. Consistent formatting and tense
    3. Concrete results over fluff

    NEVER invent employers, schools, dates or contact details.
    IMPORTANT: Respond with ONLY a valid JSON object. No explanatory text or formatting.
    """
).strip()


def build_user_prompt(doc: ResumeDocument) -> str:
    return (
        "Enhance these résumé sections and return ONLY a JSON object with this structure "
        "(same keys, same number of entries, no markdown fences):\n"
        f"{json.dumps(RESUME_SCHEMA, indent=2)}\n\n"
        "Current résumé content:\n"
        f"{json.dumps(doc.model_dump(), indent=2, ensure_ascii=False)}"
    )


def build_messages(doc: ResumeDocument, system_prompt: str = SYSTEM_PROMPT) -> list:
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": build_user_prompt(doc)},
    ]
