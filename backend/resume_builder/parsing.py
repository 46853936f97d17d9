"""
Turning untrusted model replies back into a ResumeDocument.

Salvage order: strict parse of the whole reply, then the span from the first
"{" to the last "}". A strict success is never handed to the fallback.
"""
import json
import re
import logging
from typing import Any, Dict

from pydantic import ValidationError

from .errors import ContentParseError, SchemaValidationError
from .schemas import PersonalInfo, ResumeDocument

logger = logging.getLogger(__name__)

_JSON_FINDER = re.compile(r"\{.*\}", re.S)

# top-level key -> expected JSON container
REQUIRED_KEYS = {
    "personalInfo": dict,
    "experience": list,
    "education": list,
    "extraCurriculars": list,
    "skills": list,
}


def extract_json(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        pass

    m = _JSON_FINDER.search(raw)
    if not m:
        raise ContentParseError("No JSON object found in response", raw=raw)
    logger.warning("Model reply was not bare JSON; salvaging embedded object")
    try:
        return json.loads(m.group())
    except json.JSONDecodeError as e:
        raise ContentParseError(f"Could not parse JSON object in response: {e}", raw=raw)


def validate_document(data: Any, raw: str = None) -> ResumeDocument:
    if not isinstance(data, dict):
        raise SchemaValidationError(
            f"Expected a JSON object, got {type(data).__name__}", raw=raw
        )
    missing = [k for k in REQUIRED_KEYS if k not in data]
    if missing:
        raise SchemaValidationError(
            f"Response missing required fields: {', '.join(missing)}", raw=raw
        )
    for key, kind in REQUIRED_KEYS.items():
        if not isinstance(data[key], kind):
            raise SchemaValidationError(
                f"Field '{key}' must be {'an object' if kind is dict else 'an array'}", raw=raw
            )
    # every personalInfo key is echoed back and the summary is non-empty
    info_missing = [k for k in PersonalInfo.model_fields if k not in data["personalInfo"]]
    if info_missing:
        raise SchemaValidationError(
            f"Response missing personalInfo fields: {', '.join(info_missing)}", raw=raw
        )
    summary = data["personalInfo"]["summary"]
    if not isinstance(summary, str) or not summary.strip():
        raise SchemaValidationError("Response has an empty personalInfo.summary", raw=raw)
    try:
        return ResumeDocument.model_validate(data)
    except ValidationError as e:
        raise SchemaValidationError(f"Response does not match resume schema: {_first_error(e)}", raw=raw)


def parse_enhanced_document(raw: str) -> ResumeDocument:
    """Salvage-parse a model reply and validate it as a ResumeDocument."""
    return validate_document(extract_json(raw), raw=raw)


def _first_error(e: ValidationError) -> str:
    err: Dict[str, Any] = e.errors()[0]
    loc = ".".join(str(p) for p in err.get("loc", ()))
    return f"{loc}: {err.get('msg', 'invalid value')}"
