import json

import pytest

from resume_builder.errors import ContentParseError, SchemaValidationError
from resume_builder.parsing import extract_json, parse_enhanced_document, validate_document
from resume_builder.sample import SAMPLE_RESUME


def test_strict_json_reply_parses():
    doc = parse_enhanced_document(json.dumps(SAMPLE_RESUME))
    assert doc.model_dump() == SAMPLE_RESUME


class _NoSalvage:
    def search(self, raw):
        raise AssertionError("bracket salvage must not run for valid JSON")


def test_strict_parse_takes_precedence_over_salvage(monkeypatch):
    from resume_builder import parsing

    monkeypatch.setattr(parsing, "_JSON_FINDER", _NoSalvage())
    data = json.loads(json.dumps(SAMPLE_RESUME))
    data["personalInfo"]["summary"] = "} uses {braces} {"
    doc = parse_enhanced_document(json.dumps(data))
    assert doc.personalInfo.summary == "} uses {braces} {"


def test_strict_non_object_is_not_salvaged():
    # A JSON string that happens to contain an object is still a string
    raw = json.dumps(json.dumps(SAMPLE_RESUME))
    with pytest.raises(SchemaValidationError):
        parse_enhanced_document(raw)


def test_prose_around_object_is_salvaged():
    raw = f"Sure! Here is your improved resume:\n{json.dumps(SAMPLE_RESUME)}\nHope that helps."
    doc = parse_enhanced_document(raw)
    assert doc.personalInfo.name == "Alex Thompson"
    assert len(doc.experience) == 2


def test_markdown_fenced_reply_is_salvaged():
    raw = "```json\n" + json.dumps(SAMPLE_RESUME, indent=2) + "\n```"
    assert parse_enhanced_document(raw).skills == SAMPLE_RESUME["skills"]


def test_reply_without_object_raises_with_raw_text():
    with pytest.raises(ContentParseError) as exc:
        extract_json("I cannot help with that.")
    assert exc.value.raw == "I cannot help with that."
    assert exc.value.details == "I cannot help with that."


def test_unparseable_braces_raise_content_parse_error():
    raw = "Result: {personalInfo: oops} done"
    with pytest.raises(ContentParseError) as exc:
        parse_enhanced_document(raw)
    assert exc.value.raw == raw


@pytest.mark.parametrize("key", ["personalInfo", "experience", "education", "extraCurriculars", "skills"])
def test_missing_top_level_key_is_rejected(key):
    data = dict(SAMPLE_RESUME)
    del data[key]
    with pytest.raises(SchemaValidationError) as exc:
        validate_document(data)
    assert key in exc.value.message


def test_array_where_object_expected_is_rejected():
    data = dict(SAMPLE_RESUME, personalInfo=[SAMPLE_RESUME["personalInfo"]])
    with pytest.raises(SchemaValidationError):
        validate_document(data)


def test_object_where_array_expected_is_rejected():
    data = dict(SAMPLE_RESUME, skills={"core": ["Python"]})
    with pytest.raises(SchemaValidationError):
        validate_document(data)


def test_non_object_entry_is_rejected():
    data = dict(SAMPLE_RESUME, experience=["Senior engineer at TechCorp"])
    with pytest.raises(SchemaValidationError):
        validate_document(data)


def test_top_level_array_is_rejected():
    with pytest.raises(SchemaValidationError):
        parse_enhanced_document(json.dumps([SAMPLE_RESUME]))


def test_numbers_and_nulls_are_coerced_and_extras_dropped():
    data = json.loads(json.dumps(SAMPLE_RESUME))
    data["education"][0]["gpa"] = 3.8
    data["education"][1]["gpa"] = None
    data["experience"][0]["highlights"] = ["extra"]
    data["notes"] = "not part of the resume"
    doc = validate_document(data)
    assert doc.education[0].gpa == "3.8"
    assert doc.education[1].gpa == ""
    assert "highlights" not in doc.experience[0].model_dump()
    assert set(doc.model_dump()) == {"personalInfo", "experience", "education", "extraCurriculars", "skills"}


def test_partial_personal_info_is_rejected():
    data = dict(SAMPLE_RESUME, personalInfo={"summary": "Better summary"})
    with pytest.raises(SchemaValidationError) as exc:
        validate_document(data)
    for key in ("name", "email", "phone", "location"):
        assert key in exc.value.message


@pytest.mark.parametrize("summary", ["", "   ", None])
def test_empty_summary_is_rejected(summary):
    data = json.loads(json.dumps(SAMPLE_RESUME))
    data["personalInfo"]["summary"] = summary
    with pytest.raises(SchemaValidationError) as exc:
        validate_document(data)
    assert "summary" in exc.value.message
