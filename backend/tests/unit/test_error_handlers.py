"""Unit tests for validation-error formatting."""

from pydantic import ValidationError

from app.application.schemas import ArticleCreate
from app.presentation.api.error_handlers import format_validation_errors


def _errors_for(payload: dict) -> dict[str, list[str]]:
    try:
        ArticleCreate.model_validate(payload)
    except ValidationError as exc:
        # FastAPI prefixes body errors with "body"
        errors = [{**err, "loc": ("body", *err["loc"])} for err in exc.errors()]
        return format_validation_errors(errors)
    raise AssertionError("payload unexpectedly valid")


def test_missing_fields_are_reported_per_field():
    assert _errors_for({}) == {
        "title": ["The title field is required."],
        "content": ["The content field is required."],
    }


def test_too_long_title_message():
    errors = _errors_for({"title": "x" * 226, "content": "C"})
    assert errors == {"title": ["The title field must not be greater than 225 characters."]}


def test_custom_validator_message_is_unwrapped():
    errors = _errors_for({"title": "T", "content": "C", "published": "yes"})
    assert errors == {"published": ["The published field must be true or false."]}


def test_body_level_error_keeps_body_key():
    errors = format_validation_errors([{"type": "missing", "loc": ("body",), "msg": "Field required"}])
    assert errors == {"body": ["The body field is required."]}


def test_invalid_json_is_keyed_by_body_not_offset():
    errors = format_validation_errors(
        [{"type": "json_invalid", "loc": ("body", 26), "msg": "JSON decode error", "ctx": {"error": "Expecting value"}}]
    )
    assert errors == {"body": ["The request body must be valid JSON."]}


def test_non_string_location_parts_map_to_body():
    errors = format_validation_errors([{"type": "list_type", "loc": ("body", 0), "msg": "Input should be a valid list"}])
    assert errors == {"body": ["Input should be a valid list"]}
