from __future__ import annotations

import json
import logging
from typing import Any, List, Optional

from .errors import ErrorKind, KeywordValidationError
from .records import KEYWORD_FIELD, SEARCH_VOLUME_FIELD, KeywordRecord, is_json_number

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise ValueError(f"{name} is not a valid JSON value")


def _parse_int(digits: str) -> int:
    try:
        return int(digits)
    except ValueError as exc:
        # Valid JSON, but past the interpreter's int string conversion limit.
        raise KeywordValidationError(
            ErrorKind.NUMBER_TOO_LONG,
            f"Number with {len(digits.lstrip('-'))} digits is too long to convert",
        ) from exc


def decode_json_text(raw: Optional[str]) -> Any:
    """Decode raw input text as JSON.

    Blank input, malformed JSON and documents nested too deeply to decode
    raise KeywordValidationError. NaN/Infinity literals are rejected since
    they are not part of JSON.
    """
    if raw is None or not raw.strip():
        raise KeywordValidationError(ErrorKind.EMPTY_INPUT, "Please enter some data")

    try:
        return json.loads(raw, parse_constant=_reject_constant, parse_int=_parse_int)
    except KeywordValidationError:
        raise
    except ValueError as exc:
        # json.JSONDecodeError is a ValueError subclass.
        raise KeywordValidationError(ErrorKind.SYNTAX, str(exc)) from exc
    except RecursionError as exc:
        raise KeywordValidationError(ErrorKind.SYNTAX, "Input is nested too deeply to parse") from exc


def validate_keyword_item(item: Any, index: int) -> KeywordRecord:
    if not isinstance(item, dict):
        raise KeywordValidationError(
            ErrorKind.ELEMENT_TYPE,
            f"Item at index {index} is not an object",
            index=index,
        )

    for field, accepts in (
        (KEYWORD_FIELD, lambda v: isinstance(v, str)),
        (SEARCH_VOLUME_FIELD, is_json_number),
    ):
        if not accepts(item.get(field)):
            raise KeywordValidationError(
                ErrorKind.FIELD_TYPE,
                f"Item at index {index} missing or invalid '{field}' field",
                index=index,
                field=field,
            )

    return KeywordRecord.from_dict(item)


def validate_keywords(data: Any) -> List[KeywordRecord]:
    """Validate decoded JSON against the keyword schema, stopping at the first bad item."""
    if not isinstance(data, list):
        raise KeywordValidationError(ErrorKind.STRUCTURAL, "Input must be an array")
    return [validate_keyword_item(item, i) for i, item in enumerate(data)]


def parse_keywords(raw: Optional[str]) -> List[KeywordRecord]:
    """Parse raw JSON text into keyword records, preserving input order."""
    records = validate_keywords(decode_json_text(raw))
    logger.debug("Parsed %d keyword records", len(records))
    return records
