from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    EMPTY_INPUT = "empty_input"
    SYNTAX = "syntax"
    STRUCTURAL = "structural"
    ELEMENT_TYPE = "element_type"
    FIELD_TYPE = "field_type"
    NUMBER_TOO_LONG = "number_too_long"


class KeywordValidationError(ValueError):
    """Raised when keyword input cannot be converted.

    `index` and `field` point at the offending array element, when there is one.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        index: Optional[int] = None,
        field: Optional[str] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.index = index
        self.field = field

    def __repr__(self) -> str:
        return (
            f"KeywordValidationError(kind={self.kind.value!r}, message={self.message!r}, "
            f"index={self.index!r}, field={self.field!r})"
        )
