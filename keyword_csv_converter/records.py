from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Union

Number = Union[int, float]

KEYWORD_FIELD = "keyword"
SEARCH_VOLUME_FIELD = "search_volume"


@dataclass(frozen=True)
class KeywordRecord:
    keyword: str
    search_volume: Number

    @classmethod
    def from_dict(cls, item: Dict[str, Any]) -> "KeywordRecord":
        return cls(item[KEYWORD_FIELD], item[SEARCH_VOLUME_FIELD])

    def to_dict(self) -> Dict[str, Any]:
        return {KEYWORD_FIELD: self.keyword, SEARCH_VOLUME_FIELD: self.search_volume}


def is_json_number(value: Any) -> bool:
    # bool is an int subclass but decodes from JSON true/false, not a number.
    return isinstance(value, (int, float)) and not isinstance(value, bool)
