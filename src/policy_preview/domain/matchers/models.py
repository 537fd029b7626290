from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from policy_preview.domain.matchers.errors import MalformedMatcherError

LabelSet = Mapping[str, str]


class MatchOperator(str, Enum):
    """Alertmanager matcher operators, valued by their textual token."""

    EQUAL = "="
    NOT_EQUAL = "!="
    REGEX_MATCH = "=~"
    REGEX_NOT_MATCH = "!~"

    @property
    def is_regex(self) -> bool:
        return self in (MatchOperator.REGEX_MATCH, MatchOperator.REGEX_NOT_MATCH)

    @property
    def is_negative(self) -> bool:
        return self in (MatchOperator.NOT_EQUAL, MatchOperator.REGEX_NOT_MATCH)


@dataclass(frozen=True)
class Matcher:
    """A single (label name, operator, value) predicate against one alert label."""

    name: str
    operator: MatchOperator
    value: str = ""

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise MalformedMatcherError("Matcher label name must be non-empty")
        if not isinstance(self.operator, MatchOperator):
            raise MalformedMatcherError(f"Unsupported matcher operator: {self.operator!r}")
