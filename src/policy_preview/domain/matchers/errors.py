from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from policy_preview.domain.matchers.models import Matcher


class MalformedMatcherError(ValueError):
    """Raised when a matcher has no label name or an unknown operator."""


class InvalidMatcherError(ValueError):
    """Raised when a regex matcher's value does not compile."""

    def __init__(self, matcher: "Matcher", reason: str) -> None:
        super().__init__(f"Invalid regular expression for label {matcher.name!r}: {matcher.value!r} ({reason})")
        self.matcher = matcher
        self.reason = reason
