from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from policy_preview.domain.matchers.models import Matcher


@dataclass(frozen=True)
class Policy:
    """One notification-routing node: its matchers and optional contact point."""

    id: str
    matchers: tuple[Matcher, ...] = ()
    receiver: Optional[str] = None

    @staticmethod
    def new(id: str, matchers: Optional[list[Matcher]] = None, receiver: Optional[str] = None) -> "Policy":
        return Policy(id=id, matchers=tuple(matchers or ()), receiver=receiver or None)


@dataclass(frozen=True)
class ClassificationResult:
    """Policies split into those matching an alert's labels and the rest."""

    matching: tuple[Policy, ...]
    available: tuple[Policy, ...]


@dataclass(frozen=True)
class PolicyPreviewRow:
    """Display-ready description of a policy."""

    policy_id: str
    matchers_display: list[str]
    matches_all: bool
    contact_point: str


@dataclass(frozen=True)
class PolicyPreview:
    """Result of previewing an alert's labels against the policy collection."""

    matching: list[PolicyPreviewRow] = field(default_factory=list)
    available: list[PolicyPreviewRow] = field(default_factory=list)
    uses_root_route: bool = False
    excluded_policy_ids: list[str] = field(default_factory=list)
