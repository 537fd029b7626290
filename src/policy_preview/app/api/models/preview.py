"""Pydantic models for policy preview requests and responses."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field


class LabelPair(BaseModel):
    """One row of the alert label editor."""

    key: str
    value: str = ""


class MatcherField(BaseModel):
    """Editable matcher as produced by the policy form."""

    name: str
    operator: str = Field(..., description="=, !=, =~ or !~")
    value: str = ""


class PolicyInput(BaseModel):
    """A notification policy supplied inline with a preview request."""

    id: str
    matchers: list[MatcherField] = Field(default_factory=list)
    receiver: str | None = None


class PreviewRequest(BaseModel):
    labels: Union[list[LabelPair], dict[str, str]] = Field(default_factory=dict)
    policies: list[PolicyInput] | None = Field(
        None, description="Policies to preview against; the configured policies file is used when omitted"
    )


class PolicyPreviewRowResponse(BaseModel):
    policy_id: str
    matchers_display: list[str]
    matches_all: bool
    contact_point: str


class PolicyPreviewResponse(BaseModel):
    matching: list[PolicyPreviewRowResponse] = Field(default_factory=list)
    available: list[PolicyPreviewRowResponse] = Field(default_factory=list)
    uses_root_route: bool = False
    root_route_title: str | None = None
    excluded_policy_ids: list[str] = Field(default_factory=list)
