"""Pydantic models for API requests and responses."""

from policy_preview.app.api.models.preview import (
    LabelPair,
    MatcherField,
    PolicyInput,
    PolicyPreviewResponse,
    PolicyPreviewRowResponse,
    PreviewRequest,
)

__all__ = [
    "LabelPair",
    "MatcherField",
    "PolicyInput",
    "PreviewRequest",
    "PolicyPreviewRowResponse",
    "PolicyPreviewResponse",
]
