from __future__ import annotations

from policy_preview.domain.routing.classifier import classify
from policy_preview.domain.routing.models import (
    ClassificationResult,
    Policy,
    PolicyPreview,
    PolicyPreviewRow,
)
from policy_preview.domain.routing.preview import (
    MATCHES_ALL_TEXT,
    NO_CONTACT_POINT,
    ROOT_ROUTE_TITLE,
    build_policy_preview,
    build_preview_row,
)

__all__ = [
    "Policy",
    "ClassificationResult",
    "PolicyPreview",
    "PolicyPreviewRow",
    "classify",
    "build_preview_row",
    "build_policy_preview",
    "MATCHES_ALL_TEXT",
    "NO_CONTACT_POINT",
    "ROOT_ROUTE_TITLE",
]
