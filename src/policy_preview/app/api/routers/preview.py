"""Router for the notification policy preview endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from policy_preview.adapters.policies.document import ensure_unique_policy_ids, policy_from_dict
from policy_preview.app.api.models.preview import PolicyPreviewResponse, PreviewRequest
from policy_preview.app.factory import create_preview_service
from policy_preview.app.serialization import preview_to_dict
from policy_preview.application.errors import (
    DuplicatePolicyIdError,
    PolicySourceError,
    UnknownInvalidMatcherModeError,
)
from policy_preview.application.preview_service import PolicyPreviewService
from policy_preview.domain.matchers.errors import InvalidMatcherError, MalformedMatcherError
from policy_preview.domain.matchers.parsing import labels_from_pairs
from policy_preview.settings import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def get_preview_service() -> PolicyPreviewService:
    """Dependency to provide PolicyPreviewService built from process settings."""
    try:
        return create_preview_service(settings=get_settings())
    except UnknownInvalidMatcherModeError as e:
        logger.error(f"Preview service misconfigured: {e}")
        raise HTTPException(status_code=503, detail={"error": "service_misconfigured", "message": str(e)})


@router.post("/policy-preview", response_model=PolicyPreviewResponse)
def preview_policies(
    req: PreviewRequest,
    service: PolicyPreviewService = Depends(get_preview_service),
) -> dict:
    """
    Preview which notification policies an alert with the given labels would match.

    Returns:
    - matching: policies whose matchers the labels satisfy, in policy order
    - available: the remaining policies, in policy order
    - uses_root_route: true when there are no policies and alerts use the root route

    An invalid regex in any matcher yields 422 with error "invalid_matcher"
    rather than an empty preview.
    """
    if isinstance(req.labels, dict):
        labels = dict(req.labels)
    else:
        labels = labels_from_pairs(pair.model_dump() for pair in req.labels)

    try:
        policies = None
        if req.policies is not None:
            policies = [policy_from_dict(p.model_dump()) for p in req.policies]
            ensure_unique_policy_ids(policies)
        preview = service.preview(labels, policies)
    except InvalidMatcherError as e:
        raise HTTPException(
            status_code=422,
            detail={
                "error": "invalid_matcher",
                "message": str(e),
                "matcher": {
                    "name": e.matcher.name,
                    "operator": e.matcher.operator.value,
                    "value": e.matcher.value,
                },
            },
        )
    except DuplicatePolicyIdError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": "duplicate_policy_id", "message": str(e), "policy_id": e.policy_id},
        )
    except MalformedMatcherError as e:
        raise HTTPException(status_code=422, detail={"error": "malformed_matcher", "message": str(e)})
    except PolicySourceError as e:
        logger.error(f"Could not load policies: {e}")
        raise HTTPException(status_code=503, detail={"error": "policy_source_unavailable", "message": str(e)})

    return preview_to_dict(preview)
