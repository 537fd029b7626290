from __future__ import annotations

from typing import Optional, Sequence

from policy_preview.domain.matchers.models import LabelSet
from policy_preview.domain.matchers.parsing import format_matcher
from policy_preview.domain.routing.classifier import classify
from policy_preview.domain.routing.models import Policy, PolicyPreview, PolicyPreviewRow

MATCHES_ALL_TEXT = "Matches all alert instances"
NO_CONTACT_POINT = "-"
ROOT_ROUTE_TITLE = "Root route – default for all alerts"


def build_preview_row(policy: Policy) -> PolicyPreviewRow:
    """Describe a policy for display."""
    if len(policy.matchers) == 0:
        return PolicyPreviewRow(
            policy_id=policy.id,
            matchers_display=[MATCHES_ALL_TEXT],
            matches_all=True,
            contact_point=policy.receiver or NO_CONTACT_POINT,
        )

    return PolicyPreviewRow(
        policy_id=policy.id,
        matchers_display=[format_matcher(m) for m in policy.matchers],
        matches_all=False,
        contact_point=policy.receiver or NO_CONTACT_POINT,
    )


def build_policy_preview(
    labels: LabelSet,
    policies: Sequence[Policy],
    excluded_policy_ids: Sequence[str] = (),
    has_policies: Optional[bool] = None,
) -> PolicyPreview:
    """
    Classify policies against labels and render both buckets as preview rows.

    With no policies at all, alerts fall through to the root route and the
    preview says so instead of listing rows. Callers that filtered the
    collection beforehand pass has_policies for the unfiltered one, so
    policies that exist but were left out never read as the root route.
    """
    if has_policies is None:
        has_policies = len(policies) > 0

    if not has_policies:
        return PolicyPreview(uses_root_route=True, excluded_policy_ids=list(excluded_policy_ids))

    result = classify(labels, policies)
    return PolicyPreview(
        matching=[build_preview_row(p) for p in result.matching],
        available=[build_preview_row(p) for p in result.available],
        uses_root_route=False,
        excluded_policy_ids=list(excluded_policy_ids),
    )
