from __future__ import annotations

from typing import Sequence

from policy_preview.domain.matchers.evaluator import evaluate_all
from policy_preview.domain.matchers.models import LabelSet
from policy_preview.domain.routing.models import ClassificationResult, Policy


def classify(labels: LabelSet, policies: Sequence[Policy]) -> ClassificationResult:
    """
    Partition policies into those whose matchers the labels satisfy and the rest.

    The partition is stable: each output keeps the relative order the policies
    had in the input, since routing trees are ordered by priority.

    Args:
        labels: Alert labels keyed by label name
        policies: Ordered policy collection

    Returns:
        ClassificationResult with matching and available policies

    Raises:
        InvalidMatcherError: If any policy carries a regex matcher that does not
            compile. The policy is not dropped; the caller decides what to do.
    """
    matching: list[Policy] = []
    available: list[Policy] = []

    for policy in policies:
        if evaluate_all(labels, policy.matchers):
            matching.append(policy)
        else:
            available.append(policy)

    return ClassificationResult(matching=tuple(matching), available=tuple(available))
