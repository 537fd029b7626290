from __future__ import annotations

import re
from typing import Sequence

from policy_preview.domain.matchers.errors import InvalidMatcherError
from policy_preview.domain.matchers.models import LabelSet, Matcher


def compile_matcher_pattern(matcher: Matcher) -> re.Pattern[str]:
    """
    Compile the regular expression carried by a regex matcher.

    Raises:
        InvalidMatcherError: If the value is not a valid regular expression
    """
    try:
        return re.compile(matcher.value)
    except re.error as e:
        raise InvalidMatcherError(matcher, str(e)) from e


def evaluate_matcher(labels: LabelSet, matcher: Matcher) -> bool:
    """
    Decide whether a single matcher is satisfied by a label set.

    An absent label compares as the empty string. Regex operators search for a
    match anywhere in the label value rather than requiring a full match.

    Args:
        labels: Alert labels keyed by label name
        matcher: Matcher to evaluate

    Returns:
        True if the label value satisfies the matcher

    Raises:
        InvalidMatcherError: If a regex matcher's value does not compile
    """
    value = labels.get(matcher.name, "")

    if matcher.operator.is_regex:
        matched = compile_matcher_pattern(matcher).search(value) is not None
    else:
        matched = value == matcher.value

    if matcher.operator.is_negative:
        return not matched
    return matched


def evaluate_all(labels: LabelSet, matchers: Sequence[Matcher]) -> bool:
    """
    Decide whether every matcher in a sequence is satisfied by a label set.

    A policy without matchers is the root-route case and matches all alert
    instances.
    """
    if len(matchers) == 0:
        return True

    for matcher in matchers:
        if not evaluate_matcher(labels, matcher):
            return False
    return True
