from __future__ import annotations

"""
Label matcher evaluation.

Pure functions deciding whether alert labels satisfy alertmanager-style
matchers, plus the parsing helpers that turn editable matcher fields and
matcher strings into Matcher values.
"""

from policy_preview.domain.matchers.errors import InvalidMatcherError, MalformedMatcherError
from policy_preview.domain.matchers.evaluator import evaluate_all, evaluate_matcher
from policy_preview.domain.matchers.models import LabelSet, Matcher, MatchOperator
from policy_preview.domain.matchers.parsing import (
    format_matcher,
    labels_from_pairs,
    matcher_from_field,
    parse_matcher,
    parse_operator,
)

__all__ = [
    # Models
    "LabelSet",
    "Matcher",
    "MatchOperator",
    # Errors
    "InvalidMatcherError",
    "MalformedMatcherError",
    # Evaluation
    "evaluate_matcher",
    "evaluate_all",
    # Parsing
    "parse_operator",
    "parse_matcher",
    "matcher_from_field",
    "format_matcher",
    "labels_from_pairs",
]
