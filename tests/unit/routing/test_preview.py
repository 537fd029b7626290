from policy_preview.domain.matchers.evaluator import evaluate_all
from policy_preview.domain.matchers.models import Matcher, MatchOperator
from policy_preview.domain.routing.models import Policy
from policy_preview.domain.routing.preview import (
    MATCHES_ALL_TEXT,
    NO_CONTACT_POINT,
    build_policy_preview,
    build_preview_row,
)


def test_row_without_matchers_matches_all():
    """Test that a matcherless policy is shown as matching all alert instances."""
    row = build_preview_row(Policy.new("root-child", [], receiver="pagerduty"))

    assert row.matches_all is True
    assert row.matchers_display == [MATCHES_ALL_TEXT]
    assert row.contact_point == "pagerduty"


def test_matches_all_display_is_independent_of_evaluation():
    """Test that the display flag follows the matcher count, not the evaluation result."""
    policy = Policy.new("p", [Matcher("team", MatchOperator.EQUAL, "")])

    # Matches an empty label set, but it has a matcher so it is not "matches all".
    assert evaluate_all({}, policy.matchers) is True
    assert build_preview_row(policy).matches_all is False


def test_row_formats_matchers_in_order():
    """Test that matchers are rendered in policy order."""
    policy = Policy.new(
        "p",
        [
            Matcher("team", MatchOperator.EQUAL, "infra"),
            Matcher("region", MatchOperator.REGEX_MATCH, "^us-"),
        ],
    )

    row = build_preview_row(policy)

    assert row.matchers_display == ['team="infra"', 'region=~"^us-"']
    assert row.matches_all is False


def test_row_without_receiver_shows_dash():
    """Test that a missing contact point is shown as a dash."""
    assert build_preview_row(Policy.new("p", [])).contact_point == NO_CONTACT_POINT
    assert build_preview_row(Policy.new("p", [], receiver="")).contact_point == NO_CONTACT_POINT


def test_preview_without_policies_uses_root_route():
    """Test that the preview falls back to the root route when there are no policies."""
    preview = build_policy_preview({"team": "infra"}, [])

    assert preview.uses_root_route is True
    assert preview.matching == []
    assert preview.available == []


def test_preview_splits_policies():
    """Test that preview rows follow the classification buckets."""
    policies = [
        Policy.new("P1", [Matcher("team", MatchOperator.EQUAL, "infra")], receiver="infra-oncall"),
        Policy.new("P2", [Matcher("severity", MatchOperator.EQUAL, "warning")], receiver="email"),
        Policy.new("P3", []),
    ]

    preview = build_policy_preview({"team": "infra", "severity": "critical"}, policies)

    assert preview.uses_root_route is False
    assert [r.policy_id for r in preview.matching] == ["P1", "P3"]
    assert [r.policy_id for r in preview.available] == ["P2"]
    assert preview.matching[0].contact_point == "infra-oncall"
    assert preview.matching[1].matches_all is True


def test_preview_with_filtered_out_policies_is_not_root_route():
    """Test that has_policies describes the collection before filtering."""
    preview = build_policy_preview({}, [], excluded_policy_ids=["bad"], has_policies=True)

    assert preview.uses_root_route is False
    assert preview.excluded_policy_ids == ["bad"]
