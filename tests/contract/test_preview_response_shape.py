from policy_preview.app.serialization import preview_to_dict
from policy_preview.domain.matchers.models import Matcher, MatchOperator
from policy_preview.domain.routing.models import Policy
from policy_preview.domain.routing.preview import ROOT_ROUTE_TITLE, build_policy_preview


def test_preview_dict_has_stable_keys():
    preview = build_policy_preview(
        {"team": "infra"},
        [Policy.new("p1", [Matcher("team", MatchOperator.EQUAL, "infra")], receiver="ops"), Policy.new("p2", [])],
    )

    data = preview_to_dict(preview)

    assert set(data) == {"matching", "available", "uses_root_route", "root_route_title", "excluded_policy_ids"}
    assert set(data["matching"][0]) == {"policy_id", "matchers_display", "matches_all", "contact_point"}
    assert data["root_route_title"] is None


def test_root_route_preview_dict_carries_title():
    data = preview_to_dict(build_policy_preview({}, []))

    assert data["uses_root_route"] is True
    assert data["root_route_title"] == ROOT_ROUTE_TITLE
