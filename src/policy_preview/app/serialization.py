from __future__ import annotations

from dataclasses import asdict
from typing import Any

from policy_preview.domain.routing.models import PolicyPreview
from policy_preview.domain.routing.preview import ROOT_ROUTE_TITLE


def preview_to_dict(preview: PolicyPreview) -> dict[str, Any]:
    """Plain-data form of a preview shared by the CLI and the HTTP API."""
    data = asdict(preview)
    data["root_route_title"] = ROOT_ROUTE_TITLE if preview.uses_root_route else None
    return data
