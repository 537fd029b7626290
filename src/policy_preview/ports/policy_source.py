from __future__ import annotations

from typing import Protocol

from policy_preview.domain.routing.models import Policy


class PolicySource(Protocol):
    def load_policies(self) -> list[Policy]: ...
