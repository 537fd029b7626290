from __future__ import annotations

from typing import Iterable, Optional

from policy_preview.domain.routing.models import Policy
from policy_preview.ports.policy_source import PolicySource


class InMemoryPolicySource(PolicySource):
    def __init__(self, policies: Optional[Iterable[Policy]] = None) -> None:
        self.policies = list(policies or [])

    def load_policies(self) -> list[Policy]:
        return list(self.policies)
