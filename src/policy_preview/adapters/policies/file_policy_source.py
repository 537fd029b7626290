from __future__ import annotations

import json
import logging
from pathlib import Path

from policy_preview.adapters.policies.document import policies_from_document
from policy_preview.application.errors import PolicySourceError
from policy_preview.domain.routing.models import Policy
from policy_preview.ports.policy_source import PolicySource

logger = logging.getLogger(__name__)


class FilePolicySource(PolicySource):
    """Loads a policy collection from a JSON document on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load_policies(self) -> list[Policy]:
        if not self.path.exists():
            raise PolicySourceError(f"Policies file not found: {self.path}", source=str(self.path))

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise PolicySourceError(f"Invalid JSON in {self.path}: {e}", source=str(self.path)) from e
        except (OSError, UnicodeDecodeError) as e:
            raise PolicySourceError(f"Cannot read policies file {self.path}: {e}", source=str(self.path)) from e

        try:
            policies = policies_from_document(data)
        except ValueError as e:
            raise PolicySourceError(f"Invalid policies file {self.path}: {e}", source=str(self.path)) from e

        logger.info(f"Loaded {len(policies)} policies from {self.path}")
        return policies
