from __future__ import annotations

from typing import Optional

from policy_preview.adapters.policies.file_policy_source import FilePolicySource
from policy_preview.adapters.policies.in_memory_policy_source import InMemoryPolicySource
from policy_preview.application.preview_service import PolicyPreviewService
from policy_preview.ports.policy_source import PolicySource
from policy_preview.settings import Settings, get_settings


def create_policy_source(policies_file: Optional[str] = None, settings: Optional[Settings] = None) -> PolicySource:
    """
    Pick the policy source for this process.

    An explicit file wins over POLICIES_FILE; with neither, an empty in-memory
    source is used and every preview falls back to the root route.
    """
    settings = settings or get_settings()
    path = policies_file or settings.policies_file
    if path:
        return FilePolicySource(path)
    return InMemoryPolicySource()


def create_preview_service(
    policies_file: Optional[str] = None,
    invalid_matcher_mode: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> PolicyPreviewService:
    settings = settings or get_settings()
    return PolicyPreviewService(
        policy_source=create_policy_source(policies_file, settings),
        invalid_matcher_mode=invalid_matcher_mode or settings.invalid_matcher_mode,
    )
