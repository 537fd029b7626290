from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Settings:
    """Runtime settings sourced from environment variables."""

    log_level: str = "INFO"
    # JSON file holding the policy collection served when a request carries none
    policies_file: Optional[str] = None
    # "fail" propagates invalid matchers, "exclude" drops the offending policy
    invalid_matcher_mode: str = "fail"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            policies_file=os.getenv("POLICIES_FILE") or None,
            invalid_matcher_mode=os.getenv("INVALID_MATCHER_MODE", cls.invalid_matcher_mode).lower(),
        )


def get_settings(_cache: dict[str, Settings] = {}) -> Settings:
    """Provide a simple cached settings object."""

    if "settings" not in _cache:
        _cache["settings"] = Settings.from_env()
    return _cache["settings"]
