class PolicySourceError(Exception):
    """Raised when the policy collection cannot be loaded."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class UnknownInvalidMatcherModeError(ValueError):
    pass


class DuplicatePolicyIdError(ValueError):
    """Raised when two policies in one collection share an id."""

    def __init__(self, policy_id: str) -> None:
        super().__init__(f"Duplicate policy id: {policy_id}")
        self.policy_id = policy_id
