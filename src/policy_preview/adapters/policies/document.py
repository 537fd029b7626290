"""JSON representation of a policy collection."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

import jsonschema

from policy_preview.application.errors import DuplicatePolicyIdError
from policy_preview.domain.matchers.parsing import matcher_from_field
from policy_preview.domain.routing.models import Policy

MATCHER_FIELD_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["name", "operator"],
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "operator": {"type": "string", "enum": ["=", "!=", "=~", "!~"]},
        "value": {"type": ["string", "null"]},
    },
}

POLICY_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["id"],
    "properties": {
        "id": {"type": "string", "minLength": 1},
        "matchers": {"type": "array", "items": MATCHER_FIELD_SCHEMA},
        "receiver": {"type": ["string", "null"]},
    },
}

POLICY_DOCUMENT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["policies"],
    "properties": {
        "policies": {"type": "array", "items": POLICY_SCHEMA},
    },
}


def validate_policy_document(data: Any) -> None:
    """
    Validate a policy document against POLICY_DOCUMENT_SCHEMA.

    Raises:
        ValueError: If the document does not conform
    """
    try:
        jsonschema.validate(instance=data, schema=POLICY_DOCUMENT_SCHEMA)
    except jsonschema.ValidationError as e:
        raise ValueError(f"JSON validation failed: {e.message}") from e


def policy_from_dict(data: Mapping[str, Any]) -> Policy:
    return Policy.new(
        id=str(data["id"]),
        matchers=[matcher_from_field(field) for field in data.get("matchers") or []],
        receiver=data.get("receiver"),
    )


def policies_from_document(data: Any) -> list[Policy]:
    """Validate a policy document and build its policies in document order."""
    validate_policy_document(data)
    policies = [policy_from_dict(item) for item in data["policies"]]
    ensure_unique_policy_ids(policies)
    return policies


def ensure_unique_policy_ids(policies: Sequence[Policy]) -> None:
    """
    Reject collections where two policies share an id.

    Raises:
        DuplicatePolicyIdError: On the first repeated id
    """
    seen: set[str] = set()
    for policy in policies:
        if policy.id in seen:
            raise DuplicatePolicyIdError(policy.id)
        seen.add(policy.id)
