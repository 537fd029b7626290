from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

from policy_preview.domain.matchers.errors import MalformedMatcherError
from policy_preview.domain.matchers.models import Matcher, MatchOperator

# Two-character operators must be tried before "=".
_MATCHER_RE = re.compile(r"^\s*([^\s=!~]+)\s*(=~|!~|!=|=)\s*(.*?)\s*$", re.DOTALL)


def parse_operator(token: str) -> MatchOperator:
    """Map an operator token ("=", "!=", "=~", "!~") to a MatchOperator."""
    try:
        return MatchOperator(token.strip())
    except ValueError as e:
        raise MalformedMatcherError(f"Unsupported matcher operator: {token!r}") from e


def matcher_from_field(field: Mapping[str, Any]) -> Matcher:
    """
    Convert an editable matcher field into a Matcher.

    Args:
        field: Mapping with "name", "operator" and optional "value" keys

    Returns:
        Matcher built from the field

    Raises:
        MalformedMatcherError: If the name is missing or the operator is unknown
    """
    name = field.get("name")
    if not isinstance(name, str) or not name.strip():
        raise MalformedMatcherError("Matcher field is missing a label name")
    operator = field.get("operator")
    if isinstance(operator, MatchOperator):
        op = operator
    elif isinstance(operator, str):
        op = parse_operator(operator)
    else:
        raise MalformedMatcherError(f"Matcher field for {name!r} has no operator")
    value = field.get("value")
    return Matcher(name=name.strip(), operator=op, value="" if value is None else str(value))


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        inner = value[1:-1]
        return re.sub(r'\\(["\\])', r"\1", inner)
    return value


def parse_matcher(text: str) -> Matcher:
    """
    Parse a matcher written as name<op>value, e.g. team=~"infra|ops".

    A double-quoted value is unquoted, honouring \\" and \\\\ escapes.
    """
    match = _MATCHER_RE.match(text)
    if not match:
        raise MalformedMatcherError(f"Cannot parse matcher: {text!r}")
    name, token, raw_value = match.groups()
    return Matcher(name=name, operator=parse_operator(token), value=_unquote(raw_value))


def format_matcher(matcher: Matcher) -> str:
    """Render a matcher for display, quoting its value."""
    escaped = matcher.value.replace("\\", "\\\\").replace('"', '\\"')
    return f'{matcher.name}{matcher.operator.value}"{escaped}"'


def labels_from_pairs(pairs: Iterable[Mapping[str, Any]]) -> dict[str, str]:
    """
    Fold ordered key/value rows into a label set.

    Later rows win on duplicate keys. Rows with an empty key are skipped.
    """
    labels: dict[str, str] = {}
    for pair in pairs:
        key = pair.get("key") or ""
        if not key:
            continue
        value = pair.get("value")
        labels[str(key)] = "" if value is None else str(value)
    return labels
