#!/usr/bin/env python3
"""Validation script for notification policy JSON files.

Validates each given policies file against the policy document schema and
checks that every regex matcher compiles. Exits with error code if any
invalid files are found.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

from policy_preview.adapters.policies.document import policies_from_document
from policy_preview.domain.matchers.errors import InvalidMatcherError
from policy_preview.domain.matchers.evaluator import compile_matcher_pattern


def validate_policies_file(file_path: Path) -> tuple[bool, str | None]:
    """Validate a policies file and the regexes it carries."""
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        return False, f"Invalid JSON: {e}"
    except (OSError, UnicodeDecodeError) as e:
        return False, f"Cannot read file: {e}"

    try:
        policies = policies_from_document(data)
    except ValueError as e:
        return False, str(e)

    for policy in policies:
        for matcher in policy.matchers:
            if not matcher.operator.is_regex:
                continue
            try:
                compile_matcher_pattern(matcher)
            except InvalidMatcherError as e:
                return False, f"Policy {policy.id}: {e}"
    return True, None


def main(argv: list[str]) -> int:
    if not argv:
        print("usage: validate_policies.py FILE [FILE ...]", file=sys.stderr)
        return 2

    invalid = 0
    for arg in argv:
        path = Path(arg)
        if not path.exists():
            print(f"✗ {path}: file not found")
            invalid += 1
            continue
        ok, error = validate_policies_file(path)
        if ok:
            print(f"✓ {path}")
        else:
            print(f"✗ {path}: {error}")
            invalid += 1

    if invalid:
        print(f"\n{invalid} invalid file(s)")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
