from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, Sequence

from policy_preview.app.factory import create_preview_service
from policy_preview.app.serialization import preview_to_dict
from policy_preview.application.errors import PolicySourceError, UnknownInvalidMatcherModeError
from policy_preview.application.preview_service import INVALID_MATCHER_MODES
from policy_preview.domain.matchers.errors import InvalidMatcherError, MalformedMatcherError
from policy_preview.observability.logging import configure_logging


def parse_label(value: str) -> tuple[str, str]:
    key, sep, label_value = value.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"Label must be written as key=value: {value!r}")
    return key.strip(), label_value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Notification policy preview CLI")
    subparsers = parser.add_subparsers(dest="command")

    preview_parser = subparsers.add_parser("preview", help="Show which policies an alert's labels match")
    preview_parser.add_argument("--policies", dest="policies_file", help="JSON policies file (default: POLICIES_FILE)")
    preview_parser.add_argument(
        "--label",
        dest="labels",
        action="append",
        type=parse_label,
        default=[],
        help="Alert label as key=value; repeatable",
    )
    preview_parser.add_argument("--invalid-matchers", dest="invalid_matcher_mode", choices=INVALID_MATCHER_MODES)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command != "preview":
        parser.print_help()
        return 0

    labels = dict(args.labels)
    try:
        service = create_preview_service(
            policies_file=args.policies_file,
            invalid_matcher_mode=args.invalid_matcher_mode,
        )
        preview = service.preview(labels)
    except (
        InvalidMatcherError,
        MalformedMatcherError,
        PolicySourceError,
        UnknownInvalidMatcherModeError,
    ) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(json.dumps(preview_to_dict(preview), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
