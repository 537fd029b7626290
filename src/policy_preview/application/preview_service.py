from __future__ import annotations

import logging
from typing import Optional, Sequence

from policy_preview.application.errors import UnknownInvalidMatcherModeError
from policy_preview.domain.matchers.errors import InvalidMatcherError
from policy_preview.domain.matchers.evaluator import evaluate_all
from policy_preview.domain.matchers.models import LabelSet
from policy_preview.domain.routing.models import Policy, PolicyPreview
from policy_preview.domain.routing.preview import build_policy_preview
from policy_preview.ports.policy_source import PolicySource

logger = logging.getLogger(__name__)

MODE_FAIL = "fail"
MODE_EXCLUDE = "exclude"
INVALID_MATCHER_MODES = (MODE_FAIL, MODE_EXCLUDE)


class PolicyPreviewService:
    """
    Previews which notification policies an alert's labels would match.

    The invalid matcher mode decides what happens when a policy's matchers
    cannot be evaluated:
    - "fail": InvalidMatcherError propagates and no preview is produced
    - "exclude": the policy is left out of both buckets and reported in
      PolicyPreview.excluded_policy_ids
    """

    def __init__(self, policy_source: Optional[PolicySource] = None, invalid_matcher_mode: str = MODE_FAIL) -> None:
        if invalid_matcher_mode not in INVALID_MATCHER_MODES:
            raise UnknownInvalidMatcherModeError(
                f"Invalid matcher mode {invalid_matcher_mode!r}; expected one of {', '.join(INVALID_MATCHER_MODES)}"
            )
        self.policy_source = policy_source
        self.invalid_matcher_mode = invalid_matcher_mode

    def preview(self, labels: LabelSet, policies: Optional[Sequence[Policy]] = None) -> PolicyPreview:
        """
        Build a preview for labels against the given policies, or the source's.

        Raises:
            InvalidMatcherError: In "fail" mode, when a policy's regex does not compile
            PolicySourceError: When no policies are given and the source cannot load them
        """
        if policies is None:
            if self.policy_source is None:
                policies = []
            else:
                policies = self.policy_source.load_policies()

        has_policies = len(policies) > 0
        excluded: list[str] = []
        if self.invalid_matcher_mode == MODE_EXCLUDE:
            policies, excluded = self._drop_unevaluable(labels, policies)

        preview = build_policy_preview(labels, policies, excluded_policy_ids=excluded, has_policies=has_policies)
        logger.debug(
            f"Previewed {len(policies)} policies: {len(preview.matching)} matching, "
            f"{len(preview.available)} available, {len(excluded)} excluded"
        )
        return preview

    def _drop_unevaluable(self, labels: LabelSet, policies: Sequence[Policy]) -> tuple[list[Policy], list[str]]:
        kept: list[Policy] = []
        excluded: list[str] = []
        for policy in policies:
            try:
                evaluate_all(labels, policy.matchers)
            except InvalidMatcherError as e:
                logger.warning(f"Excluding policy {policy.id} from preview: {e}")
                excluded.append(policy.id)
                continue
            kept.append(policy)
        return kept, excluded
