"""
Social Identity Engine — Submission quality check

Flags submissions that look rushed or too sparse to trust:

- **fast_completion**: elapsed time given (0 included) and below the minimum (30 s).
- **low_completeness**: fewer than 60% of the scored fields resolve to 1-5.

The verdict is advisory; callers decide what to do with a suspect result.
"""

from __future__ import annotations

from typing import Any, Mapping

import structlog

from social_identity.config import get_settings
from social_identity.schemas.result import QualityAssessment
from social_identity.schemas.scoring_config import ScoringConfig
from social_identity.services.value_resolver import resolve_value

logger = structlog.get_logger("social_identity.quality_service")


class SubmissionQualityChecker:
    def __init__(self, config: ScoringConfig) -> None:
        settings = get_settings()
        self.config = config
        self.min_completion_seconds = settings.SUSPECT_MIN_COMPLETION_SECONDS
        self.min_answered_fraction = settings.SUSPECT_MIN_ANSWERED_FRACTION

    def is_suspect(
        self,
        responses: Mapping[str, Any],
        completion_seconds: float | None = None,
    ) -> bool:
        return self.assess(responses, completion_seconds).suspect

    def assess(
        self,
        responses: Mapping[str, Any],
        completion_seconds: float | None = None,
    ) -> QualityAssessment:
        """Return the suspect verdict with the completeness diagnostics.

        Only ``completion_seconds=None`` means "time not given"; an elapsed time
        of 0 is a real measurement and is below any positive threshold.
        """
        fields = self.config.scored_fields
        total = len(fields)
        answered = sum(
            1 for field in fields
            if resolve_value(field, responses, self.config) is not None
        )
        fraction = answered / total if total else 1.0

        reason: str | None = None
        if completion_seconds is not None and completion_seconds < self.min_completion_seconds:
            reason = "fast_completion"
        elif fraction < self.min_answered_fraction:
            reason = "low_completeness"

        if reason is not None:
            logger.debug(
                "submission_suspect",
                reason=reason,
                completion_seconds=completion_seconds,
                answered=answered,
                total=total,
            )

        return QualityAssessment(
            suspect=reason is not None,
            reason=reason,
            answered=answered,
            total=total,
            answered_fraction=round(fraction, 4),
        )
