"""
Social Identity Engine — Value resolution

Turns one raw answer field into a Likert value 1-5 or ``None``.  ``None``
means "no data": the item contributes nothing downstream, which is different
from a neutral answer of 3.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping

from social_identity.schemas.scoring_config import ScoringConfig

LIKERT_MIN: int = 1
LIKERT_MAX: int = 5

_LEADING_INTEGER_RE = re.compile(r"^\s*([+-]?\d+)")


def resolve_value(
    field: str,
    responses: Mapping[str, Any],
    config: ScoringConfig,
) -> int | None:
    """Resolve ``responses[field]`` to an integer in 1-5, or ``None``.

    Ordinal fields are looked up by exact text in their map.  Every other
    field is read as a leading integer; booleans, empty or non-numeric text
    and anything outside 1-5 resolve to ``None``.
    """
    raw = responses.get(field)

    ordinal_map = config.ordinal_maps.get(field)
    if ordinal_map is not None:
        if not isinstance(raw, str):
            return None
        return ordinal_map.get(raw)

    value = _parse_integer(raw)
    if value is None or not LIKERT_MIN <= value <= LIKERT_MAX:
        return None
    return value


def _parse_integer(raw: Any) -> int | None:
    """Leading-integer parse: ``"4"``, ``" 4 "``, ``"4.0"`` and ``"4abc"`` give 4.

    Numbers truncate toward zero (``3.5`` gives 3) the same way their text
    form does.  Text without leading digits, booleans and non-finite floats
    give ``None``.
    """
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    if isinstance(raw, str):
        match = _LEADING_INTEGER_RE.match(raw)
        return int(match.group(1)) if match else None
    return None
