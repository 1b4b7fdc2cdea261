from __future__ import annotations

"""Evaluate compiled patterns against arbitrary text."""

import logging
import re

from src.topics.errors import PatternConsistencyError
from src.topics.types import MatchResult, MatchSpan, Pattern

logger = logging.getLogger(__name__)


def evaluate(pattern: Pattern, text: str) -> MatchResult:
    """Collect match spans per group and apply AND semantics across groups."""
    if not pattern.groups:
        error = PatternConsistencyError(f"Pattern {pattern.name!r} has no groups")
        logger.error(
            "pattern_consistency_error",
            extra={"pattern_name": pattern.name},
        )
        return MatchResult(matched_groups={}, overall_match=False, error=error)

    matched: dict[int, list[MatchSpan]] = {}
    for idx, clause in enumerate(pattern.expression.clauses):
        matched[idx] = find_spans(clause, text)
    overall = all(matched[idx] for idx in matched)
    logger.debug(
        "pattern_evaluated",
        extra={
            "pattern_name": pattern.name,
            "groups": len(pattern.groups),
            "matched": overall,
        },
    )
    return MatchResult(matched_groups=matched, overall_match=overall)


def find_spans(clause: str, text: str) -> list[MatchSpan]:
    """Return non-overlapping matches of a clause, leftmost first."""
    if not text:
        return []
    return [MatchSpan(start=match.start(), end=match.end()) for match in re.finditer(clause, text)]
