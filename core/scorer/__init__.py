#!/usr/bin/env python3
"""
Scoring Module - composite match score for a volunteer/opportunity pair.

Public API:
- calculate_match_score: Score one pair
- build_match_result: Attach display fields to a score
- MatchScore, MatchResult: Result dataclasses

- policy.py: Fixed weights and thresholds
- components.py: Skill, distance and availability sub-scores
- models.py: Data structures (MatchScore, MatchResult)
- service.py: Score orchestration
"""

from core.scorer.models import MatchScore, MatchResult
from core.scorer.service import (
    UNKNOWN_ORGANIZATION,
    calculate_match_score,
    build_match_result,
)

__all__ = [
    'MatchScore',
    'MatchResult',
    'UNKNOWN_ORGANIZATION',
    'calculate_match_score',
    'build_match_result',
]
