#!/usr/bin/env python3
"""
Score Components - the individual sub-scores of a match.

- Skill compatibility: share of the required skills the volunteer has
- Distance score: 100 minus a fixed penalty per kilometer, floored at 0
- Availability score: constant until availability is modelled

Each component is on a 0-100 scale before weighting.
"""

from typing import Iterable, List

from core.scorer.policy import (
    AVAILABILITY_SCORE,
    DISTANCE_PENALTY_PER_KM,
    MAX_COMPONENT_SCORE,
)


def find_common_skills(
    volunteer_skills: Iterable[str],
    required_skills: Iterable[str]
) -> List[str]:
    """
    Skills the volunteer has that the opportunity requires.

    Exact, case-sensitive comparison. Keeps the volunteer's order and drops
    repeated labels.
    """
    required = set(required_skills)
    common = []
    seen = set()
    for skill in volunteer_skills:
        if skill in required and skill not in seen:
            common.append(skill)
            seen.add(skill)
    return common


def calculate_skill_compatibility(
    common_skills: List[str],
    required_skills: Iterable[str]
) -> float:
    """
    Calculate skill compatibility percentage.

    Formula: 100 * |common| / |required|, or 0.0 when nothing is required.

    Returns:
        Compatibility (0.0-100.0)
    """
    required_total = len(set(required_skills))
    if required_total == 0:
        return 0.0
    return len(common_skills) / required_total * MAX_COMPONENT_SCORE


def calculate_distance_score(distance: float) -> float:
    """Distance score (0.0-100.0): loses DISTANCE_PENALTY_PER_KM per km."""
    return max(0.0, MAX_COMPONENT_SCORE - distance * DISTANCE_PENALTY_PER_KM)


def calculate_availability_score(is_available: bool = True) -> float:
    # Every volunteer is treated as available for now.
    return AVAILABILITY_SCORE
