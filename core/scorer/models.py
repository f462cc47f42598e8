#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring results.
"""

from typing import List, Any
from dataclasses import dataclass, field


@dataclass(frozen=True)
class MatchScore:
    """Score of one (volunteer, opportunity) pair with its sub-scores."""
    score: int
    skill_compatibility: int
    distance_km: float
    common_skills: List[str] = field(default_factory=list)

    # Unrounded components, kept for explainability and tests
    raw_skill_compatibility: float = 0.0
    distance_score: float = 0.0
    availability_score: float = 0.0


@dataclass(frozen=True)
class MatchResult:
    """A scored opportunity together with the fields needed to display it."""
    opportunity_id: Any
    score: int
    skill_compatibility: int
    distance_km: float
    common_skills: List[str]

    title: str
    description: str
    organization_name: str
    location: str
    vacancies: int
