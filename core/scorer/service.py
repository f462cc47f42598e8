#!/usr/bin/env python3
"""
Scoring Service - composite match score for a volunteer and an opportunity.

Final score = round(0.4 * skill compatibility
                    + 0.3 * distance score
                    + 0.3 * availability score)

A pure function of the pair: no collection context, no storage, no logging.
Missing locations are not an error; they just produce a large distance and
a low distance score.
"""

from typing import Optional

from core.geo import distance_km
from core.models import Opportunity, VolunteerProfile
from core.utils import round_half_up
from core.scorer.models import MatchScore, MatchResult
from core.scorer.policy import SKILL_WEIGHT, DISTANCE_WEIGHT, AVAILABILITY_WEIGHT
from core.scorer import components

UNKNOWN_ORGANIZATION = "unknown"


def calculate_match_score(
    volunteer: VolunteerProfile,
    opportunity: Opportunity
) -> MatchScore:
    """
    Score one (volunteer, opportunity) pair.

    Args:
        volunteer: Volunteer snapshot
        opportunity: Opportunity snapshot

    Returns:
        MatchScore with the integer score (0-100), rounded skill
        compatibility, distance rounded to 0.1 km and the shared skills
    """
    common_skills = components.find_common_skills(
        volunteer.skills, opportunity.required_skills
    )
    skill_compatibility = components.calculate_skill_compatibility(
        common_skills, opportunity.required_skills
    )

    distance = distance_km(volunteer.coordinate, opportunity.coordinate)
    distance_score = components.calculate_distance_score(distance)

    availability_score = components.calculate_availability_score(volunteer.is_available)

    final_score = (
        SKILL_WEIGHT * skill_compatibility
        + DISTANCE_WEIGHT * distance_score
        + AVAILABILITY_WEIGHT * availability_score
    )

    return MatchScore(
        score=int(round_half_up(final_score)),
        skill_compatibility=int(round_half_up(skill_compatibility)),
        distance_km=round_half_up(distance, 1),
        common_skills=common_skills,
        raw_skill_compatibility=skill_compatibility,
        distance_score=distance_score,
        availability_score=availability_score,
    )


def build_match_result(
    opportunity: Opportunity,
    match_score: MatchScore,
    organization_name: Optional[str] = None
) -> MatchResult:
    """Attach the opportunity's display fields to its score."""
    return MatchResult(
        opportunity_id=opportunity.id,
        score=match_score.score,
        skill_compatibility=match_score.skill_compatibility,
        distance_km=match_score.distance_km,
        common_skills=list(match_score.common_skills),
        title=opportunity.title,
        description=opportunity.description,
        organization_name=organization_name or UNKNOWN_ORGANIZATION,
        location=opportunity.location,
        vacancies=opportunity.vacancies,
    )
