#!/usr/bin/env python3
"""
Matcher Service - personalized ranking of opportunities for one volunteer.

Pipeline:
1. Keep active opportunities
2. Score each with calculate_match_score
3. Stable sort by score, highest first (ties keep collection order)
4. Drop everything at or below MIN_MATCH_SCORE

No pagination is applied; callers can paginate the returned list.
"""

from typing import Iterable, List, Optional

from core.models import Opportunity, VolunteerProfile
from core.scorer import MatchResult, calculate_match_score, build_match_result
from core.scorer.policy import MIN_MATCH_SCORE
from core.discovery.service import OrganizationResolver


def rank_opportunities(
    volunteer: VolunteerProfile,
    opportunities: Iterable[Opportunity],
    resolve_organization_name: Optional[OrganizationResolver] = None,
    min_score: int = MIN_MATCH_SCORE
) -> List[MatchResult]:
    """
    Rank opportunities for a volunteer.

    Args:
        volunteer: Volunteer snapshot (must exist; lookup failures belong
            to the caller)
        opportunities: Opportunity collection in its stored order
        resolve_organization_name: Display-name lookup for results
        min_score: Exclusive threshold; results must score above it

    Returns:
        MatchResults sorted by score descending, all with score > min_score
    """
    results = []
    for opportunity in opportunities:
        if not opportunity.is_active:
            continue

        match_score = calculate_match_score(volunteer, opportunity)
        organization_name = (
            resolve_organization_name(opportunity.organization_id)
            if resolve_organization_name else None
        )
        results.append(build_match_result(opportunity, match_score, organization_name))

    # list.sort is stable, so equal scores keep the input order
    results.sort(key=lambda result: result.score, reverse=True)

    return [result for result in results if result.score > min_score]
