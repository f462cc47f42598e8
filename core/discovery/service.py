#!/usr/bin/env python3
"""
Discovery Service - filter active opportunities for browsing.

No ranking happens here: results keep the order of the input collection.
"""

from typing import Any, Callable, Iterable, List, Optional

from core.geo import distance_km
from core.models import Opportunity
from core.utils import round_half_up
from core.scorer import UNKNOWN_ORGANIZATION
from core.discovery.models import DiscoveryFilters, OpportunityView

OrganizationResolver = Callable[[Any], Optional[str]]


def _no_resolver(organization_id: Any) -> Optional[str]:
    return None


def matches_skills(opportunity: Opportunity, skills: Optional[Iterable[str]]) -> bool:
    """True when no skill filter is set or any required skill is in it."""
    if skills is None:
        return True
    wanted = set(skills)
    return any(skill in wanted for skill in opportunity.required_skills)


def discover_opportunities(
    opportunities: Iterable[Opportunity],
    filters: Optional[DiscoveryFilters] = None,
    resolve_organization_name: Optional[OrganizationResolver] = None
) -> List[OpportunityView]:
    """
    Apply discovery filters to an opportunity collection.

    Args:
        opportunities: Full collection, in the order results should keep
        filters: Parsed filters; None means "active only"
        resolve_organization_name: Lookup for display names; a None or
            empty result becomes "unknown"

    Returns:
        Views of the surviving opportunities
    """
    filters = filters or DiscoveryFilters()
    resolve = resolve_organization_name or _no_resolver

    views = []
    for opportunity in opportunities:
        if not opportunity.is_active:
            continue

        if not matches_skills(opportunity, filters.skills):
            continue

        distance = None
        if filters.origin is not None:
            raw_distance = distance_km(filters.origin, opportunity.coordinate)
            if raw_distance > filters.radius_km:
                continue
            distance = round_half_up(raw_distance, 1)

        views.append(OpportunityView(
            opportunity=opportunity,
            organization_name=resolve(opportunity.organization_id) or UNKNOWN_ORGANIZATION,
            distance_km=distance,
        ))

    return views
