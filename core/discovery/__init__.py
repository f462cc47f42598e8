"""
Discovery Module - unranked filter/annotate pipeline over active opportunities.
"""

from core.discovery.models import DEFAULT_RADIUS_KM, DiscoveryFilters, OpportunityView
from core.discovery.service import OrganizationResolver, discover_opportunities, matches_skills

__all__ = [
    'DEFAULT_RADIUS_KM',
    'DiscoveryFilters',
    'OpportunityView',
    'OrganizationResolver',
    'discover_opportunities',
    'matches_skills',
]
