"""Business logic services."""

from .discovery_service import DiscoveryService
from .match_service import MatchService
from .opportunity_service import OpportunityService
from .organization_service import OrganizationService
from .volunteer_service import VolunteerService
