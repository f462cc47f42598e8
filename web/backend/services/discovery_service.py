#!/usr/bin/env python3
"""
Discovery service - filtered, paginated browsing of active opportunities.
"""

import logging
from typing import Any, Optional
from sqlalchemy.orm import Session

from core.models import Opportunity
from core.discovery import DiscoveryFilters, OpportunityView, discover_opportunities
from core.pagination import paginate
from database.repositories import OpportunityRepository, OrganizationRepository
from ..models.responses import DiscoveryResponse, OpportunitySummary, PaginationInfo
from ..utils import safe_datetime_iso

logger = logging.getLogger(__name__)


def to_opportunity_summary(
    opportunity: Opportunity,
    organization_name: str,
    distance_km: Optional[float] = None
) -> OpportunitySummary:
    """Convert an opportunity snapshot to its API representation."""
    return OpportunitySummary(
        id=opportunity.id,
        organization_id=opportunity.organization_id,
        title=opportunity.title,
        description=opportunity.description,
        required_skills=list(opportunity.required_skills),
        location=opportunity.location,
        latitude=opportunity.coordinate.latitude,
        longitude=opportunity.coordinate.longitude,
        schedule=dict(opportunity.schedule),
        vacancies=opportunity.vacancies,
        status=opportunity.status,
        created_at=safe_datetime_iso(opportunity.created_at),
        organization_name=organization_name,
        distance_km=distance_km,
    )


class DiscoveryService:
    """Service for browsing opportunities."""

    def __init__(self, db: Session):
        self.opportunities = OpportunityRepository(db)
        self.organizations = OrganizationRepository(db)

    def discover(
        self,
        skills: Optional[str] = None,
        latitude: Optional[Any] = None,
        longitude: Optional[Any] = None,
        radius: Optional[Any] = None,
        page: Optional[Any] = None,
        limit: Optional[Any] = None
    ) -> DiscoveryResponse:
        """
        Filter and paginate active opportunities.

        All arguments are raw query values; malformed ones are treated as
        absent rather than rejected.

        Returns:
            One page of opportunities with pagination metadata.
        """
        filters = DiscoveryFilters.from_query(
            skills=skills,
            latitude=latitude,
            longitude=longitude,
            radius=radius
        )

        snapshot = self.opportunities.get_active_opportunities()
        resolver = self.organizations.name_resolver(op.organization_id for op in snapshot)

        views = discover_opportunities(snapshot, filters, resolver)
        result_page = paginate(views, page, limit)

        logger.debug(
            f"Discovery: {len(snapshot)} active, {result_page.total_items} matched filters "
            f"(skills={sorted(filters.skills) if filters.skills else None}, "
            f"origin={filters.origin}, radius_km={filters.radius_km})"
        )

        return DiscoveryResponse(
            success=True,
            opportunities=[self._to_summary(view) for view in result_page.items],
            pagination=PaginationInfo(**result_page.to_pagination())
        )

    @staticmethod
    def _to_summary(view: OpportunityView) -> OpportunitySummary:
        return to_opportunity_summary(view.opportunity, view.organization_name, view.distance_km)
