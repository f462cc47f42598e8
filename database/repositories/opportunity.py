import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select

from core.geo import Coordinate
from core.models import Opportunity as OpportunitySnapshot, OpportunityStatus
from database.models import Opportunity, Organization
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class OpportunityRepository(BaseRepository):
    def get_by_id(self, opportunity_id: Any) -> Optional[Opportunity]:
        return self.db.get(Opportunity, opportunity_id)

    def list_opportunities(self, status: Optional[str] = None) -> List[Opportunity]:
        """All opportunities in creation order, optionally by status."""
        stmt = select(Opportunity)
        if status is not None:
            stmt = stmt.where(Opportunity.status == status)
        stmt = stmt.order_by(Opportunity.id)
        return list(self.db.execute(stmt).scalars().all())

    def get_active_opportunities(self) -> List[OpportunitySnapshot]:
        """Snapshot of every active opportunity, in creation order."""
        rows = self.list_opportunities(status=OpportunityStatus.active.value)
        return [self.to_snapshot(row) for row in rows]

    def create_opportunity(
        self,
        organization: Organization,
        title: str,
        description: str,
        required_skills: Optional[List[str]] = None,
        location: Optional[str] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        schedule: Optional[Dict[str, Any]] = None,
        vacancies: Optional[int] = None
    ) -> Opportunity:
        # Unset (or zero) coordinates fall back to the organization's location
        opportunity = Opportunity(
            organization_id=organization.id,
            title=title,
            description=description,
            required_skills=list(required_skills or []),
            location=location or '',
            latitude=latitude or organization.latitude,
            longitude=longitude or organization.longitude,
            schedule=dict(schedule or {}),
            vacancies=vacancies or 1,
            status=OpportunityStatus.active.value,
        )
        self.db.add(opportunity)
        self.db.flush()  # Generate ID
        logger.info(f"Created opportunity {opportunity.id} for organization {organization.id}")
        return opportunity

    def set_status(self, opportunity: Opportunity, status: OpportunityStatus) -> Opportunity:
        opportunity.status = OpportunityStatus(status).value
        return opportunity

    @staticmethod
    def to_snapshot(row: Opportunity) -> OpportunitySnapshot:
        return OpportunitySnapshot(
            id=row.id,
            organization_id=row.organization_id,
            title=row.title,
            description=row.description or '',
            required_skills=tuple(row.required_skills or ()),
            location=row.location or '',
            coordinate=Coordinate(row.latitude or 0.0, row.longitude or 0.0),
            status=row.status,
            vacancies=row.vacancies,
            schedule=dict(row.schedule or {}),
            created_at=row.created_at,
        )
