#!/usr/bin/env python3
"""
Opportunity service - publishing, lookup and applications.
"""

import logging
from typing import Any
from sqlalchemy.orm import Session

from core.scorer import UNKNOWN_ORGANIZATION
from database.repositories import (
    ApplicationRepository,
    OpportunityRepository,
    OrganizationRepository,
    VolunteerRepository,
)
from database.models import Application
from ..models.requests import OpportunityCreate, ApplicationCreate
from ..models.responses import (
    ApplicationCreatedResponse,
    ApplicationDetail,
    OpportunityCreatedResponse,
    OpportunityDetailResponse,
)
from ..exceptions import (
    DuplicateApplicationException,
    OpportunityNotActiveException,
    OpportunityNotFoundException,
    OrganizationNotFoundException,
    VolunteerNotFoundException,
)
from ..utils import safe_datetime_iso
from .discovery_service import to_opportunity_summary

logger = logging.getLogger(__name__)


class OpportunityService:
    """Service for managing opportunities and applications."""

    def __init__(self, db: Session):
        self.opportunities = OpportunityRepository(db)
        self.organizations = OrganizationRepository(db)
        self.volunteers = VolunteerRepository(db)
        self.applications = ApplicationRepository(db)

    def create_opportunity(self, body: OpportunityCreate) -> OpportunityCreatedResponse:
        """
        Publish a new active opportunity.

        Raises:
            OrganizationNotFoundException: If the organization does not exist.
        """
        organization = self.organizations.get_by_id(body.organization_id)
        if organization is None:
            raise OrganizationNotFoundException(f"Organization {body.organization_id} not found")

        row = self.opportunities.create_opportunity(
            organization,
            title=body.title,
            description=body.description,
            required_skills=body.required_skills,
            location=body.location,
            latitude=body.latitude,
            longitude=body.longitude,
            schedule=body.schedule,
            vacancies=body.vacancies
        )
        self.opportunities.commit()
        self.opportunities.refresh(row)

        return OpportunityCreatedResponse(
            success=True,
            message="Opportunity created",
            opportunity=to_opportunity_summary(
                self.opportunities.to_snapshot(row), organization.name
            )
        )

    def get_opportunity(self, opportunity_id: Any) -> OpportunityDetailResponse:
        """
        Raises:
            OpportunityNotFoundException: If the opportunity does not exist.
        """
        row = self.opportunities.get_by_id(opportunity_id)
        if row is None:
            raise OpportunityNotFoundException(f"Opportunity {opportunity_id} not found")

        organization_name = self.organizations.resolve_organization_name(row.organization_id)
        return OpportunityDetailResponse(
            success=True,
            opportunity=to_opportunity_summary(
                self.opportunities.to_snapshot(row),
                organization_name or UNKNOWN_ORGANIZATION
            )
        )

    def apply(self, opportunity_id: Any, body: ApplicationCreate) -> ApplicationCreatedResponse:
        """
        Register a volunteer's application to an active opportunity.

        Raises:
            OpportunityNotFoundException: If the opportunity does not exist.
            OpportunityNotActiveException: If the opportunity is not active.
            VolunteerNotFoundException: If the user has no volunteer profile.
            DuplicateApplicationException: If the volunteer already applied.
        """
        opportunity = self.opportunities.get_by_id(opportunity_id)
        if opportunity is None:
            raise OpportunityNotFoundException(f"Opportunity {opportunity_id} not found")

        if not self.opportunities.to_snapshot(opportunity).is_active:
            raise OpportunityNotActiveException(f"Opportunity {opportunity_id} is not active")

        volunteer = self.volunteers.get_by_user_id(body.user_id)
        if volunteer is None:
            raise VolunteerNotFoundException(f"Volunteer profile for user {body.user_id} not found")

        if self.applications.get_existing(opportunity.id, volunteer.id):
            raise DuplicateApplicationException(
                f"Volunteer {volunteer.id} already applied to opportunity {opportunity.id}"
            )

        application = self.applications.create_application(opportunity.id, volunteer.id, body.message)
        self.applications.commit()
        self.applications.refresh(application)

        return ApplicationCreatedResponse(
            success=True,
            message="Application submitted",
            application=self._to_application_detail(application)
        )

    @staticmethod
    def _to_application_detail(application: Application) -> ApplicationDetail:
        return ApplicationDetail(
            id=application.id,
            opportunity_id=application.opportunity_id,
            volunteer_id=application.volunteer_id,
            status=application.status,
            message=application.message or "",
            applied_at=safe_datetime_iso(application.applied_at)
        )
