#!/usr/bin/env python3
"""
Volunteer service - profiles and application history.
"""

import logging
from typing import Any
from sqlalchemy.orm import Session

from database.models import Application, Volunteer
from database.repositories import ApplicationRepository, VolunteerRepository
from ..models.requests import VolunteerCreate
from ..models.responses import (
    ApplicationOpportunity,
    ApplicationSummary,
    ApplicationsResponse,
    VolunteerDetail,
    VolunteerResponse,
)
from ..exceptions import DuplicateVolunteerException, VolunteerNotFoundException
from ..utils import safe_datetime_iso, safe_list, safe_str

logger = logging.getLogger(__name__)


class VolunteerService:
    """Service for volunteer profiles."""

    def __init__(self, db: Session):
        self.volunteers = VolunteerRepository(db)
        self.applications = ApplicationRepository(db)

    def create_volunteer(self, body: VolunteerCreate) -> VolunteerResponse:
        """
        Raises:
            DuplicateVolunteerException: If the user already has a profile.
        """
        if self.volunteers.get_by_user_id(body.user_id) is not None:
            raise DuplicateVolunteerException(f"User {body.user_id} already has a volunteer profile")

        volunteer = self.volunteers.create_volunteer(**body.model_dump())
        self.volunteers.commit()
        self.volunteers.refresh(volunteer)

        return VolunteerResponse(
            success=True,
            message="Volunteer profile created",
            volunteer=self._to_detail(volunteer)
        )

    def get_volunteer(self, user_id: Any) -> VolunteerResponse:
        return VolunteerResponse(success=True, volunteer=self._to_detail(self._get_or_raise(user_id)))

    def list_applications(self, user_id: Any) -> ApplicationsResponse:
        """
        Applications of a volunteer with opportunity title and organization.

        Raises:
            VolunteerNotFoundException: If the user has no volunteer profile.
        """
        volunteer = self._get_or_raise(user_id)
        applications = self.applications.list_for_volunteer(volunteer.id)

        summaries = [self._to_application_summary(app) for app in applications]
        return ApplicationsResponse(success=True, applications=summaries, total=len(summaries))

    def _get_or_raise(self, user_id: Any) -> Volunteer:
        volunteer = self.volunteers.get_by_user_id(user_id)
        if volunteer is None:
            raise VolunteerNotFoundException(f"Volunteer profile for user {user_id} not found")
        return volunteer

    @staticmethod
    def _to_detail(volunteer: Volunteer) -> VolunteerDetail:
        return VolunteerDetail(
            id=volunteer.id,
            user_id=volunteer.user_id,
            display_name=safe_str(volunteer.display_name),
            email=volunteer.email,
            skills=safe_list(volunteer.skills),
            latitude=volunteer.latitude or 0.0,
            longitude=volunteer.longitude or 0.0,
            bio=safe_str(volunteer.bio),
            phone=safe_str(volunteer.phone),
            created_at=safe_datetime_iso(volunteer.created_at)
        )

    @staticmethod
    def _to_application_summary(application: Application) -> ApplicationSummary:
        opportunity = application.opportunity
        organization = opportunity.organization if opportunity else None
        return ApplicationSummary(
            id=application.id,
            opportunity=ApplicationOpportunity(
                id=opportunity.id if opportunity else None,
                title=opportunity.title if opportunity else None,
                organization=organization.name if organization else None
            ),
            status=application.status,
            message=safe_str(application.message),
            applied_at=safe_datetime_iso(application.applied_at)
        )
