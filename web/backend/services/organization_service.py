#!/usr/bin/env python3
"""
Organization service - registration, public profile and updates.
"""

import logging
from typing import Any, Optional
from sqlalchemy.orm import Session

from database.models import Organization
from database.repositories import OrganizationRepository
from ..models.requests import OrganizationCreate, OrganizationUpdate
from ..models.responses import OrganizationDetail, OrganizationResponse
from ..exceptions import OrganizationNotFoundException
from ..utils import safe_datetime_iso, safe_str

logger = logging.getLogger(__name__)


class OrganizationService:
    """Service for managing organizations."""

    def __init__(self, db: Session):
        self.organizations = OrganizationRepository(db)

    def create_organization(self, body: OrganizationCreate) -> OrganizationResponse:
        organization = self.organizations.create_organization(**body.model_dump())
        self.organizations.commit()
        self.organizations.refresh(organization)

        return OrganizationResponse(
            success=True,
            message="Organization created",
            organization=self._to_detail(organization, opportunities_count=0)
        )

    def get_organization(self, organization_id: Any) -> OrganizationResponse:
        """
        Public organization profile with its opportunity count.

        Raises:
            OrganizationNotFoundException: If the organization does not exist.
        """
        organization = self._get_or_raise(organization_id)
        count = self.organizations.count_opportunities(organization.id)
        return OrganizationResponse(
            success=True,
            organization=self._to_detail(organization, opportunities_count=count)
        )

    def update_organization(
        self,
        organization_id: Any,
        body: OrganizationUpdate
    ) -> OrganizationResponse:
        """
        Update the enumerated organization fields present in the body.

        Raises:
            OrganizationNotFoundException: If the organization does not exist.
        """
        organization = self._get_or_raise(organization_id)
        self.organizations.update_organization(organization, body.model_dump(exclude_none=True))
        self.organizations.commit()
        self.organizations.refresh(organization)

        return OrganizationResponse(
            success=True,
            message="Organization updated",
            organization=self._to_detail(organization)
        )

    def _get_or_raise(self, organization_id: Any) -> Organization:
        organization = self.organizations.get_by_id(organization_id)
        if organization is None:
            raise OrganizationNotFoundException(f"Organization {organization_id} not found")
        return organization

    @staticmethod
    def _to_detail(
        organization: Organization,
        opportunities_count: Optional[int] = None
    ) -> OrganizationDetail:
        return OrganizationDetail(
            id=organization.id,
            user_id=organization.user_id,
            name=organization.name,
            description=safe_str(organization.description),
            tax_id=safe_str(organization.tax_id),
            address=safe_str(organization.address),
            phone=safe_str(organization.phone),
            website=organization.website,
            latitude=organization.latitude or 0.0,
            longitude=organization.longitude or 0.0,
            created_at=safe_datetime_iso(organization.created_at),
            opportunities_count=opportunities_count
        )
