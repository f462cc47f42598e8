import logging
from typing import Any, Callable, Dict, Iterable, Optional

from sqlalchemy import select, func

from database.models import Organization, Opportunity
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

# Fields an organization may change after registration
UPDATABLE_FIELDS = (
    'name',
    'description',
    'tax_id',
    'address',
    'phone',
    'website',
    'latitude',
    'longitude',
)


class OrganizationRepository(BaseRepository):
    def get_by_id(self, organization_id: Any) -> Optional[Organization]:
        return self.db.get(Organization, organization_id)

    def create_organization(
        self,
        name: str,
        user_id: Optional[Any] = None,
        description: Optional[str] = None,
        tax_id: Optional[str] = None,
        address: Optional[str] = None,
        phone: Optional[str] = None,
        website: Optional[str] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None
    ) -> Organization:
        organization = Organization(
            user_id=user_id,
            name=name,
            description=description or '',
            tax_id=tax_id or '',
            address=address or '',
            phone=phone or '',
            website=website,
            latitude=latitude or 0.0,
            longitude=longitude or 0.0,
        )
        self.db.add(organization)
        self.db.flush()
        logger.info(f"Created organization {organization.id}: {name}")
        return organization

    def update_organization(
        self,
        organization: Organization,
        changes: Dict[str, Any]
    ) -> Organization:
        """
        Apply changes to the enumerated UPDATABLE_FIELDS.

        Unknown keys are ignored; None leaves the field unchanged.
        """
        applied = []
        for field_name in UPDATABLE_FIELDS:
            value = changes.get(field_name)
            if value is None:
                continue
            setattr(organization, field_name, value)
            applied.append(field_name)

        ignored = set(changes) - set(UPDATABLE_FIELDS)
        if ignored:
            logger.warning(f"Ignoring non-updatable organization fields: {sorted(ignored)}")

        if applied:
            logger.info(f"Updated organization {organization.id}: {applied}")
        return organization

    def resolve_organization_name(self, organization_id: Any) -> Optional[str]:
        organization = self.get_by_id(organization_id)
        return organization.name if organization else None

    def get_names(self, organization_ids: Iterable[Any]) -> Dict[Any, str]:
        """Batch lookup of organization names by id."""
        ids = set(organization_ids)
        if not ids:
            return {}
        stmt = select(Organization.id, Organization.name).where(Organization.id.in_(ids))
        return {org_id: name for org_id, name in self.db.execute(stmt).all()}

    def name_resolver(self, organization_ids: Iterable[Any]) -> Callable[[Any], Optional[str]]:
        """Prefetch names for the given ids and return a lookup function."""
        return self.get_names(organization_ids).get

    def count_opportunities(self, organization_id: Any) -> int:
        stmt = select(func.count(Opportunity.id)).where(Opportunity.organization_id == organization_id)
        return self.db.execute(stmt).scalar_one()
