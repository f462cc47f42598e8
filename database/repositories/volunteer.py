import logging
from typing import Any, List, Optional

from sqlalchemy import select

from core.geo import Coordinate
from core.models import VolunteerProfile
from database.models import Volunteer
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class VolunteerRepository(BaseRepository):
    def get_by_id(self, volunteer_id: Any) -> Optional[Volunteer]:
        return self.db.get(Volunteer, volunteer_id)

    def get_by_user_id(self, user_id: Any) -> Optional[Volunteer]:
        stmt = select(Volunteer).where(Volunteer.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_volunteer_profile(self, user_id: Any) -> Optional[VolunteerProfile]:
        """Scoring snapshot for a user, or None if they have no profile."""
        volunteer = self.get_by_user_id(user_id)
        if volunteer is None:
            return None
        return self.to_snapshot(volunteer)

    def create_volunteer(
        self,
        user_id: Any,
        display_name: str = '',
        email: Optional[str] = None,
        skills: Optional[List[str]] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        bio: Optional[str] = None,
        phone: Optional[str] = None
    ) -> Volunteer:
        # Profiles without a location are stored at 0/0
        volunteer = Volunteer(
            user_id=user_id,
            display_name=display_name or '',
            email=email,
            skills=list(skills or []),
            latitude=latitude or 0.0,
            longitude=longitude or 0.0,
            bio=bio or '',
            phone=phone or '',
        )
        self.db.add(volunteer)
        self.db.flush()
        logger.info(f"Created volunteer profile {volunteer.id} for user {user_id}")
        return volunteer

    @staticmethod
    def to_snapshot(row: Volunteer) -> VolunteerProfile:
        return VolunteerProfile(
            id=row.id,
            user_id=row.user_id,
            skills=tuple(row.skills or ()),
            coordinate=Coordinate(row.latitude or 0.0, row.longitude or 0.0),
        )
