import logging
from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from database.models import Application, Opportunity
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ApplicationRepository(BaseRepository):
    def get_existing(self, opportunity_id: Any, volunteer_id: Any) -> Optional[Application]:
        stmt = select(Application).where(
            Application.opportunity_id == opportunity_id,
            Application.volunteer_id == volunteer_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def create_application(
        self,
        opportunity_id: Any,
        volunteer_id: Any,
        message: Optional[str] = None
    ) -> Application:
        application = Application(
            opportunity_id=opportunity_id,
            volunteer_id=volunteer_id,
            status='pending',
            message=message or '',
        )
        self.db.add(application)
        self.db.flush()
        logger.info(f"Volunteer {volunteer_id} applied to opportunity {opportunity_id}")
        return application

    def list_for_volunteer(self, volunteer_id: Any) -> List[Application]:
        """Applications of one volunteer with opportunity and organization loaded."""
        stmt = (
            select(Application)
            .options(joinedload(Application.opportunity).joinedload(Opportunity.organization))
            .where(Application.volunteer_id == volunteer_id)
            .order_by(Application.id)
        )
        return list(self.db.execute(stmt).scalars().all())
