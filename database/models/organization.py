from datetime import datetime, timezone

from sqlalchemy import Column, Integer, Text, Float, TIMESTAMP, Index
from sqlalchemy.orm import relationship

from .base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Organization(Base):
    """
    An organization that publishes volunteering opportunities.
    """
    __tablename__ = 'organization'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=True)

    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default='')
    tax_id = Column(Text, nullable=False, default='')  # CNPJ or local equivalent
    address = Column(Text, nullable=False, default='')
    phone = Column(Text, nullable=False, default='')
    website = Column(Text)

    # 0/0 when the organization never set a location
    latitude = Column(Float, nullable=False, default=0.0)
    longitude = Column(Float, nullable=False, default=0.0)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow)

    opportunities = relationship("Opportunity", back_populates="organization", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_organization_user', 'user_id'),
    )
