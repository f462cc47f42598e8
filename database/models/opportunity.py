from sqlalchemy import Column, Integer, Text, Float, TIMESTAMP, ForeignKey, JSON, Index
from sqlalchemy.orm import relationship

from .base import Base
from .organization import _utcnow


class Opportunity(Base):
    __tablename__ = 'opportunity'

    id = Column(Integer, primary_key=True, autoincrement=True)
    organization_id = Column(Integer, ForeignKey('organization.id', ondelete='CASCADE'), nullable=False)

    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    required_skills = Column(JSON, nullable=False, default=list)
    location = Column(Text, nullable=False, default='')
    latitude = Column(Float, nullable=False, default=0.0)
    longitude = Column(Float, nullable=False, default=0.0)
    schedule = Column(JSON, nullable=False, default=dict)
    vacancies = Column(Integer, nullable=False, default=1)
    status = Column(Text, nullable=False, default='active')  # active|inactive|closed

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow)

    organization = relationship("Organization", back_populates="opportunities")
    applications = relationship("Application", back_populates="opportunity", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_opportunity_status', 'status'),
        Index('idx_opportunity_organization', 'organization_id'),
    )
