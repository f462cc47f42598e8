from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import relationship

from .base import Base
from .organization import _utcnow


class Application(Base):
    """
    A volunteer's application to an opportunity. One per pair.
    """
    __tablename__ = 'application'

    id = Column(Integer, primary_key=True, autoincrement=True)
    opportunity_id = Column(Integer, ForeignKey('opportunity.id', ondelete='CASCADE'), nullable=False)
    volunteer_id = Column(Integer, ForeignKey('volunteer.id', ondelete='CASCADE'), nullable=False)

    status = Column(Text, nullable=False, default='pending')  # pending|accepted|rejected
    message = Column(Text, nullable=False, default='')
    applied_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow)

    opportunity = relationship("Opportunity", back_populates="applications")
    volunteer = relationship("Volunteer", back_populates="applications")

    __table_args__ = (
        UniqueConstraint('opportunity_id', 'volunteer_id', name='uq_application_opportunity_volunteer'),
        Index('idx_application_volunteer', 'volunteer_id'),
    )
