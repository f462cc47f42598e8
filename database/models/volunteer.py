from sqlalchemy import Column, Integer, Text, Float, TIMESTAMP, JSON, Index
from sqlalchemy.orm import relationship

from .base import Base
from .organization import _utcnow


class Volunteer(Base):
    """
    Volunteer profile: the skills and location used for matching.
    """
    __tablename__ = 'volunteer'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, unique=True)

    display_name = Column(Text, nullable=False, default='')
    email = Column(Text)
    skills = Column(JSON, nullable=False, default=list)
    bio = Column(Text, nullable=False, default='')
    phone = Column(Text, nullable=False, default='')

    # 0/0 when the volunteer never set a location
    latitude = Column(Float, nullable=False, default=0.0)
    longitude = Column(Float, nullable=False, default=0.0)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow)

    applications = relationship("Application", back_populates="volunteer", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_volunteer_user', 'user_id'),
    )
