from .base import Base
from .organization import Organization
from .volunteer import Volunteer
from .opportunity import Opportunity
from .application import Application

__all__ = [
    'Base',
    'Organization',
    'Volunteer',
    'Opportunity',
    'Application',
]
