from database.repositories.base import BaseRepository
from database.repositories.opportunity import OpportunityRepository
from database.repositories.volunteer import VolunteerRepository
from database.repositories.organization import OrganizationRepository
from database.repositories.application import ApplicationRepository

__all__ = [
    'BaseRepository',
    'OpportunityRepository',
    'VolunteerRepository',
    'OrganizationRepository',
    'ApplicationRepository',
]
