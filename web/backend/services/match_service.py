#!/usr/bin/env python3
"""
Match service - personalized opportunity ranking for a volunteer.
"""

import logging
from typing import Any
from sqlalchemy.orm import Session

from core.matcher import rank_opportunities
from core.scorer import MatchResult
from database.repositories import OpportunityRepository, OrganizationRepository, VolunteerRepository
from ..models.responses import MatchesResponse, MatchItem, MatchDetails
from ..exceptions import VolunteerNotFoundException

logger = logging.getLogger(__name__)


class MatchService:
    """Service for ranking opportunities for one volunteer."""

    def __init__(self, db: Session):
        self.volunteers = VolunteerRepository(db)
        self.opportunities = OpportunityRepository(db)
        self.organizations = OrganizationRepository(db)

    def get_matches(self, user_id: Any) -> MatchesResponse:
        """
        Rank active opportunities for the volunteer owned by user_id.

        Returns:
            Matches sorted by score (highest first), all scoring above 30.

        Raises:
            VolunteerNotFoundException: If the user has no volunteer profile.
        """
        volunteer = self.volunteers.get_volunteer_profile(user_id)
        if volunteer is None:
            raise VolunteerNotFoundException(f"Volunteer profile for user {user_id} not found")

        snapshot = self.opportunities.get_active_opportunities()
        resolver = self.organizations.name_resolver(op.organization_id for op in snapshot)

        ranked = rank_opportunities(volunteer, snapshot, resolver)

        logger.info(
            f"Ranked {len(snapshot)} active opportunities for user {user_id}: "
            f"{len(ranked)} good matches"
        )

        return MatchesResponse(
            success=True,
            matches=[self._to_match_item(result) for result in ranked],
            total_matches=len(ranked)
        )

    @staticmethod
    def _to_match_item(result: MatchResult) -> MatchItem:
        return MatchItem(
            id=result.opportunity_id,
            title=result.title,
            description=result.description,
            match_score=result.score,
            match_details=MatchDetails(
                skill_compatibility=result.skill_compatibility,
                distance_km=result.distance_km,
                common_skills=list(result.common_skills)
            ),
            organization=result.organization_name,
            location=result.location,
            vacancies=result.vacancies
        )
