#!/usr/bin/env python3
"""
Opportunity endpoints - discovery, personalized matches, publishing, applying.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.discovery_service import DiscoveryService
from ..services.match_service import MatchService
from ..services.opportunity_service import OpportunityService
from ..models.requests import OpportunityCreate, ApplicationCreate
from ..models.responses import (
    ApplicationCreatedResponse,
    DiscoveryResponse,
    MatchesResponse,
    OpportunityCreatedResponse,
    OpportunityDetailResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/opportunities", tags=["opportunities"])


@router.get("", response_model=DiscoveryResponse)
def list_opportunities(
    skills: Optional[str] = Query(default=None, description="Comma-separated skills; any one must be required"),
    latitude: Optional[str] = Query(default=None, description="Origin latitude for the radius filter"),
    longitude: Optional[str] = Query(default=None, description="Origin longitude for the radius filter"),
    radius: Optional[str] = Query(default=None, description="Radius in km (default 10)"),
    page: Optional[str] = Query(default=None, description="1-based page number (default 1)"),
    limit: Optional[str] = Query(default=None, description="Page size (default 20)"),
    db: Session = Depends(get_db)
):
    """
    Browse active opportunities.

    Parameters are taken as raw strings: malformed values are ignored
    instead of rejected. When latitude and longitude are given, each
    result carries its distance_km from that point.
    """
    service = DiscoveryService(db)
    return service.discover(
        skills=skills,
        latitude=latitude,
        longitude=longitude,
        radius=radius,
        page=page,
        limit=limit
    )


@router.get("/match", response_model=MatchesResponse)
def match_opportunities(
    user_id: int = Query(..., description="Account of the volunteer to rank for"),
    db: Session = Depends(get_db)
):
    """
    Rank active opportunities for a volunteer.

    Sorted by match score (highest first); only scores above 30 are returned.
    """
    service = MatchService(db)
    return service.get_matches(user_id)


@router.post("", response_model=OpportunityCreatedResponse, status_code=201)
def create_opportunity(
    body: OpportunityCreate,
    db: Session = Depends(get_db)
):
    """Publish a new opportunity for an organization."""
    service = OpportunityService(db)
    return service.create_opportunity(body)


@router.get("/{opportunity_id}", response_model=OpportunityDetailResponse)
def get_opportunity(
    opportunity_id: int,
    db: Session = Depends(get_db)
):
    """Get a single opportunity with its organization name."""
    service = OpportunityService(db)
    return service.get_opportunity(opportunity_id)


@router.post("/{opportunity_id}/apply", response_model=ApplicationCreatedResponse, status_code=201)
def apply_to_opportunity(
    opportunity_id: int,
    body: ApplicationCreate,
    db: Session = Depends(get_db)
):
    """Apply to an active opportunity. A volunteer can apply only once."""
    service = OpportunityService(db)
    return service.apply(opportunity_id, body)
