#!/usr/bin/env python3
"""
Volunteer endpoints - profiles and application history.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.volunteer_service import VolunteerService
from ..models.requests import VolunteerCreate
from ..models.responses import ApplicationsResponse, VolunteerResponse

router = APIRouter(prefix="/api/volunteers", tags=["volunteers"])


@router.post("", response_model=VolunteerResponse, status_code=201)
def create_volunteer(
    body: VolunteerCreate,
    db: Session = Depends(get_db)
):
    """Create the volunteer profile used for matching."""
    return VolunteerService(db).create_volunteer(body)


@router.get("/{user_id}", response_model=VolunteerResponse)
def get_volunteer(
    user_id: int,
    db: Session = Depends(get_db)
):
    """Get a volunteer profile by account id."""
    return VolunteerService(db).get_volunteer(user_id)


@router.get("/{user_id}/applications", response_model=ApplicationsResponse)
def list_applications(
    user_id: int,
    db: Session = Depends(get_db)
):
    """List a volunteer's applications with opportunity and organization names."""
    return VolunteerService(db).list_applications(user_id)
