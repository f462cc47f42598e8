#!/usr/bin/env python3
"""
Organization endpoints - register, view and update organizations.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.organization_service import OrganizationService
from ..models.requests import OrganizationCreate, OrganizationUpdate
from ..models.responses import OrganizationResponse

router = APIRouter(prefix="/api/organizations", tags=["organizations"])


@router.post("", response_model=OrganizationResponse, status_code=201)
def create_organization(
    body: OrganizationCreate,
    db: Session = Depends(get_db)
):
    """Register an organization."""
    return OrganizationService(db).create_organization(body)


@router.get("/{organization_id}", response_model=OrganizationResponse)
def get_organization(
    organization_id: int,
    db: Session = Depends(get_db)
):
    """Public organization profile, including how many opportunities it published."""
    return OrganizationService(db).get_organization(organization_id)


@router.put("/{organization_id}", response_model=OrganizationResponse)
def update_organization(
    organization_id: int,
    body: OrganizationUpdate,
    db: Session = Depends(get_db)
):
    """Update an organization. Only the fields sent are changed."""
    return OrganizationService(db).update_organization(organization_id, body)
