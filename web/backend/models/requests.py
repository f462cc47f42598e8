#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


class VolunteerCreate(BaseModel):
    """Request to create a volunteer profile."""
    model_config = ConfigDict(allow_inf_nan=False)

    user_id: int = Field(..., description="Account that owns the profile")
    display_name: Optional[str] = None
    email: Optional[str] = None
    skills: List[str] = Field(default_factory=list, description="Skill labels, matched case-sensitively")
    latitude: Optional[float] = Field(None, description="Decimal degrees; 0 when omitted")
    longitude: Optional[float] = Field(None, description="Decimal degrees; 0 when omitted")
    bio: Optional[str] = None
    phone: Optional[str] = None


class OrganizationCreate(BaseModel):
    """Request to register an organization."""
    model_config = ConfigDict(allow_inf_nan=False)

    name: str = Field(..., min_length=1)
    user_id: Optional[int] = None
    description: Optional[str] = None
    tax_id: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class OrganizationUpdate(BaseModel):
    """Request to update an organization. Omitted fields are left unchanged."""
    model_config = ConfigDict(allow_inf_nan=False)

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    tax_id: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class OpportunityCreate(BaseModel):
    """Request to publish an opportunity."""
    model_config = ConfigDict(allow_inf_nan=False)

    organization_id: int
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    required_skills: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    latitude: Optional[float] = Field(None, description="Defaults to the organization's latitude")
    longitude: Optional[float] = Field(None, description="Defaults to the organization's longitude")
    schedule: Optional[Dict[str, Any]] = None
    vacancies: Optional[int] = Field(None, ge=1, description="Defaults to 1")


class ApplicationCreate(BaseModel):
    """Request to apply to an opportunity."""
    user_id: int = Field(..., description="Volunteer's account")
    message: Optional[str] = None
