#!/usr/bin/env python3
"""
Response models for API endpoints.

Field names follow the public API (match_score, match_details,
distance_km, pagination.current_page, ...) and must not be renamed.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class PaginationInfo(BaseModel):
    """Page metadata for list endpoints."""
    current_page: int = Field(ge=1)
    total_pages: int = Field(ge=0)
    total_items: int = Field(ge=0)


class OpportunitySummary(BaseModel):
    """An opportunity as listed by discovery."""
    id: int
    organization_id: int
    title: str
    description: str
    required_skills: List[str]
    location: str
    latitude: float
    longitude: float
    schedule: Dict[str, Any] = Field(default_factory=dict)
    vacancies: int
    status: str
    created_at: Optional[str] = None
    organization_name: str
    # Only present when the query carried a location
    distance_km: Optional[float] = Field(None, ge=0)


class DiscoveryResponse(BaseModel):
    """One page of discovered opportunities."""
    success: bool = True
    opportunities: List[OpportunitySummary]
    pagination: PaginationInfo


class OpportunityDetailResponse(BaseModel):
    """A single opportunity."""
    success: bool = True
    opportunity: OpportunitySummary


class OpportunityCreatedResponse(BaseModel):
    success: bool = True
    message: str
    opportunity: OpportunitySummary


class MatchDetails(BaseModel):
    """Sub-scores behind a match score."""
    skill_compatibility: int = Field(ge=0, le=100)
    distance_km: float = Field(ge=0)
    common_skills: List[str]


class MatchItem(BaseModel):
    """A ranked opportunity for a volunteer."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 7,
                "title": "Weekend food bank shift",
                "description": "Sort and pack donations",
                "match_score": 72,
                "match_details": {
                    "skill_compatibility": 67,
                    "distance_km": 10.0,
                    "common_skills": ["logistics", "driving"]
                },
                "organization": "City Food Bank",
                "location": "Warehouse 3",
                "vacancies": 4
            }
        }
    )

    id: int
    title: str
    description: str
    match_score: int = Field(ge=0, le=100)
    match_details: MatchDetails
    organization: str
    location: str
    vacancies: int


class MatchesResponse(BaseModel):
    """Ranked opportunities for a volunteer."""
    success: bool = True
    matches: List[MatchItem]
    total_matches: int


class OrganizationDetail(BaseModel):
    id: int
    user_id: Optional[int] = None
    name: str
    description: str
    tax_id: str
    address: str
    phone: str
    website: Optional[str] = None
    latitude: float
    longitude: float
    created_at: Optional[str] = None
    opportunities_count: Optional[int] = None


class OrganizationResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    organization: OrganizationDetail


class VolunteerDetail(BaseModel):
    id: int
    user_id: int
    display_name: str
    email: Optional[str] = None
    skills: List[str]
    latitude: float
    longitude: float
    bio: str
    phone: str
    created_at: Optional[str] = None


class VolunteerResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    volunteer: VolunteerDetail


class ApplicationDetail(BaseModel):
    id: int
    opportunity_id: int
    volunteer_id: int
    status: str
    message: str
    applied_at: Optional[str] = None


class ApplicationCreatedResponse(BaseModel):
    success: bool = True
    message: str
    application: ApplicationDetail


class ApplicationOpportunity(BaseModel):
    """Opportunity reference embedded in an application listing."""
    id: Optional[int] = None
    title: Optional[str] = None
    organization: Optional[str] = None


class ApplicationSummary(BaseModel):
    id: int
    opportunity: ApplicationOpportunity
    status: str
    message: str
    applied_at: Optional[str] = None


class ApplicationsResponse(BaseModel):
    success: bool = True
    applications: List[ApplicationSummary]
    total: int
