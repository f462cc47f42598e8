#!/usr/bin/env python3
"""
Engine snapshots - read-only inputs to scoring, discovery and ranking.

The data-access layer builds these from its rows and hands them over by
value; nothing in core/ reads or writes storage.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from core.geo import Coordinate


class OpportunityStatus(str, Enum):
    active = "active"
    inactive = "inactive"
    closed = "closed"


@dataclass(frozen=True)
class VolunteerProfile:
    """Skills and location of one volunteer."""
    id: Any
    user_id: Any
    skills: Tuple[str, ...] = ()
    coordinate: Coordinate = Coordinate(0.0, 0.0)
    # Availability is not modelled yet; every volunteer counts as available.
    is_available: bool = True


@dataclass(frozen=True)
class Opportunity:
    """A published volunteering offer."""
    id: Any
    organization_id: Any
    title: str
    description: str = ""
    required_skills: Tuple[str, ...] = ()
    location: str = ""
    coordinate: Coordinate = Coordinate(0.0, 0.0)
    status: str = OpportunityStatus.active.value
    vacancies: int = 1
    schedule: Dict[str, Any] = field(default_factory=dict, hash=False, compare=False)
    created_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status == OpportunityStatus.active.value
