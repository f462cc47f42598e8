#!/usr/bin/env python3
"""
Discovery Models - query filters and annotated opportunity views.
"""

from dataclasses import dataclass
from typing import Any, FrozenSet, Optional

from core.geo import Coordinate
from core.models import Opportunity
from core.utils import parse_float

DEFAULT_RADIUS_KM = 10.0


@dataclass(frozen=True)
class DiscoveryFilters:
    """
    Optional discovery constraints.

    Active status is always enforced and is not a filter here.
    skills: keep opportunities requiring at least one of these (OR)
    origin / radius_km: keep opportunities within radius_km of origin
    """
    skills: Optional[FrozenSet[str]] = None
    origin: Optional[Coordinate] = None
    radius_km: float = DEFAULT_RADIUS_KM

    @classmethod
    def from_query(
        cls,
        skills: Optional[str] = None,
        latitude: Optional[Any] = None,
        longitude: Optional[Any] = None,
        radius: Optional[Any] = None
    ) -> "DiscoveryFilters":
        """
        Build filters from raw query-string values.

        Malformed input never raises; the affected filter is skipped.
        - skills: comma separated, empty entries dropped; labels are kept
          verbatim (no trimming), so matching stays exact
        - latitude/longitude: both must parse, else no geo filter
        - radius: positive number, else DEFAULT_RADIUS_KM
        """
        skill_set = None
        if skills:
            parsed = frozenset(s for s in str(skills).split(',') if s)
            skill_set = parsed or None

        origin = None
        lat = parse_float(latitude)
        lon = parse_float(longitude)
        if lat is not None and lon is not None:
            origin = Coordinate(lat, lon)

        radius_km = parse_float(radius)
        if radius_km is None or radius_km <= 0:
            radius_km = DEFAULT_RADIUS_KM

        return cls(skills=skill_set, origin=origin, radius_km=radius_km)


@dataclass(frozen=True)
class OpportunityView:
    """An opportunity as discovery returns it."""
    opportunity: Opportunity
    organization_name: str
    # Only set when a geo filter was applied
    distance_km: Optional[float] = None
