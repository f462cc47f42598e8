#!/usr/bin/env python3
"""
Scoring Policy - fixed weights and thresholds of the match score.

These are product policy, not deployment configuration: changing them
changes what every score means, so they are plain module constants.
"""

SKILL_WEIGHT = 0.4
DISTANCE_WEIGHT = 0.3
AVAILABILITY_WEIGHT = 0.3

# Every kilometer of separation costs this many points (zero at 20 km)
DISTANCE_PENALTY_PER_KM = 5.0
MAX_COMPONENT_SCORE = 100.0

# Availability is not tracked yet, so it always scores full marks
AVAILABILITY_SCORE = 100.0

# Ranked matches must score strictly above this
MIN_MATCH_SCORE = 30
