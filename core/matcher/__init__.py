#!/usr/bin/env python3
"""
Matcher Module - score-sorted, threshold-filtered opportunities for a volunteer.

Public API:
- rank_opportunities: Rank an opportunity collection for one volunteer
"""

from core.matcher.service import rank_opportunities

__all__ = ['rank_opportunities']
