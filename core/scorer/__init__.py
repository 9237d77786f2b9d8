#!/usr/bin/env python3
"""
Scoring Module - Roommate compatibility scoring.

Public API:
- Profile: Scoring input (age, budget range, lifestyle preferences)
- calculate_compatibility_score: Pure 0-1 score for a pair of profiles
- to_percentage / is_compatible: Helpers used when ranking candidates

Modules:
- models.py: Data structures (Profile)
- compatibility.py: Budget, age and lifestyle terms and the combined score
"""

from core.scorer.models import Profile
from core.scorer.compatibility import (
    LIFESTYLE_KEYS,
    calculate_compatibility_score,
    to_percentage,
    is_compatible,
)

__all__ = [
    'Profile',
    'LIFESTYLE_KEYS',
    'calculate_compatibility_score',
    'to_percentage',
    'is_compatible',
]
