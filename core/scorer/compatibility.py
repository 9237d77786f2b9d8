#!/usr/bin/env python3
"""
Compatibility Score - How well two prospective roommates fit together.

Starts from a neutral base and adds bonuses for overlapping budgets,
similar ages and agreeing lifestyle preferences. Any attribute missing on
either side simply contributes nothing.
"""

from typing import Optional, Tuple
import logging
import math

from core.config_loader import CompatibilityWeights
from core.scorer.models import Profile

logger = logging.getLogger(__name__)

LIFESTYLE_KEYS: Tuple[str, ...] = ('cleanliness', 'noise_level', 'pets', 'smoking', 'guests')

_DEFAULT_WEIGHTS = CompatibilityWeights()


def _is_present(value) -> bool:
    # None, "", False and 0 all mean "not set"
    return bool(value)


def budget_overlap(a: Profile, b: Profile) -> Optional[float]:
    """
    Fraction (0.0-1.0) of the wider budget range shared by both profiles.

    Returns None when either profile lacks a budget bound or both ranges
    are zero-width.
    """
    if not (a.has_budget and b.has_budget):
        return None

    max_range = max(a.budget_range, b.budget_range)
    if max_range <= 0:
        return None

    overlap = max(0.0, min(a.budget_max, b.budget_max) - max(a.budget_min, b.budget_min))
    return min(1.0, overlap / max_range)


def age_similarity(a: Profile, b: Profile, age_span: float = _DEFAULT_WEIGHTS.age_span) -> Optional[float]:
    """1.0 for equal ages, falling linearly to 0.0 at ``age_span`` years apart."""
    if a.age is None or b.age is None:
        return None
    return max(0.0, 1 - abs(a.age - b.age) / age_span)


def lifestyle_agreement(a: Profile, b: Profile) -> Optional[float]:
    """
    Share of lifestyle keys, set on both sides, whose values are equal.

    Returns None when no key in LIFESTYLE_KEYS is set on both profiles.
    """
    prefs_a = a.lifestyle_preferences or {}
    prefs_b = b.lifestyle_preferences or {}

    total = 0
    matches = 0
    for key in LIFESTYLE_KEYS:
        value_a = prefs_a.get(key)
        value_b = prefs_b.get(key)
        if _is_present(value_a) and _is_present(value_b):
            total += 1
            if value_a == value_b:
                matches += 1

    if total == 0:
        return None
    return matches / total


def calculate_compatibility_score(
    a: Profile,
    b: Profile,
    weights: Optional[CompatibilityWeights] = None
) -> float:
    """
    Calculate the compatibility score between two profiles.

    Formula: base + budget * overlap + age * similarity + lifestyle * agreement,
    clamped to [0, 1]. Each term is symmetric in (a, b), so the score is too.

    Returns:
        Score in the range 0.0-1.0 (0.5 when nothing can be compared)
    """
    weights = weights or _DEFAULT_WEIGHTS
    score = weights.base

    overlap = budget_overlap(a, b)
    if overlap is not None:
        score += overlap * weights.budget

    similarity = age_similarity(a, b, weights.age_span)
    if similarity is not None:
        score += similarity * weights.age

    agreement = lifestyle_agreement(a, b)
    if agreement is not None:
        score += agreement * weights.lifestyle

    return min(1.0, max(0.0, score))


def to_percentage(score: float) -> int:
    """Convert a 0-1 score to the 0-100 percentage shown to users (halves round up)."""
    return int(math.floor(score * 100 + 0.5))


def is_compatible(score: float, weights: Optional[CompatibilityWeights] = None) -> bool:
    weights = weights or _DEFAULT_WEIGHTS
    return to_percentage(score) >= weights.min_percentage
