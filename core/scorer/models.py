#!/usr/bin/env python3
"""
Scoring Models - Data structures consumed by the compatibility scorer.
"""

from typing import Dict, Any, Optional
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Profile:
    """The slice of a user's profile that roommate scoring looks at."""
    age: Optional[int] = None
    budget_min: Optional[float] = None
    budget_max: Optional[float] = None
    lifestyle_preferences: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_budget(self) -> bool:
        return self.budget_min is not None and self.budget_max is not None

    @property
    def budget_range(self) -> float:
        return self.budget_max - self.budget_min
