from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class CompoundingFrequency(str, Enum):
    DAILY = "daily"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMIANNUALLY = "semiannually"
    ANNUALLY = "annually"

    @property
    def periods_per_year(self) -> int:
        return _PERIODS_PER_YEAR[self]


class ContributionFrequency(str, Enum):
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"

    @property
    def contributions_per_month(self) -> float:
        """Average number of contributions landing in one calendar month."""
        return _CONTRIBUTIONS_PER_MONTH[self]


class Strategy(str, Enum):
    CD = "CD"
    HYSA = "HYSA"
    COMBINED = "Combined"
    EQUAL = "Equal"


_PERIODS_PER_YEAR: Mapping[CompoundingFrequency, int] = MappingProxyType(
    {
        CompoundingFrequency.DAILY: 365,
        CompoundingFrequency.MONTHLY: 12,
        CompoundingFrequency.QUARTERLY: 4,
        CompoundingFrequency.SEMIANNUALLY: 2,
        CompoundingFrequency.ANNUALLY: 1,
    }
)

# weekly/biweekly are average weeks per month, quarterly is once every 3 months
_CONTRIBUTIONS_PER_MONTH: Mapping[ContributionFrequency, float] = MappingProxyType(
    {
        ContributionFrequency.WEEKLY: 4.33,
        ContributionFrequency.BIWEEKLY: 2.17,
        ContributionFrequency.MONTHLY: 1.0,
        ContributionFrequency.QUARTERLY: 1 / 3,
    }
)


__all__ = [
    "CompoundingFrequency",
    "ContributionFrequency",
    "Strategy",
]
