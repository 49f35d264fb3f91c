"""Data contracts for the CD / HYSA projection."""

from __future__ import annotations

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from savings_compare.domain.frequencies import (
    CompoundingFrequency,
    ContributionFrequency,
    Strategy,
)

# Keeps the per-month growth factor finite for every accepted rate.
MAX_RATE_PERCENT = 100.0


class ProjectionInput(BaseModel):
    """Validated calculator inputs. Rates are annual percentages (4.25 == 4.25%)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    initialDepositCD: float = Field(..., ge=0, description="Amount placed in the CD at month 0.")
    initialDepositHYSA: float = Field(..., ge=0, description="Amount placed in the HYSA at month 0.")
    cdRate: float = Field(..., ge=0, le=MAX_RATE_PERCENT, description="CD annual rate in percent.")
    hysaRate: float = Field(..., ge=0, le=MAX_RATE_PERCENT, description="HYSA annual rate in percent.")
    termMonths: int = Field(..., ge=1, description="Number of months to project.")
    cdCompoundingFrequency: CompoundingFrequency
    hysaCompoundingFrequency: CompoundingFrequency
    regularContribution: float = Field(
        0.0,
        ge=0,
        description="Recurring deposit, applied to the HYSA only.",
    )
    contributionFrequency: ContributionFrequency = ContributionFrequency.MONTHLY

    @classmethod
    def defaults(cls) -> "ProjectionInput":
        return cls(
            initialDepositCD=5000,
            initialDepositHYSA=0,
            cdRate=4.25,
            hysaRate=4,
            termMonths=12,
            cdCompoundingFrequency=CompoundingFrequency.DAILY,
            hysaCompoundingFrequency=CompoundingFrequency.DAILY,
            regularContribution=250,
            contributionFrequency=ContributionFrequency.MONTHLY,
        )


class MonthlyBalance(BaseModel):
    """Balance at the end of a projected month."""

    model_config = ConfigDict(frozen=True)

    month: int = Field(..., ge=1)
    balance: float


class ProjectionResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    cdFinalBalance: float
    hysaFinalBalance: float
    combinedFinalBalance: float
    cdInterestEarned: float
    hysaInterestEarned: float
    combinedInterestEarned: float
    cdMonthlyBalances: Tuple[MonthlyBalance, ...]
    hysaMonthlyBalances: Tuple[MonthlyBalance, ...]
    combinedMonthlyBalances: Tuple[MonthlyBalance, ...]
    # initial deposits plus every recurring contribution
    totalContributions: float
    betterOption: Strategy
    difference: float = Field(..., ge=0)


class ComparisonRow(BaseModel):
    """Balances sampled at one checkpoint month of the term."""

    month: int
    cdBalance: float
    hysaBalance: float
    combinedBalance: float
    bestOption: Strategy


class DifferencePoint(BaseModel):
    month: int
    cdVsHysa: float
    combinedVsBestIndividual: float


class ComparisonResponse(BaseModel):
    checkpoints: List[ComparisonRow]
    differences: List[DifferencePoint]


__all__ = [
    "ComparisonResponse",
    "ComparisonRow",
    "DifferencePoint",
    "MAX_RATE_PERCENT",
    "MonthlyBalance",
    "ProjectionInput",
    "ProjectionResult",
]
