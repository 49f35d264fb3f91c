from __future__ import annotations

from typing import List, Tuple

from savings_compare.domain.frequencies import CompoundingFrequency, Strategy
from savings_compare.schemas.projection import (
    MonthlyBalance,
    ProjectionInput,
    ProjectionResult,
)

# Absorbs floating-point noise when picking the overall winner.
TIE_TOLERANCE = 0.01


class ProjectionContractError(ValueError):
    """Raised when an unvalidated input reaches the engine."""


def apply_monthly_interest(
    balance: float,
    annual_rate: float,
    frequency: CompoundingFrequency,
    month: int,
) -> float:
    """
    Grow ``balance`` by one month of interest.

    Sub-monthly compounding (daily) is approximated by raising the per-period
    factor to the fractional number of periods in a month. Monthly or less
    frequent compounding capitalises interest only on months that close a
    compounding period; other months leave the balance untouched.

    ``annual_rate`` is a decimal (0.0425 for 4.25%).
    """
    periods = frequency.periods_per_year
    compounds_per_month = periods / 12

    if compounds_per_month > 1:
        return balance * (1 + annual_rate / periods) ** compounds_per_month

    months_per_compound = 12 / periods
    if month % months_per_compound == 0:
        return balance * (1 + annual_rate / periods)
    return balance


def determine_verdict(
    cd_final: float, hysa_final: float, combined_final: float
) -> Tuple[Strategy, float]:
    """Return the winning strategy and its margin over the runner-up.

    A strategy only wins when it beats both others by more than
    ``TIE_TOLERANCE``; anything else is ``Strategy.EQUAL`` with a zero margin.
    """
    if cd_final > hysa_final + TIE_TOLERANCE and cd_final > combined_final + TIE_TOLERANCE:
        return Strategy.CD, cd_final - max(hysa_final, combined_final)
    if hysa_final > cd_final + TIE_TOLERANCE and hysa_final > combined_final + TIE_TOLERANCE:
        return Strategy.HYSA, hysa_final - max(cd_final, combined_final)
    if combined_final > cd_final + TIE_TOLERANCE and combined_final > hysa_final + TIE_TOLERANCE:
        return Strategy.COMBINED, combined_final - max(cd_final, hysa_final)
    return Strategy.EQUAL, 0.0


def project(inputs: ProjectionInput) -> ProjectionResult:
    """
    Simulate the CD, the HYSA and the combined strategy month by month.

    Order of operations (per month, 1..termMonths):
      1) Apply the CD's interest step.
      2) Apply the HYSA's interest step, then add this month's contribution
         (the contribution earns nothing until next month).
      3) Record each balance plus their sum for the combined strategy.

    Contributions are a smooth monthly equivalent (``regularContribution`` times
    the average contributions per month), not discrete weekly events.
    """
    if inputs.termMonths < 1:
        raise ProjectionContractError(
            f"termMonths must be a positive integer, got {inputs.termMonths!r}"
        )

    cd_rate = inputs.cdRate / 100
    hysa_rate = inputs.hysaRate / 100
    contributions_per_month = inputs.contributionFrequency.contributions_per_month

    cd_balance = float(inputs.initialDepositCD)
    hysa_balance = float(inputs.initialDepositHYSA)
    total_contributions = cd_balance + hysa_balance

    cd_history: List[MonthlyBalance] = []
    hysa_history: List[MonthlyBalance] = []
    combined_history: List[MonthlyBalance] = []

    for month in range(1, inputs.termMonths + 1):
        cd_balance = apply_monthly_interest(
            cd_balance, cd_rate, inputs.cdCompoundingFrequency, month
        )

        contribution = inputs.regularContribution * contributions_per_month
        total_contributions += contribution

        hysa_balance = apply_monthly_interest(
            hysa_balance, hysa_rate, inputs.hysaCompoundingFrequency, month
        )
        hysa_balance += contribution

        cd_history.append(MonthlyBalance(month=month, balance=cd_balance))
        hysa_history.append(MonthlyBalance(month=month, balance=hysa_balance))
        combined_history.append(
            MonthlyBalance(month=month, balance=cd_balance + hysa_balance)
        )

    cd_final = cd_history[-1].balance
    hysa_final = hysa_history[-1].balance
    combined_final = cd_final + hysa_final

    cd_interest = cd_final - inputs.initialDepositCD
    hysa_interest = (
        hysa_final
        - inputs.initialDepositHYSA
        - inputs.regularContribution * contributions_per_month * inputs.termMonths
    )

    better_option, difference = determine_verdict(cd_final, hysa_final, combined_final)

    return ProjectionResult(
        cdFinalBalance=cd_final,
        hysaFinalBalance=hysa_final,
        combinedFinalBalance=combined_final,
        cdInterestEarned=cd_interest,
        hysaInterestEarned=hysa_interest,
        combinedInterestEarned=cd_interest + hysa_interest,
        cdMonthlyBalances=tuple(cd_history),
        hysaMonthlyBalances=tuple(hysa_history),
        combinedMonthlyBalances=tuple(combined_history),
        totalContributions=total_contributions,
        betterOption=better_option,
        difference=difference,
    )


__all__ = [
    "TIE_TOLERANCE",
    "ProjectionContractError",
    "apply_monthly_interest",
    "determine_verdict",
    "project",
]
