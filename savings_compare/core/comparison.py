"""Derived views over a projection: checkpoint table and difference series."""

from __future__ import annotations

import math
from typing import Dict, List, Tuple

from savings_compare.domain.frequencies import Strategy
from savings_compare.schemas.projection import (
    ComparisonRow,
    DifferencePoint,
    MonthlyBalance,
    ProjectionResult,
)


def comparison_checkpoints(term_months: int) -> List[int]:
    """Months sampled by the comparison table: 1/6, 1/3, 1/2, 2/3 of the term and its end."""
    months = {
        math.ceil(term_months / 6),
        math.ceil(term_months / 3),
        math.ceil(term_months / 2),
        math.ceil(2 * term_months / 3),
        term_months,
    }
    return sorted(month for month in months if month <= term_months)


def best_option_at(cd: float, hysa: float, combined: float) -> Strategy:
    # no tolerance band here, unlike determine_verdict
    if cd > hysa and cd > combined:
        return Strategy.CD
    if hysa > cd and hysa > combined:
        return Strategy.HYSA
    if combined > cd and combined > hysa:
        return Strategy.COMBINED
    return Strategy.EQUAL


def _by_month(history: Tuple[MonthlyBalance, ...]) -> Dict[int, MonthlyBalance]:
    return {point.month: point for point in history}


def build_comparison_table(result: ProjectionResult) -> List[ComparisonRow]:
    term_months = len(result.cdMonthlyBalances)
    cd = _by_month(result.cdMonthlyBalances)
    hysa = _by_month(result.hysaMonthlyBalances)
    combined = _by_month(result.combinedMonthlyBalances)

    rows: List[ComparisonRow] = []
    for month in comparison_checkpoints(term_months):
        cd_balance = cd[month].balance
        hysa_balance = hysa[month].balance
        combined_balance = combined[month].balance
        rows.append(
            ComparisonRow(
                month=month,
                cdBalance=cd_balance,
                hysaBalance=hysa_balance,
                combinedBalance=combined_balance,
                bestOption=best_option_at(cd_balance, hysa_balance, combined_balance),
            )
        )
    return rows


def difference_series(result: ProjectionResult) -> List[DifferencePoint]:
    """Month-over-month gaps: CD minus HYSA, and combined minus the better single account."""
    points: List[DifferencePoint] = []
    for cd, hysa, combined in zip(
        result.cdMonthlyBalances,
        result.hysaMonthlyBalances,
        result.combinedMonthlyBalances,
    ):
        points.append(
            DifferencePoint(
                month=cd.month,
                cdVsHysa=cd.balance - hysa.balance,
                combinedVsBestIndividual=combined.balance - max(cd.balance, hysa.balance),
            )
        )
    return points


__all__ = [
    "best_option_at",
    "build_comparison_table",
    "comparison_checkpoints",
    "difference_series",
]
