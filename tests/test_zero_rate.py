from __future__ import annotations

import pytest

from savings_compare.core.projection import project
from savings_compare.domain.frequencies import CompoundingFrequency, Strategy
from savings_compare.schemas.projection import ProjectionInput


@pytest.mark.parametrize("frequency", list(CompoundingFrequency))
def test_zero_rate_keeps_deposits_exact(frequency):
    """
    With no interest and no contributions, every month should sit exactly at the initial deposit.
    """
    inputs = ProjectionInput(
        initialDepositCD=5000.0,
        initialDepositHYSA=1234.56,
        cdRate=0.0,
        hysaRate=0.0,
        termMonths=24,
        cdCompoundingFrequency=frequency,
        hysaCompoundingFrequency=frequency,
        regularContribution=0.0,
    )

    result = project(inputs)

    assert result.cdFinalBalance == 5000.0
    assert result.hysaFinalBalance == 1234.56
    assert result.cdInterestEarned == 0.0
    assert result.hysaInterestEarned == 0.0
    for point in result.cdMonthlyBalances:
        assert point.balance == 5000.0
    for point in result.hysaMonthlyBalances:
        assert point.balance == 1234.56
    # combined always carries both legs
    assert result.betterOption == Strategy.COMBINED
    assert result.difference == pytest.approx(1234.56)


def test_all_zero_inputs_are_equal():
    inputs = ProjectionInput(
        initialDepositCD=0.0,
        initialDepositHYSA=0.0,
        cdRate=0.0,
        hysaRate=0.0,
        termMonths=3,
        cdCompoundingFrequency="monthly",
        hysaCompoundingFrequency="monthly",
        regularContribution=0.0,
    )

    result = project(inputs)

    assert result.combinedFinalBalance == 0.0
    assert result.totalContributions == 0.0
    assert result.betterOption == Strategy.EQUAL
    assert result.difference == 0.0
