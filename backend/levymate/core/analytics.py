"""
Ledger Analytics
Period views over the ledger for the dashboard charts.

  - Timeframe filtering (current month, quarter or year)
  - Exemption monitor: income used against the ₦800,000 tax-free allowance
  - Deductibility split: statutory reliefs vs WREN business costs vs personal spend
  - Income sources: period income totalled per category, in first-seen order

Annual figures (the exemption threshold, rent relief, life insurance, the
declared income estimate) are scaled to the period; monthly contributions are
multiplied by the months in the period.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from levymate.core.models import TaxProfile, Transaction, TransactionType
from levymate.core.tax_rules.pit import EXEMPTION_THRESHOLD_2026, rent_relief


class TimeFrame(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


PERIOD_MULTIPLIERS = {
    TimeFrame.MONTHLY: 1 / 12,
    TimeFrame.QUARTERLY: 0.25,
    TimeFrame.YEARLY: 1.0,
}

MONTHS_IN_PERIOD = {
    TimeFrame.MONTHLY: 1,
    TimeFrame.QUARTERLY: 3,
    TimeFrame.YEARLY: 12,
}


@dataclass(frozen=True)
class ExemptionMonitor:
    timeframe: TimeFrame
    period_income: float
    period_threshold: float
    tax_free_used: float
    allowance_remaining: float
    taxable_excess: float


@dataclass(frozen=True)
class DeductibilitySlice:
    name: str
    value: float


@dataclass(frozen=True)
class DeductibilitySplit:
    timeframe: TimeFrame
    slices: tuple[DeductibilitySlice, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class IncomeSourceSplit:
    timeframe: TimeFrame
    slices: tuple[DeductibilitySlice, ...] = field(default_factory=tuple)


def _quarter(d: date) -> int:
    return (d.month - 1) // 3


def filter_by_timeframe(
    transactions: list[Transaction],
    timeframe: TimeFrame | str,
    today: date,
) -> list[Transaction]:
    timeframe = TimeFrame(timeframe)
    if timeframe == TimeFrame.MONTHLY:
        return [t for t in transactions if t.date.year == today.year and t.date.month == today.month]
    if timeframe == TimeFrame.QUARTERLY:
        return [t for t in transactions if t.date.year == today.year and _quarter(t.date) == _quarter(today)]
    return [t for t in transactions if t.date.year == today.year]


def exemption_monitor(
    profile: TaxProfile,
    transactions: list[Transaction],
    timeframe: TimeFrame | str,
    today: date,
) -> ExemptionMonitor:
    timeframe = TimeFrame(timeframe)
    multiplier = PERIOD_MULTIPLIERS[timeframe]
    period_threshold = EXEMPTION_THRESHOLD_2026 * multiplier

    filtered = filter_by_timeframe(transactions, timeframe, today)
    income = sum(t.amount for t in filtered if t.type == TransactionType.INCOME)
    if income == 0 and not filtered:
        income = profile.declared_income * multiplier

    if income < period_threshold:
        used, remaining, excess = income, period_threshold - income, 0.0
    else:
        used, remaining, excess = period_threshold, 0.0, income - period_threshold

    return ExemptionMonitor(
        timeframe=timeframe,
        period_income=round(income, 2),
        period_threshold=round(period_threshold, 2),
        tax_free_used=round(used, 2),
        allowance_remaining=round(remaining, 2),
        taxable_excess=round(excess, 2),
    )


def deductibility_split(
    profile: TaxProfile,
    transactions: list[Transaction],
    timeframe: TimeFrame | str,
    today: date,
) -> DeductibilitySplit:
    timeframe = TimeFrame(timeframe)
    multiplier = PERIOD_MULTIPLIERS[timeframe]
    months = MONTHS_IN_PERIOD[timeframe]

    statutory = (
        profile.pension_contribution * months
        + profile.nhf_contribution * months
        + profile.life_insurance * multiplier
    )
    tax_savers = statutory + rent_relief(profile.rent_paid) * multiplier

    business_costs = 0.0
    personal_costs = 0.0
    for t in filter_by_timeframe(transactions, timeframe, today):
        if t.type != TransactionType.EXPENSE:
            continue
        if t.is_tax_deductible:
            business_costs += t.amount
        else:
            personal_costs += t.amount

    slices = [
        DeductibilitySlice("Tax Savers", round(tax_savers, 2)),
        DeductibilitySlice("Business (WREN)", round(business_costs, 2)),
        DeductibilitySlice("Personal/Non-Ded", round(personal_costs, 2)),
    ]
    return DeductibilitySplit(
        timeframe=timeframe,
        slices=tuple(s for s in slices if s.value > 0),
    )


def income_sources(
    transactions: list[Transaction],
    timeframe: TimeFrame | str,
    today: date,
) -> IncomeSourceSplit:
    timeframe = TimeFrame(timeframe)
    totals: dict[str, float] = {}
    for t in filter_by_timeframe(transactions, timeframe, today):
        if t.type != TransactionType.INCOME:
            continue
        category = t.category or "Uncategorized"
        totals[category] = totals.get(category, 0.0) + t.amount

    return IncomeSourceSplit(
        timeframe=timeframe,
        slices=tuple(DeductibilitySlice(name, round(value, 2)) for name, value in totals.items()),
    )
