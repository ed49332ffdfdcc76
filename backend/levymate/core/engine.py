"""
Tax Engine
Single entry point for the surrounding application:

    calculate(profile, transactions, policy) -> TaxResult

The engine is pure: it reads its inputs, allocates a fresh result and touches
no shared state, so it can be re-run on every edit of the profile or ledger.
Every (entity type, policy) pair is routed explicitly; an unknown policy is
rejected before any computation takes place.
"""

import logging
from collections.abc import Callable, Iterable

from levymate.core.aggregator import FinancialAggregator, Financials
from levymate.core.exceptions import InvalidPolicyError
from levymate.core.models import EntityType, PolicyYear, TaxProfile, TaxResult, Transaction
from levymate.core.tax_rules.cit import CITCalculator
from levymate.core.tax_rules.pit import PITCalculator

logger = logging.getLogger(__name__)

Route = Callable[[TaxProfile, Financials, float], TaxResult]


def coerce_policy(policy: PolicyYear | str) -> PolicyYear:
    try:
        return PolicyYear(policy)
    except ValueError:
        logger.warning("Rejected unknown tax policy %r", policy)
        raise InvalidPolicyError(policy) from None


class TaxEngine:
    def __init__(self):
        self.aggregator = FinancialAggregator()
        self.pit_calc = PITCalculator()
        self.cit_calc = CITCalculator()
        self._routes: dict[tuple[EntityType, PolicyYear], Route] = {
            (EntityType.INDIVIDUAL, PolicyYear.ACT_2024): self._individual_legacy,
            (EntityType.INDIVIDUAL, PolicyYear.ACT_2026_PROPOSED): self._individual_2026,
            (EntityType.COMPANY, PolicyYear.ACT_2024): self._company_legacy,
            (EntityType.COMPANY, PolicyYear.ACT_2026_PROPOSED): self._company_2026,
        }

    @property
    def routes(self) -> dict[tuple[EntityType, PolicyYear], Route]:
        return dict(self._routes)

    def calculate(
        self,
        profile: TaxProfile,
        transactions: Iterable[Transaction],
        policy: PolicyYear | str,
    ) -> TaxResult:
        policy = coerce_policy(policy)
        transactions = list(transactions)
        entity = EntityType(profile.entity_type)
        route = self._routes[(entity, policy)]

        financials = self.aggregator.aggregate(profile, transactions)
        assessable_profit = max(0.0, financials.gross_income - financials.allowable_expenses)

        logger.debug(
            "Calculating %s liability under %s over %d transactions",
            entity.value,
            policy.value,
            len(transactions),
        )
        return route(profile, financials, round(assessable_profit, 2))

    def _individual_legacy(self, profile: TaxProfile, financials: Financials, profit: float) -> TaxResult:
        return self.pit_calc.calculate_legacy(profile, financials.gross_income, profit)

    def _individual_2026(self, profile: TaxProfile, financials: Financials, profit: float) -> TaxResult:
        return self.pit_calc.calculate_2026(profile, financials.gross_income, profit)

    def _company_legacy(self, profile: TaxProfile, financials: Financials, profit: float) -> TaxResult:
        return self.cit_calc.calculate_legacy(
            profile,
            turnover=financials.gross_income,
            profit=profit,
            allowable_expenses=financials.allowable_expenses,
            input_vat=financials.input_vat_claims,
        )

    def _company_2026(self, profile: TaxProfile, financials: Financials, profit: float) -> TaxResult:
        return self.cit_calc.calculate_2026(
            profile,
            turnover=financials.gross_income,
            profit=profit,
            allowable_expenses=financials.allowable_expenses,
            input_vat=financials.input_vat_claims,
        )


_engine = TaxEngine()


def calculate(
    profile: TaxProfile,
    transactions: Iterable[Transaction],
    policy: PolicyYear | str,
) -> TaxResult:
    return _engine.calculate(profile, transactions, policy)
