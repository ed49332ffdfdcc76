"""
Policy Comparer ("What-If" Engine)
Runs the same profile and ledger through both regimes so users can see how
the 2026 reform changes their liability.

Examples:
  - "How much more or less will I pay once the new Act takes effect?"
  - "Does rent relief make up for losing the Consolidated Relief Allowance?"
  - "Does my company fall out of CIT entirely under the new small-company rule?"
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from levymate.core.engine import TaxEngine
from levymate.core.models import PolicyYear, TaxProfile, TaxResult, Transaction


@dataclass(frozen=True)
class PolicyComparison:
    label: str
    legacy: TaxResult
    proposed: TaxResult
    difference: float
    percentage_change: float
    insights: tuple[str, ...] = field(default_factory=tuple)


class PolicyComparer:
    """
    Compares tax outcomes between the legacy and the 2026 regimes.
    Uses the TaxEngine for all computations.
    """

    def __init__(self, engine: TaxEngine | None = None):
        self.engine = engine or TaxEngine()

    def compare_policies(
        self,
        profile: TaxProfile,
        transactions: Iterable[Transaction],
    ) -> PolicyComparison:
        transactions = list(transactions)
        legacy = self.engine.calculate(profile, transactions, PolicyYear.ACT_2024)
        proposed = self.engine.calculate(profile, transactions, PolicyYear.ACT_2026_PROPOSED)

        difference = proposed.total_tax_liability - legacy.total_tax_liability
        pct_change = (
            (difference / legacy.total_tax_liability * 100) if legacy.total_tax_liability > 0 else 0.0
        )

        insights = []
        if difference < 0:
            insights.append(
                f"The 2026 rules would save you ₦{abs(difference):,.2f} compared to the legacy rules."
            )
        elif difference > 0:
            insights.append(
                f"The 2026 rules would increase your liability by ₦{difference:,.2f}."
            )
        else:
            insights.append("Your liability is the same under both regimes.")

        insights.append(
            f"Legacy effective rate: {legacy.effective_tax_rate}% | "
            f"2026 effective rate: {proposed.effective_tax_rate}%"
        )

        if legacy.deductions.cra > 0 and proposed.deductions.rent_relief > 0:
            insights.append(
                f"Rent relief of ₦{proposed.deductions.rent_relief:,.2f} replaces the "
                f"₦{legacy.deductions.cra:,.2f} Consolidated Relief Allowance."
            )

        if legacy.status_label != proposed.status_label:
            insights.append(
                f"Your status changes from '{legacy.status_label}' to '{proposed.status_label}'."
            )

        return PolicyComparison(
            label="Legacy vs 2026 Policy Scenario",
            legacy=legacy,
            proposed=proposed,
            difference=round(difference, 2),
            percentage_change=round(pct_change, 2),
            insights=tuple(insights),
        )
