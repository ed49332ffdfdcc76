"""
Company Income Tax (CIT) Calculator

2026 regime (Nigeria Tax Act 2025, Section 56 and Section 59):
  - Small companies (turnover ≤ ₦50M): 0% CIT, no Development Levy,
    but a nil return must still be filed
  - All other companies: 30% CIT plus 4% Development Levy on assessable profit

Legacy regime (Finance Act 2020, simplified):
  - Turnover below ₦25M: 0% CIT
  - All other companies: 30% CIT
  - No Development Levy

VAT (both regimes): 7.5% output VAT on turnover, less recoverable input VAT,
never below zero. VAT is a pass-through and is excluded from the effective rate.
"""

import logging
from dataclasses import dataclass

from levymate.core.exceptions import InvalidPolicyError
from levymate.core.models import (
    PolicyYear,
    TaxBreakdownItem,
    TaxDeductions,
    TaxProfile,
    TaxResult,
    format_rate,
)
from levymate.core.tax_rules.vat import output_vat, vat_payable

logger = logging.getLogger(__name__)

# The two regimes draw the small-company line at different turnovers
SMALL_COMPANY_TURNOVER_LIMIT_2026 = 50_000_000.0
LEGACY_SMALL_COMPANY_TURNOVER_LIMIT = 25_000_000.0

CIT_RATE_SMALL = 0.00
CIT_RATE_STANDARD = 0.30
DEVELOPMENT_LEVY_RATE = 0.04

NIL_RETURN_FLAG = "Mandatory: You must still file CIT returns (Nil Return) to maintain status."


@dataclass(frozen=True)
class CompanyRates:
    is_small: bool
    cit_rate: float
    development_levy_rate: float


class CITCalculator:
    """
    Deterministic Company Income Tax calculator for Nigerian companies.
    Supports the legacy and the 2026 regimes.
    """

    def is_small_company(self, turnover: float, policy: PolicyYear) -> bool:
        if policy == PolicyYear.ACT_2026_PROPOSED:
            return turnover <= SMALL_COMPANY_TURNOVER_LIMIT_2026
        if policy == PolicyYear.ACT_2024:
            return turnover < LEGACY_SMALL_COMPANY_TURNOVER_LIMIT
        raise InvalidPolicyError(policy)

    def calculate(
        self,
        profile: TaxProfile,
        turnover: float,
        profit: float,
        allowable_expenses: float,
        input_vat: float,
        policy: PolicyYear,
    ) -> TaxResult:
        if policy == PolicyYear.ACT_2024:
            return self.calculate_legacy(profile, turnover, profit, allowable_expenses, input_vat)
        if policy == PolicyYear.ACT_2026_PROPOSED:
            return self.calculate_2026(profile, turnover, profit, allowable_expenses, input_vat)
        raise InvalidPolicyError(policy)

    def calculate_legacy(
        self,
        profile: TaxProfile,
        turnover: float,
        profit: float,
        allowable_expenses: float,
        input_vat: float,
    ) -> TaxResult:
        is_small = self.is_small_company(turnover, PolicyYear.ACT_2024)
        rates = CompanyRates(
            is_small=is_small,
            cit_rate=CIT_RATE_SMALL if is_small else CIT_RATE_STANDARD,
            development_levy_rate=0.0,
        )
        insights = ["Logic Applied: Legacy CIT rules (Finance Act 2020). No Development Levy."]
        return self._build_result(
            PolicyYear.ACT_2024, rates, turnover, profit, allowable_expenses, input_vat, insights, []
        )

    def calculate_2026(
        self,
        profile: TaxProfile,
        turnover: float,
        profit: float,
        allowable_expenses: float,
        input_vat: float,
    ) -> TaxResult:
        insights = []
        flags = []

        if self.is_small_company(turnover, PolicyYear.ACT_2026_PROPOSED):
            logger.debug("Turnover %.2f qualifies as a small company", turnover)
            rates = CompanyRates(is_small=True, cit_rate=CIT_RATE_SMALL, development_levy_rate=0.0)
            insights.append("Status: Small Company. You are EXEMPT from CIT and Dev Levy.")
            flags.append(NIL_RETURN_FLAG)
        else:
            rates = CompanyRates(
                is_small=False,
                cit_rate=CIT_RATE_STANDARD,
                development_levy_rate=DEVELOPMENT_LEVY_RATE,
            )
            insights.append("Status: Large Company. Standard CIT rate applies.")

        return self._build_result(
            PolicyYear.ACT_2026_PROPOSED, rates, turnover, profit, allowable_expenses, input_vat, insights, flags
        )

    def _build_result(
        self,
        policy: PolicyYear,
        rates: CompanyRates,
        turnover: float,
        profit: float,
        allowable_expenses: float,
        input_vat: float,
        insights: list[str],
        flags: list[str],
    ) -> TaxResult:
        cit_liability = round(profit * rates.cit_rate, 2)
        development_levy = round(profit * rates.development_levy_rate, 2)

        breakdown = []
        if rates.cit_rate > 0:
            breakdown.append(
                TaxBreakdownItem(
                    label="Company Income Tax (CIT)",
                    rate=format_rate(rates.cit_rate),
                    taxable_amount=profit,
                    tax_amount=cit_liability,
                )
            )
        if rates.development_levy_rate > 0:
            breakdown.append(
                TaxBreakdownItem(
                    label="Development Levy",
                    rate=format_rate(rates.development_levy_rate),
                    taxable_amount=profit,
                    tax_amount=development_levy,
                )
            )

        vat_output = round(output_vat(turnover), 2)
        net_vat = round(vat_payable(vat_output, input_vat), 2)
        if input_vat > 0:
            insights.append(f"Input VAT Revolution: You recovered ₦{input_vat:,.2f} from your expenses.")

        effective_rate = ((cit_liability + development_levy) / turnover * 100) if turnover > 0 else 0.0

        return TaxResult(
            policy_used=policy,
            status_label="Small Company (Exempt)" if rates.is_small else "Large Company",
            gross_revenue=turnover,
            assessable_profit=profit,
            deductions=TaxDeductions(total=allowable_expenses),
            taxable_income=profit,
            income_tax_liability=cit_liability,
            development_levy=development_levy,
            vat_output=vat_output,
            vat_input_credit=input_vat,
            vat_payable=net_vat,
            total_tax_liability=round(cit_liability + development_levy + net_vat, 2),
            effective_tax_rate=round(effective_rate, 2),
            breakdown=tuple(breakdown),
            insights=tuple(insights),
            compliance_flags=tuple(flags),
        )
