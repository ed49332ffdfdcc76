"""
Personal Income Tax (PIT) Calculator

Legacy regime (Finance Act 2020):
  - Consolidated Relief Allowance (CRA):
    higher of ₦200,000 or 1% of gross income, plus 20% of gross income
  - Pension, NHF and life insurance premiums are deducted alongside CRA
  - Legacy bands (7% to 24%)

2026 regime (Nigeria Tax Act 2025, Chapter 2, Part IX, Section 58):
  - CRA abolished
  - Rent relief: 20% of annual rent paid (max ₦500,000)
  - Pension, NHF and life insurance premiums remain deductible
  - Gross income of ₦800,000 or less is exempt outright
  - Fourth Schedule bands (0% to 25%)
"""

import logging

from levymate.core.exceptions import InvalidPolicyError
from levymate.core.models import (
    PolicyYear,
    TaxBreakdownItem,
    TaxDeductions,
    TaxProfile,
    TaxResult,
    format_rate,
)
from levymate.core.tax_rules.bands import LEGACY_PIT_BANDS, PIT_BANDS_2026, apply_bands

logger = logging.getLogger(__name__)

CRA_FIXED_MINIMUM = 200_000.0
CRA_GROSS_PERCENT = 0.01
CRA_GROSS_ADDITION = 0.20

RENT_RELIEF_RATE = 0.20
RENT_RELIEF_MAX = 500_000.0

EXEMPTION_THRESHOLD_2026 = 800_000.0

STATUS_LABEL = "Individual / Entrepreneur"


def consolidated_relief(gross_income: float) -> float:
    return max(CRA_FIXED_MINIMUM, gross_income * CRA_GROSS_PERCENT) + gross_income * CRA_GROSS_ADDITION


def rent_relief(rent_paid: float) -> float:
    return min(rent_paid * RENT_RELIEF_RATE, RENT_RELIEF_MAX)


class PITCalculator:
    """
    Deterministic Personal Income Tax calculator for Nigerian individuals.
    Supports the legacy and the 2026 regimes.
    """

    def calculate(
        self,
        profile: TaxProfile,
        gross_income: float,
        assessable_profit: float,
        policy: PolicyYear,
    ) -> TaxResult:
        if policy == PolicyYear.ACT_2024:
            return self.calculate_legacy(profile, gross_income, assessable_profit)
        if policy == PolicyYear.ACT_2026_PROPOSED:
            return self.calculate_2026(profile, gross_income, assessable_profit)
        raise InvalidPolicyError(policy)

    def calculate_legacy(
        self,
        profile: TaxProfile,
        gross_income: float,
        assessable_profit: float,
    ) -> TaxResult:
        pension = profile.pension_contribution * 12
        nhf = profile.nhf_contribution * 12
        life_insurance = profile.life_insurance
        cra = round(consolidated_relief(gross_income), 2)

        total_reliefs = cra + pension + nhf + life_insurance
        taxable_income = max(0.0, assessable_profit - total_reliefs)

        breakdown = [
            TaxBreakdownItem(
                label=f"Band {format_rate(s.band.rate)}",
                rate=format_rate(s.band.rate),
                taxable_amount=s.taxable_amount,
                tax_amount=s.tax_amount,
            )
            for s in apply_bands(taxable_income, LEGACY_PIT_BANDS)
        ]
        tax_liability = sum(item.tax_amount for item in breakdown)

        insights = [
            "Logic Applied: Consolidated Relief Allowance with legacy bands (Finance Act 2020).",
        ]

        return self._build_result(
            policy=PolicyYear.ACT_2024,
            gross_income=gross_income,
            assessable_profit=assessable_profit,
            deductions=TaxDeductions(
                pension=pension,
                nhf=nhf,
                cra=cra,
                life_insurance=life_insurance,
                total=round(total_reliefs, 2),
            ),
            taxable_income=taxable_income,
            tax_liability=tax_liability,
            breakdown=breakdown,
            insights=insights,
        )

    def calculate_2026(
        self,
        profile: TaxProfile,
        gross_income: float,
        assessable_profit: float,
    ) -> TaxResult:
        pension = profile.pension_contribution * 12
        nhf = profile.nhf_contribution * 12
        life_insurance = profile.life_insurance
        relief = round(rent_relief(profile.rent_paid), 2)

        breakdown = []
        insights = []

        if relief > 0:
            capped = profile.rent_paid * RENT_RELIEF_RATE > RENT_RELIEF_MAX
            breakdown.append(
                TaxBreakdownItem(
                    label="Rent Relief Claim",
                    rate=format_rate(RENT_RELIEF_RATE),
                    taxable_amount=profile.rent_paid,
                    tax_amount=-relief,
                    note="Capped at ₦500k" if capped else "20% of Rent",
                    is_relief=True,
                )
            )

        total_reliefs = pension + nhf + life_insurance + relief
        taxable_income = max(0.0, assessable_profit - total_reliefs)

        # Exemption is judged on gross income, not on taxable income after reliefs
        if gross_income <= EXEMPTION_THRESHOLD_2026:
            logger.debug("Gross income %.2f within 2026 exemption threshold", gross_income)
            tax_liability = 0.0
            insights.append("Exempt: Annual income is below the ₦800,000 threshold.")
        else:
            for s in apply_bands(taxable_income, PIT_BANDS_2026):
                breakdown.append(
                    TaxBreakdownItem(
                        label=s.band.note or "Band",
                        rate=format_rate(s.band.rate),
                        taxable_amount=s.taxable_amount,
                        tax_amount=s.tax_amount,
                        note="First ₦800k Tax Free" if s.band.rate == 0 else None,
                    )
                )
            tax_liability = sum(item.tax_amount for item in breakdown if not item.is_relief)
            insights.append("Logic Applied: New Progressive Bands (Nigeria Tax Act 2025).")
            if relief > 0:
                insights.append(f"You saved ₦{relief:,.2f} due to the new Rent Relief.")

        return self._build_result(
            policy=PolicyYear.ACT_2026_PROPOSED,
            gross_income=gross_income,
            assessable_profit=assessable_profit,
            deductions=TaxDeductions(
                pension=pension,
                nhf=nhf,
                rent_relief=relief,
                life_insurance=life_insurance,
                total=round(total_reliefs, 2),
            ),
            taxable_income=taxable_income,
            tax_liability=tax_liability,
            breakdown=breakdown,
            insights=insights,
        )

    def _build_result(
        self,
        policy: PolicyYear,
        gross_income: float,
        assessable_profit: float,
        deductions: TaxDeductions,
        taxable_income: float,
        tax_liability: float,
        breakdown: list[TaxBreakdownItem],
        insights: list[str],
    ) -> TaxResult:
        tax_liability = round(tax_liability, 2)
        effective_rate = (tax_liability / gross_income * 100) if gross_income > 0 else 0.0

        return TaxResult(
            policy_used=policy,
            status_label=STATUS_LABEL,
            gross_revenue=gross_income,
            assessable_profit=assessable_profit,
            deductions=deductions,
            taxable_income=round(taxable_income, 2),
            income_tax_liability=tax_liability,
            development_levy=0.0,
            vat_output=0.0,
            vat_input_credit=0.0,
            vat_payable=0.0,
            total_tax_liability=tax_liability,
            effective_tax_rate=round(effective_rate, 2),
            breakdown=tuple(breakdown),
            insights=tuple(insights),
        )
