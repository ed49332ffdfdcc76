"""
Financial Aggregator
Reduces a transaction ledger into the three figures the calculators need.

  - Gross income: sum of income transactions. A profile with an EMPTY ledger
    falls back to its declared estimate (turnover for companies, gross income
    for individuals). Any logged transaction switches the source to the ledger.
  - Allowable expenses: expenses that pass the WREN test (Wholly, Reasonably,
    Exclusively, Necessarily), signalled by the is_tax_deductible flag.
  - Input VAT claims: VAT extracted from VAT-inclusive expense amounts.
"""

import logging
from dataclasses import dataclass

from levymate.core.models import TaxProfile, Transaction, TransactionType
from levymate.core.tax_rules.vat import extract_vat_from_inclusive

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Financials:
    gross_income: float
    allowable_expenses: float
    input_vat_claims: float


class FinancialAggregator:
    def aggregate(self, profile: TaxProfile, transactions: list[Transaction]) -> Financials:
        gross_income = 0.0
        allowable_expenses = 0.0
        input_vat_claims = 0.0

        for tx in transactions:
            if tx.type == TransactionType.INCOME:
                gross_income += tx.amount
            elif tx.type == TransactionType.EXPENSE:
                if tx.is_tax_deductible:
                    allowable_expenses += tx.amount
                if tx.has_input_vat:
                    input_vat_claims += extract_vat_from_inclusive(tx.amount)

        if gross_income == 0 and not transactions:
            gross_income = profile.declared_income
            logger.debug("Empty ledger, using declared income estimate %.2f", gross_income)

        return Financials(
            gross_income=round(gross_income, 2),
            allowable_expenses=round(allowable_expenses, 2),
            input_vat_claims=round(input_vat_claims, 2),
        )
