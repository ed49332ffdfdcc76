"""
Tests for the Financial Aggregator.
Gross income, WREN-deductible expenses and recoverable input VAT.
"""

from datetime import date

import pytest

from levymate.core.aggregator import FinancialAggregator
from levymate.core.models import EntityType, TaxProfile, Transaction, TransactionType


@pytest.fixture
def aggregator():
    return FinancialAggregator()


def income(amount, **kwargs):
    return Transaction(type=TransactionType.INCOME, amount=amount, date=date(2026, 3, 1), **kwargs)


def expense(amount, **kwargs):
    return Transaction(type=TransactionType.EXPENSE, amount=amount, date=date(2026, 3, 1), **kwargs)


class TestGrossIncome:
    def test_individual_falls_back_to_declared_income(self, aggregator):
        profile = TaxProfile(entity_type=EntityType.INDIVIDUAL, annual_gross_income=5_000_000, annual_turnover=9)
        assert aggregator.aggregate(profile, []).gross_income == 5_000_000

    def test_company_falls_back_to_declared_turnover(self, aggregator):
        profile = TaxProfile(entity_type=EntityType.COMPANY, annual_gross_income=9, annual_turnover=40_000_000)
        assert aggregator.aggregate(profile, []).gross_income == 40_000_000

    def test_any_income_replaces_estimate(self, aggregator):
        profile = TaxProfile(entity_type=EntityType.INDIVIDUAL, annual_gross_income=5_000_000)
        assert aggregator.aggregate(profile, [income(1)]).gross_income == 1

    def test_expense_only_ledger_does_not_fall_back(self, aggregator):
        profile = TaxProfile(entity_type=EntityType.INDIVIDUAL, annual_gross_income=5_000_000)
        result = aggregator.aggregate(profile, [expense(10_000)])
        assert result.gross_income == 0

    def test_income_summed(self, aggregator):
        profile = TaxProfile(entity_type=EntityType.INDIVIDUAL)
        result = aggregator.aggregate(profile, [income(100_000), income(250_000), expense(50_000)])
        assert result.gross_income == 350_000

    def test_empty_profile_all_zero(self, aggregator):
        result = aggregator.aggregate(TaxProfile(entity_type=EntityType.INDIVIDUAL), [])
        assert result.gross_income == 0
        assert result.allowable_expenses == 0
        assert result.input_vat_claims == 0


class TestAllowableExpenses:
    def test_only_deductible_expenses_count(self, aggregator):
        profile = TaxProfile(entity_type=EntityType.COMPANY)
        result = aggregator.aggregate(profile, [
            expense(100_000, is_tax_deductible=True),
            expense(40_000),
            expense(60_000, is_tax_deductible=False),
        ])
        assert result.allowable_expenses == 100_000

    def test_deductible_flag_on_income_ignored(self, aggregator):
        profile = TaxProfile(entity_type=EntityType.COMPANY)
        result = aggregator.aggregate(profile, [income(500_000, is_tax_deductible=True)])
        assert result.allowable_expenses == 0


class TestInputVat:
    def test_vat_extracted_from_inclusive_amount(self, aggregator):
        # 107.5 inclusive holds 7.5 VAT, not 107.5 * 7.5% = 8.0625
        profile = TaxProfile(entity_type=EntityType.COMPANY)
        result = aggregator.aggregate(profile, [expense(107.5, has_input_vat=True)])
        assert result.input_vat_claims == pytest.approx(7.5)
        assert result.input_vat_claims != pytest.approx(8.0625)

    def test_vat_claims_summed(self, aggregator):
        profile = TaxProfile(entity_type=EntityType.COMPANY)
        result = aggregator.aggregate(profile, [
            expense(1_075_000, has_input_vat=True, is_tax_deductible=True),
            expense(215, has_input_vat=True),
            expense(500_000),
        ])
        assert result.input_vat_claims == pytest.approx(75_015)

    def test_vat_flag_on_income_ignored(self, aggregator):
        profile = TaxProfile(entity_type=EntityType.COMPANY)
        result = aggregator.aggregate(profile, [income(107.5, has_input_vat=True)])
        assert result.input_vat_claims == 0

    def test_ledger_order_irrelevant(self, aggregator):
        profile = TaxProfile(entity_type=EntityType.COMPANY)
        ledger = [income(1_000_000), expense(215, has_input_vat=True), expense(300, is_tax_deductible=True)]
        assert aggregator.aggregate(profile, ledger) == aggregator.aggregate(profile, list(reversed(ledger)))
