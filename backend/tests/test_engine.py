"""
Tests for the Tax Engine orchestrator.
Dispatch, policy validation, determinism and result invariants.
"""

from datetime import date
from itertools import product

import pytest

from levymate.core import engine as engine_module
from levymate.core.engine import TaxEngine
from levymate.core.exceptions import InvalidPolicyError
from levymate.core.models import (
    EntityType,
    PolicyYear,
    TaxProfile,
    Transaction,
    TransactionType,
)


@pytest.fixture
def engine():
    return TaxEngine()


@pytest.fixture
def salary_earner():
    return TaxProfile(
        entity_type=EntityType.INDIVIDUAL,
        annual_gross_income=5_000_000,
        rent_paid=1_200_000,
        pension_contribution=20_000,
        nhf_contribution=5_000,
        life_insurance=0,
    )


@pytest.fixture
def company_ledger():
    return [
        Transaction(TransactionType.INCOME, 60_000_000, date(2026, 2, 1), "Business Sales"),
        Transaction(TransactionType.EXPENSE, 10_750_000, date(2026, 2, 3), "Office Rent",
                    is_tax_deductible=True, has_input_vat=True),
        Transaction(TransactionType.EXPENSE, 2_000_000, date(2026, 2, 9), "Other"),
    ]


def assert_invariants(result):
    assert result.total_tax_liability == pytest.approx(
        result.income_tax_liability + result.development_levy + result.vat_payable
    )
    assert result.taxable_income >= 0
    charged = sum(item.tax_amount for item in result.breakdown if not item.is_relief)
    assert charged == pytest.approx(result.income_tax_liability + result.development_levy)


class TestPolicyValidation:
    def test_unknown_policy_rejected(self, engine, salary_earner):
        with pytest.raises(InvalidPolicyError):
            engine.calculate(salary_earner, [], "2025_ACT")

    def test_invalid_policy_is_value_error(self, engine, salary_earner):
        with pytest.raises(ValueError):
            engine.calculate(salary_earner, [], None)

    def test_policy_string_accepted(self, engine, salary_earner):
        result = engine.calculate(salary_earner, [], "ACT_2024")
        assert result.policy_used == PolicyYear.ACT_2024


class TestDispatch:
    def test_every_combination_routed(self, engine):
        assert set(engine.routes) == set(product(EntityType, PolicyYear))

    @pytest.mark.parametrize("entity, policy", list(product(EntityType, PolicyYear)))
    def test_each_route_returns_result(self, engine, entity, policy):
        profile = TaxProfile(entity_type=entity, annual_gross_income=8_000_000, annual_turnover=80_000_000)
        result = engine.calculate(profile, [], policy)
        assert result.policy_used == policy
        assert_invariants(result)

    def test_individual_goes_to_pit(self, engine, salary_earner):
        result = engine.calculate(salary_earner, [], PolicyYear.ACT_2026_PROPOSED)
        assert result.status_label == "Individual / Entrepreneur"

    def test_company_goes_to_cit(self, engine):
        profile = TaxProfile(entity_type=EntityType.COMPANY, annual_turnover=80_000_000)
        result = engine.calculate(profile, [], PolicyYear.ACT_2026_PROPOSED)
        assert result.status_label == "Large Company"
        assert result.vat_output > 0


class TestDeterminism:
    def test_repeat_calls_identical(self, engine, salary_earner):
        first = engine.calculate(salary_earner, [], PolicyYear.ACT_2026_PROPOSED)
        second = engine.calculate(salary_earner, [], PolicyYear.ACT_2026_PROPOSED)
        assert first == second

    def test_separate_engines_identical(self, company_ledger):
        profile = TaxProfile(entity_type=EntityType.COMPANY)
        first = TaxEngine().calculate(profile, company_ledger, PolicyYear.ACT_2024)
        second = TaxEngine().calculate(profile, company_ledger, PolicyYear.ACT_2024)
        assert first == second

    def test_inputs_not_mutated(self, engine, company_ledger):
        snapshot = list(company_ledger)
        engine.calculate(TaxProfile(entity_type=EntityType.COMPANY), company_ledger, PolicyYear.ACT_2026_PROPOSED)
        assert company_ledger == snapshot

    def test_generator_ledger_consumed_once(self, engine):
        ledger = [
            Transaction(TransactionType.INCOME, 3_000_000, date(2026, 1, 5)),
            Transaction(TransactionType.EXPENSE, 1_000_000, date(2026, 1, 6), is_tax_deductible=True),
        ]
        profile = TaxProfile(entity_type=EntityType.INDIVIDUAL)
        from_generator = engine.calculate(profile, (t for t in ledger), PolicyYear.ACT_2024)
        assert from_generator == engine.calculate(profile, ledger, PolicyYear.ACT_2024)
        assert from_generator.assessable_profit == 2_000_000

    def test_empty_generator_falls_back_to_estimate(self, engine, salary_earner):
        result = engine.calculate(salary_earner, (t for t in []), PolicyYear.ACT_2026_PROPOSED)
        assert result.gross_revenue == 5_000_000
        assert result.income_tax_liability == 592_800


class TestClamping:
    @pytest.mark.parametrize("entity", list(EntityType))
    @pytest.mark.parametrize("policy", list(PolicyYear))
    def test_expenses_exceeding_income(self, engine, entity, policy):
        ledger = [
            Transaction(TransactionType.INCOME, 1_000_000, date(2026, 1, 5)),
            Transaction(TransactionType.EXPENSE, 3_000_000, date(2026, 1, 6), is_tax_deductible=True),
        ]
        result = engine.calculate(TaxProfile(entity_type=entity), ledger, policy)
        assert result.assessable_profit == 0
        assert result.taxable_income == 0
        assert result.income_tax_liability == 0
        assert result.development_levy == 0
        assert result.total_tax_liability >= 0


class TestScenarios:
    def test_salary_earner_2026(self, engine, salary_earner):
        # Reliefs: 240K rent + 240K pension + 60K NHF = 540K; taxable 4.46M
        # 800K at 0% + 2.2M at 15% (330K) + 1.46M at 18% (262.8K) = 592.8K
        result = engine.calculate(salary_earner, [], PolicyYear.ACT_2026_PROPOSED)
        assert result.gross_revenue == 5_000_000
        assert result.deductions.rent_relief == 240_000
        assert result.deductions.total == 540_000
        assert result.taxable_income == 4_460_000
        assert result.income_tax_liability == 592_800
        assert result.total_tax_liability == 592_800
        assert [item.tax_amount for item in result.breakdown] == [-240_000, 0, 330_000, 262_800]
        assert_invariants(result)

    def test_large_company_2026_with_ledger(self, engine, company_ledger):
        # Profit = 60M - 10.75M deductible = 49.25M; input VAT = 750K
        result = engine.calculate(TaxProfile(entity_type=EntityType.COMPANY), company_ledger,
                                  PolicyYear.ACT_2026_PROPOSED)
        assert result.assessable_profit == 49_250_000
        assert result.vat_input_credit == pytest.approx(750_000)
        assert result.income_tax_liability == pytest.approx(14_775_000)
        assert result.development_levy == pytest.approx(1_970_000)
        assert result.vat_payable == pytest.approx(3_750_000)
        assert result.total_tax_liability == pytest.approx(20_495_000)
        assert_invariants(result)

    def test_company_without_ledger_uses_turnover(self, engine):
        profile = TaxProfile(entity_type=EntityType.COMPANY, annual_turnover=30_000_000)
        result = engine.calculate(profile, [], PolicyYear.ACT_2026_PROPOSED)
        assert result.gross_revenue == 30_000_000
        assert result.income_tax_liability == 0
        assert result.compliance_flags


class TestModuleFunction:
    def test_calculate_shortcut(self, salary_earner):
        result = engine_module.calculate(salary_earner, [], PolicyYear.ACT_2026_PROPOSED)
        assert result.income_tax_liability == 592_800
