"""
Domain records consumed and produced by the tax engine.

The surrounding application supplies a TaxProfile and a list of Transactions;
the engine returns a TaxResult. All records are frozen so a result can be
handed to renderers and exporters without risk of mutation.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class EntityType(str, Enum):
    INDIVIDUAL = "Individual"
    COMPANY = "Company"


class PersonaType(str, Enum):
    SALARY = "Salary Earner"
    BUSINESS = "Sole Proprietor / Enterprise"
    FREELANCER = "Freelancer"
    COMPANY = "Limited Liability Co (Ltd)"
    CRYPTO = "Crypto Trader"


class PolicyYear(str, Enum):
    ACT_2024 = "ACT_2024"
    ACT_2026_PROPOSED = "ACT_2026_PROPOSED"


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class SubscriptionTier(str, Enum):
    FREE = "Free"
    PRO = "Pro"


@dataclass(frozen=True)
class TaxProfile:
    entity_type: EntityType
    persona: PersonaType = PersonaType.SALARY
    state_of_residence: str = ""
    annual_gross_income: float = 0.0
    annual_turnover: float = 0.0
    pension_contribution: float = 0.0  # monthly
    nhf_contribution: float = 0.0  # monthly
    rent_paid: float = 0.0  # annual
    life_insurance: float = 0.0  # annual premium
    tier: SubscriptionTier = SubscriptionTier.FREE
    name: str = ""

    @property
    def declared_income(self) -> float:
        if self.entity_type == EntityType.COMPANY:
            return self.annual_turnover
        return self.annual_gross_income


@dataclass(frozen=True)
class Transaction:
    type: TransactionType
    amount: float
    date: date
    category: str = ""
    is_tax_deductible: bool = False
    has_input_vat: bool = False
    description: str = ""


@dataclass(frozen=True)
class TaxBreakdownItem:
    label: str
    rate: str
    taxable_amount: float
    tax_amount: float
    note: str | None = None
    is_relief: bool = False


@dataclass(frozen=True)
class TaxDeductions:
    pension: float = 0.0
    nhf: float = 0.0
    rent_relief: float = 0.0
    cra: float = 0.0
    life_insurance: float = 0.0
    total: float = 0.0


@dataclass(frozen=True)
class TaxResult:
    policy_used: PolicyYear
    status_label: str
    gross_revenue: float
    assessable_profit: float
    deductions: TaxDeductions
    taxable_income: float
    income_tax_liability: float
    development_levy: float
    vat_output: float
    vat_input_credit: float
    vat_payable: float
    total_tax_liability: float
    effective_tax_rate: float
    breakdown: tuple[TaxBreakdownItem, ...] = field(default_factory=tuple)
    insights: tuple[str, ...] = field(default_factory=tuple)
    compliance_flags: tuple[str, ...] = field(default_factory=tuple)


def format_rate(rate: float) -> str:
    return f"{rate * 100:.0f}%"
