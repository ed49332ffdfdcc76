"""
Pydantic schemas for API request validation.
Requests are converted into the engine's frozen domain records.
"""

from datetime import date

from pydantic import BaseModel, Field

from levymate.core.analytics import TimeFrame
from levymate.core.models import (
    EntityType,
    PersonaType,
    PolicyYear,
    SubscriptionTier,
    TaxProfile,
    Transaction,
    TransactionType,
)


# ── Profile & Ledger Schemas ──

class TaxProfileIn(BaseModel):
    name: str = ""
    entity_type: EntityType
    persona: PersonaType = PersonaType.SALARY
    state_of_residence: str = ""
    annual_gross_income: float = Field(default=0, ge=0)
    annual_turnover: float = Field(default=0, ge=0)
    pension_contribution: float = Field(default=0, ge=0, description="Monthly pension contribution")
    nhf_contribution: float = Field(default=0, ge=0, description="Monthly NHF contribution")
    rent_paid: float = Field(default=0, ge=0, description="Annual rent paid")
    life_insurance: float = Field(default=0, ge=0, description="Annual life insurance premium")
    tier: SubscriptionTier = SubscriptionTier.FREE

    def to_profile(self) -> TaxProfile:
        return TaxProfile(**self.model_dump())


class TransactionIn(BaseModel):
    type: TransactionType
    amount: float = Field(..., ge=0)
    date: date
    category: str = ""
    description: str = ""
    is_tax_deductible: bool = False
    has_input_vat: bool = False

    def to_transaction(self) -> Transaction:
        return Transaction(**self.model_dump())


class LedgerRequest(BaseModel):
    profile: TaxProfileIn
    transactions: list[TransactionIn] = []

    def to_domain(self) -> tuple[TaxProfile, list[Transaction]]:
        return self.profile.to_profile(), [t.to_transaction() for t in self.transactions]


# ── Tax Schemas ──

class CalculateRequest(LedgerRequest):
    policy: PolicyYear | None = Field(default=None, description="ACT_2024 or ACT_2026_PROPOSED")


class CompareRequest(LedgerRequest):
    pass


class AnalyticsRequest(LedgerRequest):
    timeframe: TimeFrame = TimeFrame.YEARLY
    today: date | None = None
