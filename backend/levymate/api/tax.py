"""
Tax calculation API routes.
Exposes the LevyMate tax engine via REST endpoints. Stateless: every request
carries the full profile and ledger.
"""

from dataclasses import asdict
from datetime import date

from fastapi import APIRouter, HTTPException

from levymate.config import get_settings
from levymate.schemas.schemas import AnalyticsRequest, CalculateRequest, CompareRequest
from levymate.core.analytics import deductibility_split, exemption_monitor, income_sources
from levymate.core.engine import TaxEngine
from levymate.core.scenario import PolicyComparer

router = APIRouter()

engine = TaxEngine()
policy_comparer = PolicyComparer(engine)


@router.post("/calculate")
async def calculate_tax(data: CalculateRequest):
    """Calculate PIT or CIT liability under the selected policy regime."""
    profile, transactions = data.to_domain()
    policy = data.policy or get_settings().DEFAULT_POLICY
    try:
        result = engine.calculate(profile, transactions, policy)
        return asdict(result)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/compare")
async def compare_policies(data: CompareRequest):
    """Compare liability under the legacy and the 2026 regimes."""
    profile, transactions = data.to_domain()
    try:
        result = policy_comparer.compare_policies(profile, transactions)
        return asdict(result)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/analytics")
async def ledger_analytics(data: AnalyticsRequest):
    """Exemption monitor, deductibility split and income sources for the selected period."""
    profile, transactions = data.to_domain()
    today = data.today or date.today()
    try:
        return {
            "exemption": asdict(exemption_monitor(profile, transactions, data.timeframe, today)),
            "deductibility": asdict(deductibility_split(profile, transactions, data.timeframe, today)),
            "income_sources": asdict(income_sources(transactions, data.timeframe, today)),
        }
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
