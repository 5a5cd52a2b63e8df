"""
Strategy (vault) endpoints.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from app.api.params import parse_int_param
from app.api.protocols import get_query_service
from app.api.schemas import StrategyBreakdownResponse, StrategyResponse
from app.core.exceptions import NotFoundError
from app.services.query import QueryService
from app.services.query.query_service import DEFAULT_HOT_VAULTS

router = APIRouter()


@router.get("/hot", response_model=List[StrategyResponse])
def hot_vaults(
    limit: Optional[str] = Query(None),
    service: QueryService = Depends(get_query_service),
):
    """Hot or featured vaults, highest current APY first."""
    return service.hot_vaults(parse_int_param(limit, DEFAULT_HOT_VAULTS))


@router.get("", response_model=List[StrategyResponse])
def list_strategies(service: QueryService = Depends(get_query_service)):
    return service.list_strategies()


@router.get("/{name}", response_model=StrategyResponse)
def get_strategy(name: str, service: QueryService = Depends(get_query_service)):
    strategy = service.get_strategy(name)
    if strategy is None:
        raise NotFoundError("Strategy not found")
    return strategy


@router.get("/{name}/breakdown", response_model=StrategyBreakdownResponse)
def strategy_breakdown(name: str, service: QueryService = Depends(get_query_service)):
    """Each linked protocol's APY weighted by its allocation."""
    return service.strategy_breakdown(name)
