"""
Protocol endpoints.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.api.params import parse_int_param
from app.api.schemas import ProtocolHistoryResponse, ProtocolResponse
from app.core.database import get_db
from app.core.exceptions import NotFoundError
from app.services.query import QueryService
from app.services.query.query_service import DEFAULT_HISTORY_DAYS, DEFAULT_TOP_PROTOCOLS

router = APIRouter()


def get_query_service(db: Session = Depends(get_db)) -> QueryService:
    return QueryService(db)


# Fixed paths are declared before /{name} so they are not captured as names

@router.get("/top", response_model=List[ProtocolResponse])
def top_protocols(
    limit: Optional[str] = Query(None),
    service: QueryService = Depends(get_query_service),
):
    """Active protocols with the highest APY."""
    return service.top_protocols(parse_int_param(limit, DEFAULT_TOP_PROTOCOLS))


@router.get("/category", response_model=List[ProtocolResponse])
@router.get("/category/{category}", response_model=List[ProtocolResponse])
def protocols_by_category(
    category: Optional[str] = None,
    service: QueryService = Depends(get_query_service),
):
    """Active protocols in a category (all active when omitted), APY descending."""
    return service.protocols_by_category(category)


@router.get("/categories", response_model=List[str])
def protocol_categories(service: QueryService = Depends(get_query_service)):
    return service.protocol_categories()


@router.get("", response_model=List[ProtocolResponse])
def list_protocols(service: QueryService = Depends(get_query_service)):
    return service.list_protocols()


@router.get("/{name}", response_model=ProtocolResponse)
def get_protocol(name: str, service: QueryService = Depends(get_query_service)):
    protocol = service.get_protocol(name)
    if protocol is None:
        raise NotFoundError("Protocol not found")
    return protocol


@router.get("/{name}/history", response_model=ProtocolHistoryResponse)
def protocol_history(
    name: str,
    days: Optional[str] = Query(None),
    service: QueryService = Depends(get_query_service),
):
    return service.protocol_history(name, parse_int_param(days, DEFAULT_HISTORY_DAYS))
