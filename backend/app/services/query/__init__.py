"""
Protocol and strategy query service.
"""
from app.services.query.query_service import QueryService, contribution
from app.services.query.query_models import ProtocolContribution, ProtocolHistory, StrategyBreakdown

__all__ = [
    "QueryService",
    "contribution",
    "ProtocolContribution",
    "ProtocolHistory",
    "StrategyBreakdown",
]
