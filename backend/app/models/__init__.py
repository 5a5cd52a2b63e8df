"""
Database models.
"""
from app.models.protocol import Protocol
from app.models.strategy import Strategy, StrategyProtocol, RiskLevel
from app.models.faucet_request import FaucetRequest

__all__ = [
    "Protocol",
    "Strategy",
    "StrategyProtocol",
    "RiskLevel",
    "FaucetRequest",
]
