"""
Token faucet service.
"""
from app.services.faucet.faucet_service import (
    FaucetService,
    FAUCET_AMOUNT,
    COOLDOWN,
    HISTORY_LIMIT,
    canonical_address,
    cooldown_message,
)
from app.services.faucet.faucet_models import FaucetResult

__all__ = [
    "FaucetService",
    "FaucetResult",
    "FAUCET_AMOUNT",
    "COOLDOWN",
    "HISTORY_LIMIT",
    "canonical_address",
    "cooldown_message",
]
