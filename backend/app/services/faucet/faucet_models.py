"""
Faucet result classes.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class FaucetResult:
    """Outcome of a token request: a grant, or a cooldown denial."""
    success: bool
    cooldown_until: datetime
    amount: Optional[int] = None
    tx_hash: Optional[str] = None
    error: Optional[str] = None
    hours_remaining: Optional[int] = None

    def to_response(self) -> Dict[str, Any]:
        """JSON body returned to the client."""
        if self.success:
            return {
                "success": True,
                "amount": self.amount,
                "txHash": self.tx_hash,
                "cooldownUntil": self.cooldown_until.isoformat(),
            }
        return {
            "success": False,
            "error": self.error,
            "cooldownUntil": self.cooldown_until.isoformat(),
        }
