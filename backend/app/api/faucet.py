"""
Token faucet endpoints.
"""
import re
from datetime import datetime, timezone
from typing import Any, List, Optional
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from pydantic import field_validator
from app.api.schemas import CamelModel
from app.core.database import get_db
from app.core.exceptions import ValidationError
from app.services.faucet import FaucetService

router = APIRouter()

WALLET_ADDRESS_PATTERN = re.compile(r"^0x[a-fA-F0-9]{40}$")


class FaucetTokenRequest(CamelModel):
    wallet_address: Optional[Any] = None  # type checked by is_valid_wallet_address


class FaucetHistoryItem(CamelModel):
    id: int
    wallet_address: str
    amount: int
    tx_hash: str
    requested_at: datetime

    @field_validator("requested_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # SQLite drops tzinfo; stored timestamps are UTC
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def is_valid_wallet_address(value: Any) -> bool:
    return isinstance(value, str) and bool(WALLET_ADDRESS_PATTERN.fullmatch(value))


def get_faucet_service(db: Session = Depends(get_db)) -> FaucetService:
    return FaucetService(db)


@router.post("/request")
def request_tokens(
    body: Optional[FaucetTokenRequest] = None,
    service: FaucetService = Depends(get_faucet_service),
):
    """
    Grant faucet tokens to a wallet.

    400 when the address is missing or malformed, 429 while the wallet is
    cooling down (body carries cooldownUntil).
    """
    wallet_address = body.wallet_address if body else None
    if not wallet_address:
        raise ValidationError("Wallet address is required", payload={"success": False})
    if not is_valid_wallet_address(wallet_address):
        raise ValidationError("Invalid wallet address format", payload={"success": False})

    result = service.request_tokens(wallet_address)
    return JSONResponse(status_code=200 if result.success else 429, content=result.to_response())


@router.get("/history/{wallet_address}", response_model=List[FaucetHistoryItem])
def faucet_history(wallet_address: str, service: FaucetService = Depends(get_faucet_service)):
    if not is_valid_wallet_address(wallet_address):
        raise ValidationError("Invalid wallet address format")
    return service.get_history(wallet_address)
