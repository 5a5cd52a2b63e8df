"""
Faucet request model (append-only log of token grants).
"""
from sqlalchemy import Column, Integer, String, DateTime, Date, UniqueConstraint
from app.core.database import Base


class FaucetRequest(Base):
    __tablename__ = "faucet_requests"

    id = Column(Integer, primary_key=True, index=True)
    wallet_address = Column(String(42), nullable=False, index=True)  # lower-cased 0x + 40 hex
    amount = Column(Integer, nullable=False)
    tx_hash = Column(String(66), unique=True, nullable=False)  # synthetic, not an on-chain transfer
    requested_at = Column(DateTime(timezone=True), nullable=False, index=True)  # UTC
    request_day = Column(Date, nullable=False)  # UTC date of requested_at

    # Grants are >= 24h apart, so two rows for one wallet on one day means a lost race
    __table_args__ = (
        UniqueConstraint('wallet_address', 'request_day', name='uq_faucet_requests_wallet_day'),
    )
