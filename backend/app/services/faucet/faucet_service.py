"""
Token faucet with a 24-hour per-wallet cooldown.

A wallet is eligible when it has no grant in the last 24 hours. Eligibility is
derived from the faucet_requests table on every call; nothing is held in memory.

The eligibility check and the insert are separate statements. Concurrent
requests for the same wallet on the same UTC day are serialized by the unique
(wallet_address, request_day) constraint: the loser gets an IntegrityError.
Requests straddling midnight land on different days, so after flushing its
row a request re-checks for any other grant within 24 hours either side and
backs out if one is visible. Either way the loser gets a cooldown denial built
from the winning row.
"""
import logging
import math
import secrets
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from app.models.faucet_request import FaucetRequest
from app.services.faucet.faucet_models import FaucetResult

logger = logging.getLogger(__name__)

FAUCET_AMOUNT = 10000
COOLDOWN = timedelta(hours=24)
HISTORY_LIMIT = 10
COOLDOWN_HOURS = int(COOLDOWN / timedelta(hours=1))


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything stored is UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def canonical_address(wallet_address: str) -> str:
    return wallet_address.lower()


def generate_tx_hash() -> str:
    """Synthetic 32-byte transaction hash. Not backed by any chain transfer."""
    return "0x" + secrets.token_hex(32)


def cooldown_message(hours_remaining: int) -> str:
    unit = "hour" if hours_remaining == 1 else "hours"
    return f"You can request again in {hours_remaining} {unit}"


class FaucetService:
    """Faucet grants and history against an injected session."""

    def __init__(self, db: Session, clock: Callable[[], datetime] = utc_now):
        self.db = db
        self.clock = clock

    def _latest_within_cooldown(self, wallet_address: str, now: datetime) -> Optional[FaucetRequest]:
        return self.db.query(FaucetRequest).filter(
            FaucetRequest.wallet_address == wallet_address,
            FaucetRequest.requested_at > now - COOLDOWN,
        ).order_by(FaucetRequest.requested_at.desc(), FaucetRequest.id.desc()).first()

    def _competing_grant(self, grant: FaucetRequest, now: datetime) -> Optional[FaucetRequest]:
        return self.db.query(FaucetRequest).filter(
            FaucetRequest.wallet_address == grant.wallet_address,
            FaucetRequest.id != grant.id,
            FaucetRequest.requested_at > now - COOLDOWN,
            FaucetRequest.requested_at < now + COOLDOWN,
        ).order_by(FaucetRequest.requested_at.desc(), FaucetRequest.id.desc()).first()

    def _denied(self, last_request: FaucetRequest, now: datetime) -> FaucetResult:
        cooldown_until = _as_utc(last_request.requested_at) + COOLDOWN
        hours_remaining = math.ceil((cooldown_until - now) / timedelta(hours=1))
        # A competing grant can be stamped slightly after our clock reading
        hours_remaining = min(COOLDOWN_HOURS, max(1, hours_remaining))
        return FaucetResult(
            success=False,
            cooldown_until=cooldown_until,
            error=cooldown_message(hours_remaining),
            hours_remaining=hours_remaining,
        )

    def _lost_race(self, address: str) -> Optional[FaucetResult]:
        """Cooldown denial built from the grant that beat ours, read after our rollback."""
        now = _as_utc(self.clock())
        winner = self._latest_within_cooldown(address, now)
        if winner is None:
            return None
        result = self._denied(winner, now)
        logger.info(f"Concurrent faucet request for {address} lost the race: {result.error}")
        return result

    def request_tokens(self, wallet_address: str) -> FaucetResult:
        """
        Grant FAUCET_AMOUNT tokens unless the wallet is cooling down.

        Args:
            wallet_address: 0x-prefixed address, any case (validated by the caller)

        Returns:
            FaucetResult with success=True and the new tx hash, or success=False
            with the cooldown message and the time the wallet becomes eligible.
        """
        address = canonical_address(wallet_address)
        now = _as_utc(self.clock())

        try:
            last_request = self._latest_within_cooldown(address, now)
            if last_request is not None:
                result = self._denied(last_request, now)
                logger.info(f"Faucet request for {address} denied: {result.error}")
                return result

            grant = FaucetRequest(
                wallet_address=address,
                amount=FAUCET_AMOUNT,
                tx_hash=generate_tx_hash(),
                requested_at=now,
                request_day=now.date(),
            )
            self.db.add(grant)
            self.db.flush()

            # Grants on either side of UTC midnight do not collide on request_day
            if self._competing_grant(grant, now) is not None:
                self.db.rollback()
                result = self._lost_race(address)
                if result is not None:
                    return result
                raise RuntimeError(f"Faucet grant for {address} conflicted with a grant that is no longer visible")
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            result = self._lost_race(address)
            if result is None:
                raise
            return result
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error processing faucet request for {address}: {e}")
            raise

        logger.info(f"Faucet granted {FAUCET_AMOUNT} tokens to {address} (tx {grant.tx_hash})")
        return FaucetResult(
            success=True,
            amount=FAUCET_AMOUNT,
            tx_hash=grant.tx_hash,
            cooldown_until=now + COOLDOWN,
        )

    def get_history(self, wallet_address: str) -> List[FaucetRequest]:
        """Most recent grants for a wallet, newest first."""
        address = canonical_address(wallet_address)
        try:
            return self.db.query(FaucetRequest).filter(
                FaucetRequest.wallet_address == address
            ).order_by(
                FaucetRequest.requested_at.desc(), FaucetRequest.id.desc()
            ).limit(HISTORY_LIMIT).all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching faucet history for {address}: {e}")
            raise
