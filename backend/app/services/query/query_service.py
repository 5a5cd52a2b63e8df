"""
Read-only queries over protocols and strategies.

Every method is a direct projection of the store except strategy_breakdown,
which weights each linked protocol's APY by its allocation.
"""
import logging
from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from app.core.exceptions import NotFoundError
from app.models.protocol import Protocol
from app.models.strategy import Strategy, StrategyProtocol
from app.services.query.query_models import ProtocolContribution, ProtocolHistory, StrategyBreakdown

logger = logging.getLogger(__name__)

DEFAULT_TOP_PROTOCOLS = 4
DEFAULT_HOT_VAULTS = 6
DEFAULT_HISTORY_DAYS = 7


def contribution(apy: float, allocation: float) -> float:
    """Share of a strategy's yield coming from one protocol: apy weighted by allocation percent."""
    return (apy * allocation) / 100


class QueryService:
    """Protocol and strategy lookups against an injected session."""

    def __init__(self, db: Session):
        self.db = db

    def _strategies(self):
        return self.db.query(Strategy).options(
            selectinload(Strategy.protocols).selectinload(StrategyProtocol.protocol)
        )

    def list_protocols(self) -> List[Protocol]:
        try:
            return self.db.query(Protocol).filter(
                Protocol.is_active.is_(True)
            ).order_by(Protocol.name.asc()).all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching protocols: {e}")
            raise

    def get_protocol(self, name: str) -> Optional[Protocol]:
        try:
            return self.db.query(Protocol).filter(Protocol.name == name).first()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching protocol {name}: {e}")
            raise

    def top_protocols(self, limit: int = DEFAULT_TOP_PROTOCOLS) -> List[Protocol]:
        try:
            return self.db.query(Protocol).filter(
                Protocol.is_active.is_(True)
            ).order_by(Protocol.apy.desc(), Protocol.id.asc()).limit(limit).all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching top protocols: {e}")
            raise

    def protocols_by_category(self, category: Optional[str] = None) -> List[Protocol]:
        try:
            query = self.db.query(Protocol).filter(Protocol.is_active.is_(True))
            if category:
                query = query.filter(Protocol.category == category)
            return query.order_by(Protocol.apy.desc(), Protocol.id.asc()).all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching protocols by category: {e}")
            raise

    def protocol_categories(self) -> List[str]:
        try:
            rows = self.db.query(Protocol.category).filter(
                Protocol.is_active.is_(True)
            ).distinct().order_by(Protocol.category.asc()).all()
            return [row.category for row in rows]
        except SQLAlchemyError as e:
            logger.error(f"Error fetching protocol categories: {e}")
            raise

    def protocol_history(self, name: str, days: int = DEFAULT_HISTORY_DAYS) -> ProtocolHistory:
        """
        APY history for a protocol over the last `days` days.

        No APY snapshots are stored yet, so the series is always empty.
        Raises NotFoundError for unknown protocols.
        """
        if self.get_protocol(name) is None:
            raise NotFoundError("Protocol not found")
        return ProtocolHistory(name=name, days=days)

    def list_strategies(self) -> List[Strategy]:
        try:
            return self._strategies().order_by(Strategy.name.asc()).all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching strategies: {e}")
            raise

    def get_strategy(self, name: str) -> Optional[Strategy]:
        try:
            return self._strategies().filter(Strategy.name == name).first()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching strategy {name}: {e}")
            raise

    def hot_vaults(self, limit: int = DEFAULT_HOT_VAULTS) -> List[Strategy]:
        try:
            return self._strategies().filter(
                or_(Strategy.is_hot.is_(True), Strategy.is_featured.is_(True))
            ).order_by(Strategy.apy_current.desc(), Strategy.id.asc()).limit(limit).all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching hot vaults: {e}")
            raise

    def strategy_breakdown(self, name: str) -> StrategyBreakdown:
        """
        Per-protocol contribution to a strategy's yield.

        Raises NotFoundError when the strategy does not exist.
        """
        strategy = self.get_strategy(name)
        if strategy is None:
            logger.info(f"Breakdown requested for unknown strategy {name}")
            raise NotFoundError("Strategy not found")

        return StrategyBreakdown(
            name=strategy.name,
            display_name=strategy.display_name,
            current_apy=strategy.apy_current,
            protocols=[
                ProtocolContribution(
                    name=link.protocol.name,
                    display_name=link.protocol.display_name,
                    apy=link.protocol.apy,
                    allocation=link.allocation,
                    contribution=contribution(link.protocol.apy, link.allocation),
                )
                for link in strategy.protocols
            ],
        )
