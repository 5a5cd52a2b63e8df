"""
Strategy (vault) model and its protocol allocations.
"""
import enum
from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, Text, Enum, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base


class RiskLevel(str, enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGHER = "Higher"


class Strategy(Base):
    __tablename__ = "strategies"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, index=True, nullable=False)  # slug, e.g. "usdc-idrx"
    display_name = Column(String(200), nullable=False)  # e.g. "USDC/IDRX"
    description = Column(Text, nullable=True)
    apy_current = Column(Float, nullable=False, default=0.0)
    risk_level = Column(
        Enum(RiskLevel, values_callable=lambda levels: [level.value for level in levels], name="risk_level"),
        nullable=False,
    )
    lock_period = Column(Integer, nullable=False, default=0)  # days, 0 = no lock
    min_deposit = Column(Float, nullable=False, default=0.0)
    category = Column(String(100), nullable=False)
    is_featured = Column(Boolean, default=False, nullable=False)
    is_hot = Column(Boolean, default=False, nullable=False)
    tvl = Column(Float, nullable=False, default=0.0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    protocols = relationship(
        "StrategyProtocol",
        back_populates="strategy",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="StrategyProtocol.id",
    )


class StrategyProtocol(Base):
    """Percentage allocation of one strategy into one protocol."""
    __tablename__ = "strategy_protocols"

    id = Column(Integer, primary_key=True, index=True)
    strategy_id = Column(Integer, ForeignKey("strategies.id", ondelete="CASCADE"), nullable=False, index=True)
    protocol_id = Column(Integer, ForeignKey("protocols.id", ondelete="CASCADE"), nullable=False, index=True)
    allocation = Column(Float, nullable=False)  # 0-100, per strategy expected to sum to 100 (not enforced)

    strategy = relationship("Strategy", back_populates="protocols")
    protocol = relationship("Protocol", back_populates="strategies")

    __table_args__ = (
        UniqueConstraint('strategy_id', 'protocol_id', name='uq_strategy_protocols_strategy_protocol'),
    )
