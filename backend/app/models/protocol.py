"""
Protocol model (lending/AMM venues strategies allocate into).
"""
from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base


class Protocol(Base):
    __tablename__ = "protocols"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, index=True, nullable=False)  # slug, e.g. "aave"
    display_name = Column(String(200), nullable=False)  # e.g. "Aave V3"
    description = Column(Text, nullable=True)
    category = Column(String(100), nullable=False, index=True)  # "Lending", "DEX", "Yield Optimizer"
    apy = Column(Float, nullable=False, default=0.0)  # percentage
    tvl = Column(Float, nullable=False, default=0.0)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    strategies = relationship("StrategyProtocol", back_populates="protocol", cascade="all, delete", passive_deletes=True)
