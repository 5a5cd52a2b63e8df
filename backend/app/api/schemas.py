"""
Response models shared by the protocol and strategy endpoints.

Fields are snake_case in Python and camelCase on the wire.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from app.models.strategy import RiskLevel


class CamelModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class ProtocolResponse(CamelModel):
    id: int
    name: str
    display_name: str
    description: Optional[str]
    category: str
    apy: float
    tvl: float
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class StrategyProtocolResponse(CamelModel):
    """Allocation link; the protocol's own APY is on the nested protocol."""
    id: int
    strategy_id: int
    protocol_id: int
    allocation: float
    protocol: ProtocolResponse


class StrategyResponse(CamelModel):
    id: int
    name: str
    display_name: str
    description: Optional[str]
    apy_current: float
    risk_level: RiskLevel
    lock_period: int
    min_deposit: float
    category: str
    is_featured: bool
    is_hot: bool
    tvl: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    protocols: List[StrategyProtocolResponse] = []


class ProtocolContributionResponse(CamelModel):
    name: str
    display_name: str
    apy: float
    allocation: float
    contribution: float


class StrategyBreakdownResponse(CamelModel):
    name: str
    display_name: str
    current_apy: float = Field(alias="currentAPY")
    protocols: List[ProtocolContributionResponse]


class ProtocolHistoryResponse(CamelModel):
    name: str
    days: int
    history: List[dict]
