"""
Query service result classes.
"""
from dataclasses import dataclass, field
from typing import List


@dataclass
class ProtocolContribution:
    """One protocol's weighted share of a strategy's yield."""
    name: str
    display_name: str
    apy: float
    allocation: float
    contribution: float


@dataclass
class StrategyBreakdown:
    name: str
    display_name: str
    current_apy: float
    protocols: List[ProtocolContribution] = field(default_factory=list)


@dataclass
class ProtocolHistory:
    """APY time series for a protocol. Empty until APY snapshots are recorded."""
    name: str
    days: int
    history: List[dict] = field(default_factory=list)
