"""
Seed demo protocols, IDRX-pair strategies and their allocations.

Idempotent: rows that already exist (by name, or by strategy/protocol pair) are left untouched.
"""
import sys
import logging
from pathlib import Path
from typing import Dict, List

sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.orm import Session
from app.core.database import Base, SessionLocal, engine
from app.models.protocol import Protocol
from app.models.strategy import RiskLevel, Strategy, StrategyProtocol

logger = logging.getLogger(__name__)

PROTOCOLS = [
    {
        "name": "aave",
        "display_name": "Aave V3",
        "description": "Leading decentralized lending protocol",
        "category": "Lending",
        "apy": 5.8,
        "tvl": 5000000,
        "is_active": True,
    },
    {
        "name": "moonwell",
        "display_name": "Moonwell",
        "description": "Open lending and borrowing protocol",
        "category": "Lending",
        "apy": 6.5,
        "tvl": 8000000,
        "is_active": True,
    },
    {
        "name": "aerodrome",
        "display_name": "Aerodrome",
        "description": "Next-generation AMM on Base",
        "category": "DEX",
        "apy": 8.5,
        "tvl": 12000000,
        "is_active": True,
    },
    {
        "name": "seamless",
        "display_name": "Seamless Protocol",
        "description": "Integrated DeFi protocol for Base",
        "category": "Yield Optimizer",
        "apy": 6.0,
        "tvl": 7500000,
        "is_active": True,
    },
]

STRATEGIES = [
    {
        "name": "kaito-idrx",
        "display_name": "KAITO/IDRX",
        "description": "High-growth AI token paired with IDRX",
        "apy_current": 15.2,
        "risk_level": RiskLevel.HIGHER,
        "lock_period": 30,
        "min_deposit": 500,
        "category": "Growth",
        "is_featured": False,
        "is_hot": True,
        "tvl": 2500000,
    },
    {
        "name": "morph-idrx",
        "display_name": "MORPH/IDRX",
        "description": "Layer 2 infrastructure token paired with IDRX",
        "apy_current": 11.5,
        "risk_level": RiskLevel.MEDIUM,
        "lock_period": 7,
        "min_deposit": 200,
        "category": "Balanced",
        "is_featured": False,
        "is_hot": True,
        "tvl": 1800000,
    },
    {
        "name": "eth-idrx",
        "display_name": "ETH/IDRX",
        "description": "Ethereum paired with IDRX for stable returns",
        "apy_current": 8.3,
        "risk_level": RiskLevel.LOW,
        "lock_period": 0,
        "min_deposit": 100,
        "category": "Conservative",
        "is_featured": True,
        "is_hot": False,
        "tvl": 5000000,
    },
    {
        "name": "usdc-idrx",
        "display_name": "USDC/IDRX",
        "description": "Stablecoin paired with IDRX for maximum stability",
        "apy_current": 6.8,
        "risk_level": RiskLevel.LOW,
        "lock_period": 0,
        "min_deposit": 50,
        "category": "Stable",
        "is_featured": True,
        "is_hot": False,
        "tvl": 8500000,
    },
    {
        "name": "base-idrx",
        "display_name": "BASE/IDRX",
        "description": "Base ecosystem token paired with IDRX",
        "apy_current": 18.5,
        "risk_level": RiskLevel.HIGHER,
        "lock_period": 30,
        "min_deposit": 500,
        "category": "Aggressive",
        "is_featured": True,
        "is_hot": True,
        "tvl": 3200000,
    },
    {
        "name": "link-idrx",
        "display_name": "LINK/IDRX",
        "description": "Chainlink oracle token paired with IDRX",
        "apy_current": 12.1,
        "risk_level": RiskLevel.MEDIUM,
        "lock_period": 7,
        "min_deposit": 200,
        "category": "Balanced",
        "is_featured": False,
        "is_hot": False,
        "tvl": 2100000,
    },
    {
        "name": "arb-idrx",
        "display_name": "ARB/IDRX",
        "description": "Arbitrum token paired with IDRX",
        "apy_current": 16.7,
        "risk_level": RiskLevel.HIGHER,
        "lock_period": 30,
        "min_deposit": 500,
        "category": "Growth",
        "is_featured": False,
        "is_hot": False,
        "tvl": 2800000,
    },
    {
        "name": "op-idrx",
        "display_name": "OP/IDRX",
        "description": "Optimism token paired with IDRX",
        "apy_current": 10.9,
        "risk_level": RiskLevel.MEDIUM,
        "lock_period": 7,
        "min_deposit": 200,
        "category": "Balanced",
        "is_featured": False,
        "is_hot": False,
        "tvl": 1900000,
    },
]

# strategy name -> {protocol name: allocation percent}
ALLOCATIONS: Dict[str, Dict[str, float]] = {
    "kaito-idrx": {"aerodrome": 50, "moonwell": 30, "seamless": 20},
    "morph-idrx": {"moonwell": 40, "aerodrome": 35, "aave": 25},
    "eth-idrx": {"aave": 60, "moonwell": 40},
    "usdc-idrx": {"aave": 70, "moonwell": 30},
    "base-idrx": {"aerodrome": 55, "seamless": 25, "moonwell": 20},
    "link-idrx": {"moonwell": 45, "aave": 35, "aerodrome": 20},
    "arb-idrx": {"aerodrome": 50, "seamless": 30, "moonwell": 20},
    "op-idrx": {"moonwell": 40, "aave": 35, "aerodrome": 25},
}


def validate_allocations(
    allocations: Dict[str, Dict[str, float]],
    protocol_names: List[str],
    strict: bool = False,
) -> List[str]:
    """
    Check every strategy's allocations total 100 and reference known protocols.

    Problems are logged as warnings and returned. With strict=True the first
    problem raises ValueError instead.
    """
    known = set(protocol_names)
    problems = []
    for strategy_name, links in allocations.items():
        unknown = sorted(set(links) - known)
        if unknown:
            problems.append(f"{strategy_name}: unknown protocols {', '.join(unknown)}")
        total = sum(links.values())
        if abs(total - 100) > 1e-9:
            problems.append(f"{strategy_name}: allocations sum to {total}, expected 100")

    for problem in problems:
        if strict:
            raise ValueError(f"Malformed strategy allocation - {problem}")
        logger.warning(f"Allocation check: {problem}")
    return problems


def seed_database(
    db: Session,
    protocols: List[dict] = PROTOCOLS,
    strategies: List[dict] = STRATEGIES,
    allocations: Dict[str, Dict[str, float]] = ALLOCATIONS,
    strict: bool = False,
) -> Dict[str, int]:
    """
    Insert missing protocols, strategies and allocations.

    Returns counts of rows created per table.
    """
    validate_allocations(allocations, [p["name"] for p in protocols], strict=strict)

    created = {"protocols": 0, "strategies": 0, "allocations": 0}
    protocols_by_name = {}
    for protocol_data in protocols:
        protocol = db.query(Protocol).filter(Protocol.name == protocol_data["name"]).first()
        if protocol is None:
            protocol = Protocol(**protocol_data)
            db.add(protocol)
            created["protocols"] += 1
        protocols_by_name[protocol.name] = protocol

    strategies_by_name = {}
    for strategy_data in strategies:
        strategy = db.query(Strategy).filter(Strategy.name == strategy_data["name"]).first()
        if strategy is None:
            strategy = Strategy(**strategy_data)
            db.add(strategy)
            created["strategies"] += 1
        strategies_by_name[strategy.name] = strategy

    db.flush()

    for strategy_name, links in allocations.items():
        strategy = strategies_by_name.get(strategy_name)
        if strategy is None:
            logger.warning(f"Skipping allocations for unknown strategy {strategy_name}")
            continue
        for protocol_name, allocation in links.items():
            protocol = protocols_by_name.get(protocol_name)
            if protocol is None:
                continue
            existing = db.query(StrategyProtocol).filter(
                StrategyProtocol.strategy_id == strategy.id,
                StrategyProtocol.protocol_id == protocol.id,
            ).first()
            if existing:
                continue
            db.add(StrategyProtocol(strategy=strategy, protocol=protocol, allocation=allocation))
            created["allocations"] += 1

    db.commit()
    return created


def seed_data(strict: bool = False, create_tables: bool = False):
    """Seed the configured database."""
    if create_tables:
        Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        created = seed_database(db, strict=strict)
        print("✅ Database seeded successfully!")
        print(f"   - {created['protocols']} protocols added")
        print(f"   - {created['strategies']} strategies added")
        print(f"   - {created['allocations']} allocations added")
    except Exception as e:
        db.rollback()
        print(f"❌ Error seeding database: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description='Seed demo protocols and strategies')
    parser.add_argument('--strict', action='store_true', help='Reject strategies whose allocations do not total 100')
    parser.add_argument('--create-tables', action='store_true', help='Create tables first (local SQLite without Alembic)')
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    seed_data(strict=args.strict, create_tables=args.create_tables)
