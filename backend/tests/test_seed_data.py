"""
Tests for the demo data loader and its allocation checks.
"""

from __future__ import annotations

import pytest

from app.models.protocol import Protocol
from app.models.strategy import Strategy, StrategyProtocol
from seed_data import ALLOCATIONS, PROTOCOLS, STRATEGIES, seed_database, validate_allocations


def test_seed_creates_demo_rows(db):
    created = seed_database(db)

    assert created == {"protocols": 4, "strategies": 8, "allocations": 22}
    assert db.query(Protocol).count() == 4
    assert db.query(Strategy).count() == 8
    assert db.query(StrategyProtocol).count() == 22


def test_seed_is_idempotent(db):
    seed_database(db)
    assert seed_database(db) == {"protocols": 0, "strategies": 0, "allocations": 0}
    assert db.query(StrategyProtocol).count() == 22


def test_demo_allocations_total_100():
    assert validate_allocations(ALLOCATIONS, [p["name"] for p in PROTOCOLS]) == []
    assert set(ALLOCATIONS) == {s["name"] for s in STRATEGIES}


def test_bad_allocations_are_trusted_by_default(db, caplog):
    allocations = dict(ALLOCATIONS, **{"usdc-idrx": {"aave": 70, "moonwell": 20}})

    created = seed_database(db, allocations=allocations)

    assert created["allocations"] == 22
    assert any("usdc-idrx: allocations sum to 90" in message for message in caplog.messages)


def test_strict_mode_rejects_bad_allocations_before_writing(db):
    allocations = dict(ALLOCATIONS, **{"usdc-idrx": {"aave": 70, "moonwell": 20}})

    with pytest.raises(ValueError, match="usdc-idrx"):
        seed_database(db, allocations=allocations, strict=True)
    assert db.query(Protocol).count() == 0


def test_unknown_protocol_reported():
    problems = validate_allocations({"x": {"aave": 50, "ghost": 50}}, ["aave"])
    assert problems == ["x: unknown protocols ghost"]
