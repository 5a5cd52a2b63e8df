"""
Tests for QueryService: ordering, filtering and strategy breakdown arithmetic.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from app.core.exceptions import NotFoundError
from app.models.protocol import Protocol
from app.services.query import QueryService, contribution


@pytest.fixture
def service(seeded_db):
    return QueryService(seeded_db)


@pytest.fixture
def inactive_protocol(seeded_db):
    protocol = Protocol(
        name="compound",
        display_name="Compound",
        description="Retired lending market",
        category="Legacy",
        apy=42.0,
        tvl=100,
        is_active=False,
    )
    seeded_db.add(protocol)
    seeded_db.commit()
    return protocol


def test_list_protocols_sorted_by_name_and_active_only(service, inactive_protocol):
    names = [p.name for p in service.list_protocols()]
    assert names == ["aave", "aerodrome", "moonwell", "seamless"]


def test_get_protocol_exact_match(service):
    protocol = service.get_protocol("aerodrome")
    assert protocol.display_name == "Aerodrome"
    assert service.get_protocol("Aerodrome") is None
    assert service.get_protocol("nonexistent") is None


def test_top_protocols_default_limit_and_order(service, inactive_protocol):
    top = service.top_protocols()
    assert [p.name for p in top] == ["aerodrome", "moonwell", "seamless", "aave"]
    assert all(p.is_active for p in top)


def test_top_protocols_respects_limit(service, inactive_protocol):
    top = service.top_protocols(limit=2)
    assert [p.name for p in top] == ["aerodrome", "moonwell"]
    apys = [p.apy for p in top]
    assert apys == sorted(apys, reverse=True)


def test_protocols_by_category(service, inactive_protocol):
    lending = service.protocols_by_category("Lending")
    assert [p.name for p in lending] == ["moonwell", "aave"]

    assert service.protocols_by_category("Legacy") == []

    everything = service.protocols_by_category()
    assert [p.name for p in everything] == ["aerodrome", "moonwell", "seamless", "aave"]


def test_protocol_categories_distinct(service, inactive_protocol):
    assert service.protocol_categories() == ["DEX", "Lending", "Yield Optimizer"]


def test_list_strategies_includes_allocations(service):
    strategies = service.list_strategies()
    assert [s.name for s in strategies] == sorted(s.name for s in strategies)
    assert len(strategies) == 8

    usdc = next(s for s in strategies if s.name == "usdc-idrx")
    links = {link.protocol.name: link.allocation for link in usdc.protocols}
    assert links == {"aave": 70, "moonwell": 30}


def test_get_strategy(service):
    strategy = service.get_strategy("kaito-idrx")
    assert strategy.display_name == "KAITO/IDRX"
    assert len(strategy.protocols) == 3
    assert service.get_strategy("missing") is None


def test_hot_vaults_hot_or_featured_by_apy(service):
    vaults = service.hot_vaults()
    assert [v.name for v in vaults] == ["base-idrx", "kaito-idrx", "morph-idrx", "eth-idrx", "usdc-idrx"]
    assert all(v.is_hot or v.is_featured for v in vaults)


def test_hot_vaults_limit(service):
    assert [v.name for v in service.hot_vaults(limit=2)] == ["base-idrx", "kaito-idrx"]


def test_strategy_breakdown_usdc_idrx(service):
    breakdown = service.strategy_breakdown("usdc-idrx")
    aave = service.get_protocol("aave")
    moonwell = service.get_protocol("moonwell")

    assert breakdown.name == "usdc-idrx"
    assert breakdown.display_name == "USDC/IDRX"
    assert breakdown.current_apy == 6.8

    by_name = {p.name: p for p in breakdown.protocols}
    assert set(by_name) == {"aave", "moonwell"}
    assert by_name["aave"].contribution == (aave.apy * 70) / 100
    assert by_name["moonwell"].contribution == (moonwell.apy * 30) / 100
    assert by_name["aave"].display_name == "Aave V3"

    total = sum(p.contribution for p in breakdown.protocols)
    assert total == pytest.approx(0.7 * aave.apy + 0.3 * moonwell.apy)


def test_strategy_breakdown_matches_linked_protocols(service):
    for strategy in service.list_strategies():
        breakdown = service.strategy_breakdown(strategy.name)
        assert {p.name for p in breakdown.protocols} == {link.protocol.name for link in strategy.protocols}
        for item in breakdown.protocols:
            assert item.contribution == item.apy * item.allocation / 100


def test_strategy_breakdown_unknown_strategy(service):
    with pytest.raises(NotFoundError) as excinfo:
        service.strategy_breakdown("missing")
    assert excinfo.value.message == "Strategy not found"


def test_contribution_is_unrounded():
    assert contribution(6.5, 33) == (6.5 * 33) / 100


def test_protocol_history_is_empty_series(service):
    history = service.protocol_history("aave", days=14)
    assert history.name == "aave"
    assert history.days == 14
    assert history.history == []

    with pytest.raises(NotFoundError):
        service.protocol_history("missing")


def test_store_failure_is_not_masked_as_not_found():
    db = MagicMock()
    db.query.side_effect = OperationalError("SELECT 1", {}, Exception("database is locked"))
    service = QueryService(db)

    with pytest.raises(OperationalError):
        service.get_protocol("aave")
    with pytest.raises(OperationalError):
        service.strategy_breakdown("usdc-idrx")
