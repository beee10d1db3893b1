"""Shared fixtures for rebalancer tests."""

import itertools
import logging

import pytest

from portfolio_base import Asset
from rebalance_calculator import RebalanceCalculator
from rebalancer_app.logger import StructuredFormatter
from rebalancer_app.store import InMemorySnapshotStore
from rebalancer_config import reset_config


@pytest.fixture
def make_asset():
    """Factory for resolved assets with sequential ids."""
    counter = itertools.count(1)

    def _make(name, price, quantity, target, asset_id=None):
        return Asset(
            id=asset_id or f"asset-{next(counter)}",
            name=name,
            price=price,
            quantity=quantity,
            target_percentage=target,
        )

    return _make


@pytest.fixture
def balanced_pair(make_asset):
    """A(100 x 5, 50%) and B(50 x 10, 50%): 500 / 500 of a 1000 portfolio."""
    return [
        make_asset("A", 100, 5, 50),
        make_asset("B", 50, 10, 50),
    ]


@pytest.fixture
def calculator():
    return RebalanceCalculator()


@pytest.fixture
def memory_store():
    return InMemorySnapshotStore()


@pytest.fixture(autouse=True)
def _reset_loaded_config():
    yield
    reset_config()


@pytest.fixture
def restore_root_logger():
    """Drop handlers installed by configure_root_logger after the test."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler.formatter, StructuredFormatter):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
