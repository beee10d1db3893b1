"""Interactive portfolio rebalancer: input collection, snapshot storage and display."""

from .inputs import AssetInputCollector, filter_numeric_input, parse_cash_amount, parse_number
from .presenter import HoldingsPresenter, OperationsPresenter, render_cash_adjustment
from .session import PortfolioSession
from .store import InMemorySnapshotStore, JsonFileSnapshotStore, SnapshotStore

__version__ = "1.0.0"

__all__ = [
    "AssetInputCollector",
    "filter_numeric_input",
    "parse_cash_amount",
    "parse_number",
    "HoldingsPresenter",
    "OperationsPresenter",
    "render_cash_adjustment",
    "PortfolioSession",
    "InMemorySnapshotStore",
    "JsonFileSnapshotStore",
    "SnapshotStore",
    "__version__",
]
