"""
Portfolio session: owns the live asset list and cash adjustment and wires
the input collector, calculator and snapshot store together.
"""
import math
import time
import uuid
from contextlib import contextmanager
from typing import List, Optional

from portfolio_base import (
    Asset,
    AssetDraft,
    AssetNotFoundError,
    InputValidationError,
    RebalanceOperation,
    SavedPortfolio,
)
from rebalance_calculator import (
    RebalanceCalculator,
    RebalanceResult,
    total_target_percentage,
    total_value,
)
from rebalancer_config import AppConfig
from rebalancer_app.context import set_current_session, clear_current_session
from rebalancer_app.inputs import AssetInputCollector, parse_cash_amount
from rebalancer_app.logger import AppLogger
from rebalancer_app.store import JsonFileSnapshotStore, SnapshotStore

app_logger = AppLogger(__name__)


class PortfolioSession:
    """State container for one interactive portfolio"""

    def __init__(self, config: Optional[AppConfig] = None,
                 store: Optional[SnapshotStore] = None,
                 collector: Optional[AssetInputCollector] = None,
                 calculator: Optional[RebalanceCalculator] = None):
        self.config = config or AppConfig()
        self.store = store or JsonFileSnapshotStore(self.config.storage.snapshot_file_path)
        self.collector = collector or AssetInputCollector()
        self.calculator = calculator or RebalanceCalculator(
            balance_tolerance=self.config.engine.balance_tolerance,
            target_sum_tolerance=self.config.engine.target_sum_tolerance,
        )
        self.session_id = uuid.uuid4().hex[:8]
        self.assets: List[Asset] = []
        self.cash_adjustment = 0.0
        self.saved_state_unchanged = False
        self.save_prompt_dismissed = False

    @contextmanager
    def _logging_context(self):
        set_current_session(self)
        try:
            yield
        finally:
            clear_current_session()

    # Asset editing

    def add_asset(self, draft: AssetDraft) -> Asset:
        with self._logging_context():
            asset = self.collector.build_asset(draft, self.assets)
            self.assets = [*self.assets, asset]
            self.saved_state_unchanged = False
            app_logger.log_info(f"Added asset {asset.name}")
            return asset

    def update_asset(self, asset_id: str, field: str, raw: str) -> Asset:
        with self._logging_context():
            current = self.get_asset(asset_id)
            updated = self.collector.apply_edit(current, field, raw, self.assets)
            self.assets = [updated if asset.id == asset_id else asset for asset in self.assets]
            self.saved_state_unchanged = False
            app_logger.log_debug(f"Updated {field} of asset {updated.name}")
            return updated

    def remove_asset(self, asset_id: str) -> None:
        with self._logging_context():
            asset = self.get_asset(asset_id)
            self.assets = [other for other in self.assets if other.id != asset_id]
            self.saved_state_unchanged = False
            app_logger.log_info(f"Removed asset {asset.name}")

    def get_asset(self, asset_id: str) -> Asset:
        for asset in self.assets:
            if asset.id == asset_id:
                return asset
        raise AssetNotFoundError(f"Asset {asset_id} not found")

    # Cash adjustment

    def deposit(self, raw_amount: str) -> float:
        self.set_cash_adjustment(parse_cash_amount(raw_amount))
        return self.cash_adjustment

    def withdraw(self, raw_amount: str) -> float:
        self.set_cash_adjustment(-parse_cash_amount(raw_amount))
        return self.cash_adjustment

    def set_cash_adjustment(self, amount: float) -> None:
        amount = float(amount)
        if not math.isfinite(amount):
            raise InputValidationError('amount', "Amount must be a number")
        self.cash_adjustment = amount
        self.saved_state_unchanged = False

    def clear_cash_adjustment(self) -> None:
        self.cash_adjustment = 0.0

    # Calculations, recomputed on every call

    def operations(self) -> List[RebalanceOperation]:
        return self.calculator.compute_operations(self.assets, self.cash_adjustment)

    def evaluate(self) -> RebalanceResult:
        return self.calculator.evaluate(self.assets, self.cash_adjustment)

    def rebalanced_assets(self) -> List[Asset]:
        return self.calculator.project_rebalanced_assets(self.assets, self.operations())

    def total_value(self) -> float:
        return total_value(self.assets)

    def total_target_percentage(self) -> float:
        return total_target_percentage(self.assets)

    @property
    def can_save(self) -> bool:
        """Offer saving only for unsaved, rebalanceable portfolios"""
        targets_ok = abs(self.total_target_percentage() - 100) < self.config.engine.target_sum_tolerance
        return not self.saved_state_unchanged and not self.save_prompt_dismissed and targets_ok

    def dismiss_save_prompt(self) -> None:
        self.save_prompt_dismissed = True

    # Snapshot persistence

    def save_snapshot(self) -> SavedPortfolio:
        """Persist the post-rebalance projection, not the live holdings"""
        with self._logging_context():
            snapshot = SavedPortfolio(date=int(time.time() * 1000), assets=self.rebalanced_assets())
            self.store.save(snapshot)
            self.saved_state_unchanged = True
            return snapshot

    def pending_snapshot(self) -> Optional[SavedPortfolio]:
        """Snapshot available for loading, if any"""
        with self._logging_context():
            return self.store.load()

    def load_snapshot(self) -> bool:
        with self._logging_context():
            snapshot = self.store.load()
            if snapshot is None:
                app_logger.log_warning("No saved portfolio available")
                return False

            # Saved holdings already include the adjustment they were rebalanced with
            self.assets = list(snapshot.assets)
            self.cash_adjustment = 0.0
            self.saved_state_unchanged = True
            app_logger.log_info(f"Portfolio loaded ({len(self.assets)} assets)")
            return True
