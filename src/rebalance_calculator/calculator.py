"""Rebalance calculation logic over resolved asset values"""

from typing import List, Optional, Sequence
import logging
from portfolio_base import Asset, RebalanceAction, RebalanceOperation
from .models import RebalanceResult, RebalanceStatus

DEFAULT_BALANCE_TOLERANCE = 0.01
DEFAULT_TARGET_SUM_TOLERANCE = 0.01


def total_value(assets: Sequence[Asset]) -> float:
    """Sum of price * quantity across all assets"""
    return sum(asset.price * asset.quantity for asset in assets)


def total_target_percentage(assets: Sequence[Asset]) -> float:
    return sum(asset.target_percentage for asset in assets)


def targets_complete(assets: Sequence[Asset], tolerance: float = DEFAULT_TARGET_SUM_TOLERANCE) -> bool:
    """True when target percentages sum to 100 within tolerance"""
    return abs(total_target_percentage(assets) - 100) <= tolerance


def current_percentage(asset: Asset, portfolio_value: float) -> float:
    """Share of portfolio value held in the asset, in percent"""
    if portfolio_value <= 0:
        return 0.0
    return asset.value / portfolio_value * 100


class RebalanceCalculator:
    """Calculate buy/sell operations needed for rebalancing"""

    def __init__(self, balance_tolerance: float = DEFAULT_BALANCE_TOLERANCE,
                 target_sum_tolerance: float = DEFAULT_TARGET_SUM_TOLERANCE,
                 logger: Optional[logging.Logger] = None):
        self.balance_tolerance = balance_tolerance
        self.target_sum_tolerance = target_sum_tolerance
        self.logger = logger or logging.getLogger(__name__)

    def compute_operations(self, assets: Sequence[Asset],
                           cash_adjustment: float = 0.0) -> List[RebalanceOperation]:
        """
        Calculate operations that bring the portfolio to its target allocation.
        Returns sells first, then buys. Empty when there is nothing to rebalance
        or target percentages do not sum to 100.
        """
        if not assets:
            return []

        current_total_value = total_value(assets)
        new_total_value = current_total_value + cash_adjustment

        if not self._targets_complete(assets):
            return []

        operations = self._calculate_asset_operations(assets, new_total_value)
        return self._sort_operations_by_priority(operations)

    def evaluate(self, assets: Sequence[Asset], cash_adjustment: float = 0.0) -> RebalanceResult:
        """Calculate operations and report why the result is empty when it is"""
        current_total_value = total_value(assets)
        new_total_value = current_total_value + cash_adjustment
        target_sum = total_target_percentage(assets)
        totals = dict(
            current_total_value=current_total_value,
            new_total_value=new_total_value,
            total_target_percentage=target_sum,
        )

        if not assets:
            return RebalanceResult(status=RebalanceStatus.EMPTY, **totals)

        if not self._targets_complete(assets):
            reason = f"Target percentages must sum to 100% (current sum: {target_sum:.1f}%)"
            self.logger.debug(reason)
            return RebalanceResult(status=RebalanceStatus.NOT_REBALANCEABLE, reason=reason, **totals)

        operations = self._sort_operations_by_priority(
            self._calculate_asset_operations(assets, new_total_value)
        )
        status = RebalanceStatus.OPERATIONS if operations else RebalanceStatus.BALANCED
        return RebalanceResult(status=status, operations=operations, **totals)

    def project_rebalanced_assets(self, assets: Sequence[Asset],
                                  operations: Sequence[RebalanceOperation]) -> List[Asset]:
        """Return new assets with every operation applied to its quantity"""
        quantities = {asset.id: asset.quantity for asset in assets}

        for operation in operations:
            asset = self._find_asset(assets, operation)
            if asset is None:
                self.logger.debug(f"Skipping {operation.action.value} for {operation.asset_name}: asset not found")
                continue

            if operation.action == RebalanceAction.BUY:
                quantities[asset.id] += operation.quantity
            else:
                quantities[asset.id] -= operation.quantity

        return [asset.model_copy(update={"quantity": quantities[asset.id]}) for asset in assets]

    def _targets_complete(self, assets: Sequence[Asset]) -> bool:
        target_sum = total_target_percentage(assets)
        if abs(target_sum - 100) > self.target_sum_tolerance:
            self.logger.debug(f"Target percentages sum to {target_sum:.2f}%, skipping rebalance")
            return False
        return True

    def _calculate_asset_operations(self, assets: Sequence[Asset],
                                    new_total_value: float) -> List[RebalanceOperation]:
        """Calculate per-asset operations in input order"""
        operations = []

        for asset in assets:
            current_value = asset.price * asset.quantity
            target_value = new_total_value * asset.target_percentage / 100
            difference = target_value - current_value

            if abs(difference) <= self.balance_tolerance:
                continue

            quantity_difference = difference / asset.price
            action = RebalanceAction.BUY if difference > 0 else RebalanceAction.SELL
            operations.append(RebalanceOperation(
                asset_id=asset.id,
                asset_name=asset.name,
                action=action,
                quantity=abs(quantity_difference),
                value=abs(difference),
            ))
            self.logger.debug(
                f"{asset.name}: current={current_value:,.2f} target={target_value:,.2f} "
                f"-> {action.value} {abs(quantity_difference):.4f}"
            )

        return operations

    def _sort_operations_by_priority(self, operations: List[RebalanceOperation]) -> List[RebalanceOperation]:
        """Sort operations: sells first, then buys, input order kept within each"""

        def sort_key(operation):
            return 0 if operation.action == RebalanceAction.SELL else 1

        return sorted(operations, key=sort_key)

    def _find_asset(self, assets: Sequence[Asset], operation: RebalanceOperation) -> Optional[Asset]:
        """Match by id when the operation carries one, otherwise by exact name"""
        if operation.asset_id is not None:
            for asset in assets:
                if asset.id == operation.asset_id:
                    return asset
            return None

        for asset in assets:
            if asset.name == operation.asset_name:
                return asset
        return None


_default_calculator = RebalanceCalculator()


def compute_operations(assets: Sequence[Asset], cash_adjustment: float = 0.0) -> List[RebalanceOperation]:
    return _default_calculator.compute_operations(assets, cash_adjustment)


def project_rebalanced_assets(assets: Sequence[Asset],
                              operations: Sequence[RebalanceOperation]) -> List[Asset]:
    return _default_calculator.project_rebalanced_assets(assets, operations)
