"""
Plain-text rendering of holdings, cash adjustment and rebalance operations.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence

from portfolio_base import Asset, RebalanceAction
from rebalance_calculator import (
    RebalanceResult,
    RebalanceStatus,
    current_percentage,
    total_target_percentage,
    total_value,
)
from rebalancer_config import PresentationConfig
from rebalancer_app.formatting import format_number


@dataclass
class HoldingRow:
    name: str
    price: float
    quantity: float
    value: float
    current_percentage: float
    target_percentage: float
    deviation: float  # 0.0 when within the display threshold


class HoldingsPresenter:
    """Build and render the holdings table"""

    def __init__(self, config: Optional[PresentationConfig] = None):
        self.config = config or PresentationConfig()

    def rows(self, assets: Sequence[Asset]) -> List[HoldingRow]:
        portfolio_value = total_value(assets)
        rows = []

        for asset in assets:
            percentage = current_percentage(asset, portfolio_value)
            deviation = percentage - asset.target_percentage
            if abs(deviation) <= self.config.deviation_display_threshold_percent:
                deviation = 0.0

            rows.append(HoldingRow(
                name=asset.name,
                price=asset.price,
                quantity=asset.quantity,
                value=asset.value,
                current_percentage=percentage,
                target_percentage=asset.target_percentage,
                deviation=deviation,
            ))

        return rows

    def render(self, assets: Sequence[Asset]) -> List[str]:
        lines = []
        for row in self.rows(assets):
            line = (
                f"{row.name}: {self._number(row.quantity)} x {self._number(row.price)} = {self._number(row.value)} "
                f"| current {row.current_percentage:.1f}% | target {row.target_percentage:.1f}%"
            )
            if row.deviation:
                line += f" ({row.deviation:+.1f}%)"
            lines.append(line)

        lines.append(f"Total portfolio value: {self._number(total_value(assets))}")
        lines.append(f"Sum of target percentages: {total_target_percentage(assets):.1f}%")
        return lines

    def _number(self, value: float) -> str:
        return format_number(value, self.config.thousands_separator, self.config.decimal_separator)


class OperationsPresenter:
    """Render a rebalance result ready for display without further sorting"""

    def __init__(self, config: Optional[PresentationConfig] = None):
        self.config = config or PresentationConfig()

    def render(self, result: RebalanceResult) -> List[str]:
        if result.status == RebalanceStatus.EMPTY:
            return []

        if result.status == RebalanceStatus.NOT_REBALANCEABLE:
            return [
                "Warning: target percentages must sum to 100%",
                f"Current sum: {result.total_target_percentage:.1f}%",
            ]

        if result.status == RebalanceStatus.BALANCED:
            return ["Portfolio is already balanced according to target allocation"]

        lines = []
        for operation in result.operations:
            verb = "Buy" if operation.action == RebalanceAction.BUY else "Sell"
            lines.append(
                f"{verb} {operation.asset_name}: {self._number(operation.quantity)} units "
                f"for {self._number(operation.value)}"
            )
        return lines

    def _number(self, value: float) -> str:
        return format_number(value, self.config.thousands_separator, self.config.decimal_separator)


def render_cash_adjustment(cash_adjustment: float, portfolio_value: float,
                           config: Optional[PresentationConfig] = None) -> Optional[str]:
    """Describe a pending deposit or withdrawal and the resulting portfolio total"""
    if cash_adjustment == 0:
        return None

    config = config or PresentationConfig()
    action = "deposit" if cash_adjustment > 0 else "withdraw"
    amount = format_number(abs(cash_adjustment), config.thousands_separator, config.decimal_separator)
    new_total = format_number(round(cash_adjustment + portfolio_value), config.thousands_separator,
                              config.decimal_separator)
    return f"Amount to {action}: {amount} (new total: {new_total})"
