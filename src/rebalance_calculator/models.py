from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field
from portfolio_base import RebalanceAction, RebalanceOperation

class RebalanceStatus(str, Enum):
    """Why a rebalance result does or does not carry operations"""
    EMPTY = "empty"
    NOT_REBALANCEABLE = "not_rebalanceable"
    BALANCED = "balanced"
    OPERATIONS = "operations"

class RebalanceResult(BaseModel):
    """Result of rebalance evaluation with totals for display"""
    status: RebalanceStatus
    operations: List[RebalanceOperation] = Field(default_factory=list)
    reason: Optional[str] = None
    current_total_value: float = 0.0
    new_total_value: float = 0.0
    total_target_percentage: float = 0.0

    @property
    def sells(self) -> List[RebalanceOperation]:
        return [op for op in self.operations if op.action == RebalanceAction.SELL]

    @property
    def buys(self) -> List[RebalanceOperation]:
        return [op for op in self.operations if op.action == RebalanceAction.BUY]
