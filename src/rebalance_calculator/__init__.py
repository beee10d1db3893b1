from .calculator import (
    RebalanceCalculator,
    compute_operations,
    project_rebalanced_assets,
    total_value,
    total_target_percentage,
    targets_complete,
    current_percentage,
)
from .models import RebalanceResult, RebalanceStatus
from portfolio_base import Asset, RebalanceAction, RebalanceOperation

__version__ = "1.0.0"

__all__ = [
    "RebalanceCalculator",
    "RebalanceResult",
    "RebalanceStatus",
    "compute_operations",
    "project_rebalanced_assets",
    "total_value",
    "total_target_percentage",
    "targets_complete",
    "current_percentage",
    "Asset",
    "RebalanceAction",
    "RebalanceOperation",
    "__version__",
]
