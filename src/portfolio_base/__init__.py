from .models import (
    # Core portfolio models
    Asset,
    AssetDraft,
    RebalanceAction,
    RebalanceOperation,
    # Persistence models
    SavedPortfolio,
)
from .exceptions import (
    PortfolioError,
    InputValidationError,
    DuplicateAssetNameError,
    AssetNotFoundError,
    SnapshotError,
)

__version__ = "1.0.0"

__all__ = [
    "Asset",
    "AssetDraft",
    "RebalanceAction",
    "RebalanceOperation",
    "SavedPortfolio",
    "PortfolioError",
    "InputValidationError",
    "DuplicateAssetNameError",
    "AssetNotFoundError",
    "SnapshotError",
    "__version__",
]
