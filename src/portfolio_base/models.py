from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

# Core portfolio models
class Asset(BaseModel):
    """Resolved portfolio holding, the only form the calculator accepts"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str = Field(min_length=1)
    price: float = Field(gt=0)
    # Projected holdings may go negative after an oversized withdrawal
    quantity: float
    target_percentage: float = Field(alias="targetPercentage")

    @property
    def value(self) -> float:
        """Current market value of the holding"""
        return self.price * self.quantity


class AssetDraft(BaseModel):
    """Raw form input, possibly incomplete (e.g. '12.' or '3,5')"""
    name: str = ""
    price: str = ""
    quantity: str = ""
    target_percentage: str = ""


class RebalanceAction(str, Enum):
    """Direction of a rebalance operation"""
    BUY = "buy"
    SELL = "sell"


class RebalanceOperation(BaseModel):
    """Recommended buy or sell for one asset"""
    model_config = ConfigDict(frozen=True)

    asset_name: str
    action: RebalanceAction
    quantity: float
    value: float
    asset_id: Optional[str] = None


# Persistence models
class SavedPortfolio(BaseModel):
    """Single persisted snapshot of post-rebalance holdings"""
    date: int  # epoch milliseconds
    assets: List[Asset] = Field(default_factory=list)
