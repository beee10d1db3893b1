class PortfolioError(Exception):
    """Base class for portfolio errors"""
    pass

class InputValidationError(PortfolioError):
    """Raised when a raw field value is rejected at the input boundary"""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message

class DuplicateAssetNameError(InputValidationError):
    """Raised when an asset name collides with another asset (case-insensitive)"""
    pass

class AssetNotFoundError(PortfolioError):
    """Raised when an asset id is not present in the portfolio"""
    pass

class SnapshotError(PortfolioError):
    """Raised when a stored snapshot cannot be decoded"""
    pass
