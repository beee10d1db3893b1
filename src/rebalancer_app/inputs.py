"""
Input collection: turns raw form drafts into validated Asset values.

Everything numeric arrives here as text and leaves as float. The calculator
never sees a draft; all range checks happen at this boundary.
"""
import math
import re
import uuid
from typing import Callable, Optional, Sequence

from portfolio_base import (
    Asset,
    AssetDraft,
    DuplicateAssetNameError,
    InputValidationError,
)
from rebalancer_app.logger import AppLogger

app_logger = AppLogger(__name__)

EDITABLE_FIELDS = ('name', 'price', 'quantity', 'target_percentage')

_FIELD_LABELS = {
    'price': 'Price',
    'quantity': 'Quantity',
    'target_percentage': 'Target percentage',
    'amount': 'Amount',
}


def filter_numeric_input(value: str) -> str:
    """
    Mask keystrokes for a numeric field.

    Keeps digits and separators, turns commas into dots, folds extra dots into
    the fractional part and strips leading zeros from the integer part.
    """
    filtered = re.sub(r'[^0-9.,]', '', value).replace(',', '.')

    parts = filtered.split('.')
    if len(parts) > 2:
        filtered = parts[0] + '.' + ''.join(parts[1:])

    if filtered:
        integer_part, separator, decimal_part = filtered.partition('.')
        cleaned_integer = integer_part.lstrip('0') or '0'
        filtered = f"{cleaned_integer}.{decimal_part}" if separator else cleaned_integer

    return filtered


def parse_number(raw: str, field: str) -> float:
    """Parse a comma-tolerant decimal string, rejecting blanks and non-finite values"""
    label = _FIELD_LABELS.get(field, field)
    text = (raw or '').strip().replace(',', '.')

    if not text:
        raise InputValidationError(field, f"{label} is required")

    try:
        number = float(text)
    except ValueError:
        raise InputValidationError(field, f"{label} must be a number") from None

    if not math.isfinite(number):
        raise InputValidationError(field, f"{label} must be a number")

    return number


def parse_cash_amount(raw: str) -> float:
    """Parse a deposit or withdrawal amount; the sign comes from the caller's choice"""
    amount = parse_number(raw, 'amount')
    if amount <= 0:
        raise InputValidationError('amount', "Amount must be greater than 0")
    return amount


class AssetInputCollector:
    """Validate drafts and single-field edits against the rest of the portfolio"""

    def __init__(self, id_factory: Optional[Callable[[], str]] = None):
        self.id_factory = id_factory or (lambda: uuid.uuid4().hex)

    def build_asset(self, draft: AssetDraft, existing: Sequence[Asset] = ()) -> Asset:
        """Resolve a complete draft into a new Asset with a fresh id"""
        name = self._validate_name(draft.name, existing)
        price = self._validate_price(draft.price)
        quantity = self._validate_quantity(draft.quantity)
        target_percentage = self._validate_target_percentage(draft.target_percentage)

        asset = Asset(
            id=self.id_factory(),
            name=name,
            price=price,
            quantity=quantity,
            target_percentage=target_percentage,
        )
        app_logger.log_debug(f"Accepted asset {asset.name} ({asset.quantity} @ {asset.price})")
        return asset

    def apply_edit(self, asset: Asset, field: str, raw: str,
                   existing: Sequence[Asset] = ()) -> Asset:
        """Return a copy of the asset with one field replaced by a validated value"""
        if field == 'name':
            others = [other for other in existing if other.id != asset.id]
            value = self._validate_name(raw, others)
        elif field == 'price':
            value = self._validate_price(raw)
        elif field == 'quantity':
            value = self._validate_quantity(raw)
        elif field == 'target_percentage':
            value = self._validate_target_percentage(raw)
        else:
            raise InputValidationError(field, f"Field '{field}' cannot be edited")

        return asset.model_copy(update={field: value})

    def _validate_name(self, raw: str, existing: Sequence[Asset]) -> str:
        name = (raw or '').strip()
        if not name:
            raise InputValidationError('name', "Asset name is required")

        lowered = name.lower()
        if any(asset.name.lower() == lowered for asset in existing):
            raise DuplicateAssetNameError('name', f"An asset named '{name}' already exists")

        return name

    def _validate_price(self, raw: str) -> float:
        price = parse_number(raw, 'price')
        if price <= 0:
            raise InputValidationError('price', "Price must be greater than 0")
        return price

    def _validate_quantity(self, raw: str) -> float:
        quantity = parse_number(raw, 'quantity')
        if quantity < 0:
            raise InputValidationError('quantity', "Quantity must be non-negative")
        return quantity

    def _validate_target_percentage(self, raw: str) -> float:
        target = parse_number(raw, 'target_percentage')
        if target < 0 or target > 100:
            raise InputValidationError('target_percentage', "Target percentage must be between 0 and 100")
        return target
