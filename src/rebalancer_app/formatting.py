"""Number and date formatting for display"""

import math
import re
from datetime import datetime
from typing import Union


def format_number(value: Union[float, int, str], separator: str = ' ', decimal_separator: str = '.') -> str:
    """Format with grouped thousands and two decimals; the fraction is dropped when zero"""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return '0'

    if not math.isfinite(number):
        return '0'

    # Values that round to zero print without a minus sign
    if round(number, 2) == 0:
        number = 0.0

    integer_part, decimal_part = f"{number:.2f}".split('.')
    formatted_integer = re.sub(r'\B(?=(\d{3})+(?!\d))', separator, integer_part)

    if int(decimal_part) != 0:
        return f"{formatted_integer}{decimal_separator}{decimal_part}"
    return formatted_integer


def format_snapshot_date(timestamp_ms: int) -> str:
    """Render an epoch-milliseconds timestamp as DD.MM.YYYY in local time"""
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime('%d.%m.%Y')
