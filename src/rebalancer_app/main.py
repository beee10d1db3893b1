"""
Print the saved portfolio and the operations that would rebalance it.

Reads configuration from CONFIG_PATH (default: config.yaml, optional) and an
optional cash adjustment from the first command-line argument.
"""
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from portfolio_base import InputValidationError
from rebalancer_config import AppConfig, load_config
from rebalancer_app.formatting import format_snapshot_date
from rebalancer_app.inputs import parse_number
from rebalancer_app.logger import configure_root_logger
from rebalancer_app.presenter import HoldingsPresenter, OperationsPresenter, render_cash_adjustment
from rebalancer_app.session import PortfolioSession

logger = logging.getLogger(__name__)


def build_report(session: PortfolioSession) -> List[str]:
    """Render holdings, pending cash adjustment and rebalance operations"""
    presentation = session.config.presentation
    lines = HoldingsPresenter(presentation).render(session.assets)

    adjustment = render_cash_adjustment(session.cash_adjustment, session.total_value(), presentation)
    if adjustment:
        lines.append(adjustment)

    lines.append("Rebalance operations:")
    lines.extend(OperationsPresenter(presentation).render(session.evaluate()))
    return lines


def run(config_path: Optional[Path] = None, cash_adjustment: float = 0.0) -> List[str]:
    if config_path is not None and config_path.exists():
        config = load_config(config_path)
    else:
        config = AppConfig()

    configure_root_logger(config)

    session = PortfolioSession(config=config)
    snapshot = session.pending_snapshot()
    if snapshot is None or not session.load_snapshot():
        return ["No saved portfolio found"]

    session.set_cash_adjustment(cash_adjustment)
    return [f"Portfolio saved on {format_snapshot_date(snapshot.date)}", *build_report(session)]


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    config_path = Path(os.getenv('CONFIG_PATH', 'config.yaml'))

    try:
        cash_adjustment = parse_number(argv[0], 'amount') if argv else 0.0
    except InputValidationError as e:
        print(f"Invalid cash adjustment: {argv[0]} ({e.message})", file=sys.stderr)
        return 2

    try:
        lines = run(config_path, cash_adjustment)
    except (ValueError, OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to build rebalance report: {e}")
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == '__main__':
    sys.exit(main())
