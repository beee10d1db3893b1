"""
Session context management using ContextVar for context propagation to loggers.
"""

from contextvars import ContextVar
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from rebalancer_app.session import PortfolioSession

# Context variable to store the session whose operation is currently running
current_session: ContextVar[Optional['PortfolioSession']] = ContextVar('current_session', default=None)


def set_current_session(session: 'PortfolioSession') -> None:
    """Set the current session in the context."""
    current_session.set(session)


def get_current_session() -> Optional['PortfolioSession']:
    """Get the current session from the context."""
    return current_session.get()


def clear_current_session() -> None:
    """Clear the current session from the context."""
    current_session.set(None)
