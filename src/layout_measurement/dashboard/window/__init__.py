"""
Dashboard window package.
"""

from .signals import ConsoleSignals
from .main import DashboardWindow

__all__ = [
    "ConsoleSignals",
    "DashboardWindow",
]
