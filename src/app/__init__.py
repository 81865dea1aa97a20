"""
Application Layer: Menu-driven interface.
"""
from .menu import AccountMenu

__all__ = [
    "AccountMenu",
]
