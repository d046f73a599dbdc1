"""API routes package"""

from . import foods, health, plans

__all__ = ["foods", "health", "plans"]
