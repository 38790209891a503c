"""API routes package"""

from . import health, checks, cron, ingredients, alerts

__all__ = ["health", "checks", "cron", "ingredients", "alerts"]
