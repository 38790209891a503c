"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings, Settings
from app.exceptions import (
    ServiceValidationError,
    NotFoundError,
    UnauthorizedError,
    PersistenceReadError,
    NotificationError,
)

__all__ = [
    "settings",
    "Settings",
    "ServiceValidationError",
    "NotFoundError",
    "UnauthorizedError",
    "PersistenceReadError",
    "NotificationError",
]
