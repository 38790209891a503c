"""
Adapters package - External service connections.
Regulatory source providers and alert notification delivery.
"""

from adapters import notifier, sources

__all__ = [
    "notifier",
    "sources",
]
