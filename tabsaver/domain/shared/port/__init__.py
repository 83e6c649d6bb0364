"""Marker base for domain ports implemented by infrastructure adapters."""

from typing import Protocol


class Port(Protocol):
    """Base protocol for ports. Adapters live under ``tabsaver.infrastructure``."""
