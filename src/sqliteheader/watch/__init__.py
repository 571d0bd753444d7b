"""Polling driver for live database headers."""

from .HeaderWatcher import HeaderWatcher

__all__ = ["HeaderWatcher"]
