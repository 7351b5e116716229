"""Kos Manager: data layer for boarding-house properties, rooms, tenants and bills."""

__version__ = "0.1.0"
