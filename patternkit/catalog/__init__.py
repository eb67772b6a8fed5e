"""Catalogue of runnable pattern demonstrations."""

from .catalog import DEFAULT_ENTRIES, Category, DemoCatalog, DemoEntry

__all__ = ["Category", "DemoCatalog", "DemoEntry", "DEFAULT_ENTRIES"]
