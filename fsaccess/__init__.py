"""Navigate a directory tree and create, list and remove its entries."""

__version__ = "0.1.0"
__all__ = ["access", "cli", "filters", "paths", "settings", "types"]