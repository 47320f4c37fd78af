"""slninventory - Inventory of a .NET solution's project graph."""

__version__ = "0.1.0"

__all__ = ["__version__"]
