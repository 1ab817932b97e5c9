"""PatentVault - access control and audit core for patent portfolio management."""

__version__ = "1.2.0"
