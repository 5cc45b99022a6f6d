"""Content type identifiers and codec mapping for Composable Information Machines."""

__version__ = "0.3.0"
__all__ = ["types"]