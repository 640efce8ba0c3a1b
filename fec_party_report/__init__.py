"""FEC bulk data party finance report."""

__version__ = "0.1.0"
