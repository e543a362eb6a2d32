"""Holiday rules and per-country holiday definitions with date calculations."""

__version__ = "0.1.0"