"""Football championship standings and match queries from CSV data, with an interactive menu."""

__version__ = "0.1.0"