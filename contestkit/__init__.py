"""Dynamic programming, disjoint sets, modular arithmetic and range-query trees."""

__version__ = "0.1.0"