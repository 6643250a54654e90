"""Console menus, food and drink items, and bill helpers for restaurant ordering."""

__version__ = "0.1.0"