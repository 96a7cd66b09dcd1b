"""A small top-down arcade shooter built on pygame: game rules, sprite data and screens."""

__version__ = "0.1.0"