"""Database driver registry and data source resolution."""

__version__ = "0.1.0"
