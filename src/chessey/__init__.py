"""Chessey - chess rules engine with SAN notation and history replay."""

__version__ = "0.1.0"
