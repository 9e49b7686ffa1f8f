"""Logging setup for the spewer command line."""

from .setup import setup_logging

__all__ = ["setup_logging"]
