"""MOU Tracker - partnership and training administration API."""

__version__ = "0.1.0"
