"""Clinic Desk: clinic records API and dashboard views."""

__version__ = "1.0.0"
