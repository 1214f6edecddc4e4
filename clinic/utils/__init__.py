# utils/__init__.py
"""Shared helpers: tagged logging and date coercion."""

from .dates import parse_when, to_iso, utc_now
from .logger import logger, setup_logging

__all__ = [
	'logger',
	'setup_logging',
	'parse_when',
	'to_iso',
	'utc_now'
]
