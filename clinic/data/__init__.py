# data/__init__.py
"""
Data layer for MongoDB operations.
One repository module per collection, sharing the helpers in `repositories.base`.
"""

from .connection import close_connection, get_collection, get_database, use_client
from .repositories.base import ActionFailed, EntryNotFound, InvalidIdentity

__all__ = [
	'get_database',
	'get_collection',
	'close_connection',
	'use_client',
	'ActionFailed',
	'EntryNotFound',
	'InvalidIdentity',
]
