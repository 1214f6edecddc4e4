# core/__init__.py
"""
Dashboard side of the clinic: API client, per-collection views and the
derived-view functions they share.
"""

from .client import (ApiError, CollectionClient, RecordNotFound,
                     TransportFailure, ValidationFailed, open_client)
from .dashboard import Dashboard, DashboardMetrics
from .expenses import ExpenseView
from .inventory import InventoryView
from .patients import PatientView
from .sync import CollectionView, SortState, ViewStatus

__all__ = [
	'ApiError',
	'ValidationFailed',
	'RecordNotFound',
	'TransportFailure',
	'CollectionClient',
	'open_client',
	'CollectionView',
	'SortState',
	'ViewStatus',
	'PatientView',
	'InventoryView',
	'ExpenseView',
	'Dashboard',
	'DashboardMetrics',
]
