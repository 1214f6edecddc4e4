# core/sync.py
"""
Client-side mirror of one collection.

A view is created per screen mount and owns its own snapshot, sort and filter
state. Writes are pessimistic: the snapshot only changes after the server
confirms, and it is patched with the record the server returned rather than
the submitted fields. While a write is in flight `submitting` is set and
further writes are refused, which is the programmatic form of disabling the
submit button.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, ClassVar

import httpx

from clinic.core.client import ApiError, CollectionClient
from clinic.core.views import Predicate, Record, filter_records, sort_records
from clinic.utils.logger import logger

Notifier = Callable[[str, str], None]
Confirm = Callable[[str], bool]

class ViewStatus(str, Enum):
	LOADING = "loading"
	READY = "ready"
	ERROR = "error"

def log_notifier(level: str, message: str) -> None:
	"""Default notifier: toasts become log lines."""
	log = logger(tag="notify")
	if level == "error":
		log.error(message)
	elif level == "warning":
		log.warning(message)
	else:
		log.info(message)

@dataclass
class SortState:
	field: str
	descending: bool = False

	def select(self, field: str, descending: bool = False) -> None:
		"""Reselecting the current field flips direction; a new field starts at `descending`."""
		if field == self.field:
			self.descending = not self.descending
		else:
			self.field = field
			self.descending = descending

class CollectionView:
	"""
	Base class for the patient, inventory and expense views.

	Subclasses set the class attributes below and override `filters()` and
	`summary()`.
	"""
	entity: ClassVar[str]
	label: ClassVar[str]
	sort_fields: ClassVar[dict[str, str]]
	default_sort: ClassVar[tuple[str, bool]]

	def __init__(self, http: httpx.AsyncClient, notify: Notifier | None = None):
		self.client = CollectionClient(http, self.entity)
		self.notify = notify or log_notifier
		self.status = ViewStatus.LOADING
		self.records: list[Record] = []
		self.error: str | None = None
		self.submitting = False
		self.sort = SortState(*self.default_sort)

	@property
	def ready(self) -> bool:
		return self.status is ViewStatus.READY

	async def load(self) -> None:
		"""Fetches the whole collection. Failure leaves an empty snapshot and an error."""
		self.status = ViewStatus.LOADING
		try:
			records = await self.client.list()
		except ApiError as e:
			logger(tag=self.entity).error(f"Failed to fetch {self.entity}: {e.message}")
			self.records = []
			self.error = f"Failed to fetch {self.entity}. Please try again."
			self.status = ViewStatus.ERROR
			self.notify("error", f"Failed to load {self.entity}.")
			return
		self.records = [r for r in records if isinstance(r, dict) and r.get("_id")]
		self.error = None
		self.status = ViewStatus.READY

	async def create(self, fields: dict[str, Any]) -> Record | None:
		record = await self._submit("create", lambda: self.client.create(fields))
		if record is not None:
			self.records = [*self.records, record]
			self.notify("success", f"{self.label} added successfully!")
		return record

	async def update(self, record_id: str, fields: dict[str, Any]) -> Record | None:
		record = await self._submit("update", lambda: self.client.update(record_id, fields))
		if record is not None:
			self.records = [record if r["_id"] == record_id else r for r in self.records]
			self.notify("success", f"{self.label} updated successfully!")
		return record

	async def delete(self, record_id: str, confirm: Confirm) -> bool:
		"""Removes a record once `confirm` agrees. Returns whether it was deleted."""
		if not confirm(f"Are you sure you want to delete this {self.label.lower()}?"):
			return False
		message = await self._submit("delete", lambda: self.client.delete(record_id))
		if message is None:
			return False
		self.records = [r for r in self.records if r["_id"] != record_id]
		self.notify("success", f"{self.label} deleted successfully!")
		return True

	def find(self, record_id: str) -> Record | None:
		return next((r for r in self.records if r["_id"] == record_id), None)

	def sort_by(self, field: str) -> None:
		if field not in self.sort_fields:
			raise ValueError(f"Cannot sort {self.entity} by '{field}'")
		self.sort.select(field, descending=self.default_sort[1])

	def filters(self) -> list[Predicate | None]:
		return []

	def filtered(self) -> list[Record]:
		return filter_records(self.records, self.filters())

	def visible(self) -> list[Record]:
		"""The rows to display: active filters, then the selected sort."""
		return sort_records(
			self.filtered(),
			self.sort.field,
			kind=self.sort_fields[self.sort.field],
			descending=self.sort.descending
		)

	def summary(self) -> dict[str, Any]:
		return {"count": len(self.filtered())}

	async def _submit(self, action: str, call: Callable[[], Awaitable[Any]]) -> Any:
		if not self.ready:
			logger(tag=self.entity).warning(f"Ignoring {action} while {self.status.value}")
			return None
		if self.submitting:
			logger(tag=self.entity).warning(f"Ignoring {action}, another write is in flight")
			return None
		self.submitting = True
		try:
			return await call()
		except ApiError as e:
			logger(tag=self.entity).error(f"Error during {action}: {e.message}")
			self.notify("error", e.message)
			return None
		finally:
			self.submitting = False
