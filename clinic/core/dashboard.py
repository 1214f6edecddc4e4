# core/dashboard.py

import asyncio
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import httpx

from clinic.core.expenses import ExpenseView
from clinic.core.inventory import InventoryView, is_low_stock
from clinic.core.patients import PatientView
from clinic.core.sync import CollectionView, Confirm, Notifier, ViewStatus
from clinic.core.views import Record, sort_records, total
from clinic.utils.dates import parse_when, utc_now

DEFAULT_PURPOSE = "Checkup"

@dataclass(frozen=True)
class DashboardMetrics:
	total_patients: int
	low_stock_items: int
	total_expenses: float
	today_appointments: int
	upcoming_appointments: int

def last_visit(patient: Record) -> datetime | None:
	"""Date of the patient's last listed appointment, None for never."""
	appointments = patient.get("appointments") or []
	if not appointments:
		return None
	return parse_when(appointments[-1].get("date"))

class Dashboard:
	"""Clinic overview built from one view per collection."""

	def __init__(self, http: httpx.AsyncClient, notify: Notifier | None = None):
		self.patients = PatientView(http, notify)
		self.inventory = InventoryView(http, notify)
		self.expenses = ExpenseView(http, notify)

	@property
	def views(self) -> dict[str, CollectionView]:
		return {view.entity: view for view in (self.patients, self.inventory, self.expenses)}

	@property
	def status(self) -> ViewStatus:
		statuses = [view.status for view in self.views.values()]
		if ViewStatus.ERROR in statuses:
			return ViewStatus.ERROR
		if ViewStatus.LOADING in statuses:
			return ViewStatus.LOADING
		return ViewStatus.READY

	@property
	def error(self) -> str | None:
		if self.status is not ViewStatus.ERROR:
			return None
		return "Failed to fetch data. Please check your connection or add data manually."

	async def load(self) -> None:
		await asyncio.gather(*(view.load() for view in self.views.values()))

	def appointments(self) -> list[Record]:
		"""Every appointment of every patient, tagged with who it belongs to, soonest first."""
		rows = []
		for patient in self.patients.records:
			for appointment in patient.get("appointments") or []:
				rows.append({
					**appointment,
					"purpose": appointment.get("purpose") or DEFAULT_PURPOSE,
					"patientName": patient.get("name"),
					"patientId": patient["_id"],
				})
		return sort_records(rows, "date", kind="date")

	def metrics(self, now: datetime | None = None) -> DashboardMetrics:
		now = parse_when(now) or utc_now()
		dates = [parse_when(a.get("date")) for a in self.appointments()]
		return DashboardMetrics(
			total_patients=len(self.patients.records),
			low_stock_items=sum(1 for item in self.inventory.records if is_low_stock(item)),
			total_expenses=total(self.expenses.records, "amount"),
			today_appointments=sum(1 for d in dates if d is not None and d.date() == now.date()),
			upcoming_appointments=sum(1 for d in dates if d is not None and d > now),
		)

	def recent_patients(self, limit: int = 5) -> list[dict[str, Any]]:
		"""Patients with their last visit, most recent visit first."""
		rows = [{**p, "lastVisit": last_visit(p)} for p in self.patients.records]
		return sort_records(rows, "lastVisit", kind="date", descending=True)[:limit]

	async def delete(self, entity: str, record_id: str, confirm: Confirm) -> bool:
		if entity not in self.views:
			raise ValueError(f"Unknown collection '{entity}'")
		return await self.views[entity].delete(record_id, confirm)
