"""View synchronizer tests, run against the real app over an ASGI transport."""

import unittest
from datetime import datetime, timezone

import httpx

from clinic.core import (Dashboard, ExpenseView, InventoryView, PatientView,
                         ViewStatus)
from clinic.core.client import CollectionClient, TransportFailure
from clinic.main import app
from tests.helpers import (drop_mock_database, expense_payload, item_payload,
                           patient_payload, use_mock_database)


def always(answer: bool):
	return lambda prompt: answer

class NotificationLog:
	def __init__(self):
		self.entries: list[tuple[str, str]] = []

	def __call__(self, level: str, message: str) -> None:
		self.entries.append((level, message))

	@property
	def errors(self) -> list[str]:
		return [message for level, message in self.entries if level == "error"]


class TestCollectionViews(unittest.IsolatedAsyncioTestCase):

	async def asyncSetUp(self):
		use_mock_database()
		self.http = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")
		self.notes = NotificationLog()

	async def asyncTearDown(self):
		await self.http.aclose()
		drop_mock_database()

	async def loaded(self, view_class):
		view = view_class(self.http, self.notes)
		await view.load()
		return view

	async def test_load_fetches_snapshot(self):
		await CollectionClient(self.http, "expenses").create(expense_payload())
		view = ExpenseView(self.http, self.notes)
		self.assertEqual(view.status, ViewStatus.LOADING)
		await view.load()
		self.assertEqual(view.status, ViewStatus.READY)
		self.assertEqual(len(view.records), 1)
		self.assertIsNone(view.error)

	async def test_create_merges_server_record(self):
		"""The snapshot gets the stored document, with its id and defaults, not the form data."""
		view = await self.loaded(InventoryView)
		payload = item_payload()
		del payload["lowStockThreshold"]
		record = await view.create(payload)

		self.assertIsNotNone(record)
		self.assertEqual(view.records, [record])
		self.assertIn("_id", record)
		self.assertEqual(record["lowStockThreshold"], 5)
		self.assertIn(("success", "Inventory item added successfully!"), self.notes.entries)

	async def test_rejected_create_leaves_snapshot(self):
		view = await self.loaded(PatientView)
		self.assertIsNone(await view.create(patient_payload(gender="Unknown")))
		self.assertEqual(view.records, [])
		self.assertEqual(view.status, ViewStatus.READY)
		self.assertEqual(self.notes.errors, ["Invalid gender"])
		self.assertFalse(view.submitting)

	async def test_update_replaces_by_identity(self):
		view = await self.loaded(ExpenseView)
		first = await view.create(expense_payload())
		second = await view.create(expense_payload(category="Salaries", amount=900))
		updated = await view.update(first["_id"], expense_payload(amount=200))

		self.assertEqual(updated["amount"], 200)
		self.assertEqual([r["_id"] for r in view.records], [first["_id"], second["_id"]])
		self.assertEqual(view.find(first["_id"])["amount"], 200)

	async def test_delete_needs_confirmation(self):
		view = await self.loaded(ExpenseView)
		expense = await view.create(expense_payload())

		self.assertFalse(await view.delete(expense["_id"], always(False)))
		self.assertEqual(len(view.records), 1)
		self.assertEqual(len(await view.client.list()), 1)

		self.assertTrue(await view.delete(expense["_id"], always(True)))
		self.assertEqual(view.records, [])
		self.assertEqual(await view.client.list(), [])

	async def test_failed_delete_keeps_snapshot(self):
		view = await self.loaded(ExpenseView)
		expense = await view.create(expense_payload())
		await CollectionClient(self.http, "expenses").delete(expense["_id"])

		self.assertFalse(await view.delete(expense["_id"], always(True)))
		self.assertEqual(len(view.records), 1)
		self.assertEqual(self.notes.errors, ["Expense not found"])

	async def test_writes_refused_until_ready_or_while_submitting(self):
		view = PatientView(self.http, self.notes)
		self.assertIsNone(await view.create(patient_payload()))

		await view.load()
		view.submitting = True
		self.assertIsNone(await view.create(patient_payload()))
		self.assertEqual(await view.client.list(), [])

	async def test_low_stock_filter(self):
		view = await self.loaded(InventoryView)
		await view.create(item_payload(name="Gauze", quantity=3, lowStockThreshold=5))
		await view.create(item_payload(name="Masks", quantity=10, lowStockThreshold=5))

		view.only_low_stock = True
		self.assertEqual([i["quantity"] for i in view.visible()], [3])
		self.assertEqual(view.summary()["low_stock"], 1)

	async def test_visible_sort_and_filters(self):
		view = await self.loaded(PatientView)
		await view.create(patient_payload(name="Zed", age=70, gender="Male", appointments=[]))
		await view.create(patient_payload(name="amir", age=25, gender="Male", appointments=[]))
		await view.create(patient_payload(name="Bea", age=40))

		self.assertEqual([p["name"] for p in view.visible()], ["amir", "Bea", "Zed"])
		view.sort_by("name")
		self.assertEqual([p["name"] for p in view.visible()], ["Zed", "Bea", "amir"])
		view.sort_by("age")
		self.assertEqual([p["age"] for p in view.visible()], [25, 40, 70])

		view.gender = "Male"
		view.age_bracket = "51+"
		self.assertEqual([p["name"] for p in view.visible()], ["Zed"])
		self.assertEqual(view.summary()["by_gender"], {"Male": 1, "Female": 0, "Other": 0})

	async def test_expense_summary(self):
		view = await self.loaded(ExpenseView)
		await view.create(expense_payload())
		await view.create(expense_payload(category="Salaries", amount=900, date="2024-02-01"))
		view.month = "2024-03"
		summary = view.summary()
		self.assertEqual(summary["total"], 150)
		self.assertEqual(summary["by_category"]["Equipment"], 150)
		self.assertEqual(summary["by_category"]["Salaries"], 0)


class TestLoadFailures(unittest.IsolatedAsyncioTestCase):

	async def test_server_error_puts_view_in_error_state(self):
		def handler(request):
			return httpx.Response(500, json={"message": "Server error", "error": "down"})
		notes = NotificationLog()
		async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://testserver") as http:
			view = PatientView(http, notes)
			await view.load()
		self.assertEqual(view.status, ViewStatus.ERROR)
		self.assertEqual(view.records, [])
		self.assertEqual(view.error, "Failed to fetch patients. Please try again.")
		self.assertEqual(notes.errors, ["Failed to load patients."])

	async def test_unreachable_server(self):
		def handler(request):
			raise httpx.ConnectError("connection refused", request=request)
		async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://testserver") as http:
			with self.assertRaises(TransportFailure):
				await CollectionClient(http, "expenses").list()
			view = ExpenseView(http, NotificationLog())
			await view.load()
		self.assertEqual(view.status, ViewStatus.ERROR)

	async def test_dashboard_error_when_one_collection_fails(self):
		def handler(request):
			if request.url.path == "/api/inventory":
				return httpx.Response(500, json={"message": "Failed to fetch inventory items"})
			return httpx.Response(200, json=[])
		async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://testserver") as http:
			dashboard = Dashboard(http, NotificationLog())
			await dashboard.load()
		self.assertEqual(dashboard.status, ViewStatus.ERROR)
		self.assertIsNotNone(dashboard.error)
		self.assertEqual(dashboard.patients.status, ViewStatus.READY)


class TestDashboard(unittest.IsolatedAsyncioTestCase):

	async def asyncSetUp(self):
		use_mock_database()
		self.http = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")

	async def asyncTearDown(self):
		await self.http.aclose()
		drop_mock_database()

	async def test_metrics(self):
		await CollectionClient(self.http, "patients").create(patient_payload(appointments=[
			{"date": "2024-03-01T09:00:00Z", "purpose": "Cleaning"},
			{"date": "2024-03-10T15:00:00Z", "purpose": "Filling"},
			{"date": "2024-04-02T09:00:00Z", "purpose": "Review"},
		]))
		await CollectionClient(self.http, "patients").create(patient_payload(name="Ola", appointments=[]))
		inventory = CollectionClient(self.http, "inventory")
		await inventory.create(item_payload(quantity=3))
		await inventory.create(item_payload(quantity=30))
		expenses = CollectionClient(self.http, "expenses")
		await expenses.create(expense_payload())
		await expenses.create(expense_payload(amount=49.5))

		dashboard = Dashboard(self.http, NotificationLog())
		await dashboard.load()
		self.assertEqual(dashboard.status, ViewStatus.READY)

		metrics = dashboard.metrics(now=datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc))
		self.assertEqual(metrics.total_patients, 2)
		self.assertEqual(metrics.low_stock_items, 1)
		self.assertEqual(metrics.total_expenses, 199.5)
		self.assertEqual(metrics.today_appointments, 1)
		self.assertEqual(metrics.upcoming_appointments, 2)

		appointments = dashboard.appointments()
		self.assertEqual([a["purpose"] for a in appointments], ["Cleaning", "Filling", "Review"])
		self.assertEqual({a["patientName"] for a in appointments}, {"Asha Rao"})

		recent = dashboard.recent_patients()
		self.assertEqual(recent[0]["name"], "Asha Rao")
		self.assertEqual(recent[0]["lastVisit"], datetime(2024, 4, 2, 9, 0, tzinfo=timezone.utc))
		self.assertIsNone(recent[1]["lastVisit"])

	async def test_delete_by_collection(self):
		created = await CollectionClient(self.http, "inventory").create(item_payload())
		dashboard = Dashboard(self.http, NotificationLog())
		await dashboard.load()
		self.assertTrue(await dashboard.delete("inventory", created["_id"], always(True)))
		self.assertEqual(dashboard.inventory.records, [])
		with self.assertRaises(ValueError):
			await dashboard.delete("invoices", created["_id"], always(True))

	def test_appointments_default_purpose(self):
		dashboard = Dashboard(httpx.AsyncClient(base_url="http://testserver"))
		dashboard.patients.records = [
			{"_id": "p1", "name": "Ola", "appointments": [{"date": "2024-05-01T00:00:00+00:00"}]},
		]
		self.assertEqual(dashboard.appointments()[0]["purpose"], "Checkup")
		self.assertEqual(dashboard.appointments()[0]["patientId"], "p1")

if __name__ == "__main__":
	unittest.main(verbosity=2)
