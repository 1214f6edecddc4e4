# tests/helpers.py

import mongomock

from clinic.data import connection as db_conn


def use_mock_database() -> mongomock.MongoClient:
	"""Points the data layer at a fresh in-memory MongoDB."""
	client = mongomock.MongoClient()
	db_conn.use_client(client)
	return client

def drop_mock_database() -> None:
	db_conn.use_client(None)

def patient_payload(**overrides) -> dict:
	payload = {
		"name": "Asha Rao",
		"contact": "555-0101",
		"age": 34,
		"gender": "Female",
		"medicalHistory": "Penicillin allergy",
		"appointments": [
			{"date": "2024-03-04", "purpose": "Cleaning"},
			{"date": "2024-04-10", "purpose": "Filling"},
		],
	}
	payload.update(overrides)
	return payload

def item_payload(**overrides) -> dict:
	payload = {
		"name": "Nitrile gloves",
		"quantity": 40,
		"supplier": "MedSupply",
		"purchaseDate": "2024-02-01",
		"lowStockThreshold": 5,
	}
	payload.update(overrides)
	return payload

def expense_payload(**overrides) -> dict:
	payload = {"category": "Equipment", "amount": 150, "date": "2024-03-01"}
	payload.update(overrides)
	return payload
