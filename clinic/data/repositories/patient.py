# data/repositories/patient.py
"""
Patient operations for MongoDB.

## Fields
	_id: index
	name: Full name of the patient
	contact: Phone number or email
	age: Age in whole years
	gender: Male, Female or Other
	medicalHistory: Free text notes
	appointments: Ordered list of {date, purpose} sub-documents
"""

from typing import Any

from clinic.data.repositories.base import (delete_document, find_document,
                                           insert_document, list_documents,
                                           replace_document)
from clinic.utils.logger import logger

PATIENTS_COLLECTION = "patients"

def list_patients(*, collection_name: str = PATIENTS_COLLECTION) -> list[dict[str, Any]]:
	patients = list_documents(collection_name)
	logger().info(f"Found {len(patients)} patients")
	return patients

def get_patient(
	patient_id: str,
	/, *,
	collection_name: str = PATIENTS_COLLECTION
) -> dict[str, Any]:
	logger().info(f"Searching for patient with id '{patient_id}'")
	return find_document(collection_name, patient_id)

def create_patient(
	fields: dict[str, Any],
	/, *,
	collection_name: str = PATIENTS_COLLECTION
) -> dict[str, Any]:
	"""Stores an already validated patient and returns it with its new id."""
	patient = insert_document(collection_name, fields)
	logger().info(f"Patient saved successfully: {patient['_id']}")
	return patient

def update_patient(
	patient_id: str,
	/,
	fields: dict[str, Any],
	*,
	collection_name: str = PATIENTS_COLLECTION
) -> dict[str, Any]:
	"""Replaces the patient document, appointments included."""
	patient = replace_document(collection_name, patient_id, fields)
	logger().info(f"Patient updated successfully: {patient_id}")
	return patient

def delete_patient(
	patient_id: str,
	/, *,
	collection_name: str = PATIENTS_COLLECTION
) -> None:
	delete_document(collection_name, patient_id)
	logger().info(f"Patient deleted successfully: {patient_id}")
