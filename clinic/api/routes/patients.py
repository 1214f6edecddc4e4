# api/routes/patients.py

from typing import Any

from fastapi import APIRouter, Body

from clinic.api.errors import api_error
from clinic.data.repositories.base import (ActionFailed, EntryNotFound,
                                           InvalidIdentity)
from clinic.data.repositories.patient import (create_patient, delete_patient,
                                              get_patient, list_patients,
                                              update_patient)
from clinic.models.patient import PatientFields
from clinic.models.validation import Err, validate_record
from clinic.utils.logger import logger

router = APIRouter(prefix="/api/patients", tags=["Patients"])

@router.get("")
async def list_patients_route():
	try:
		logger(tag="list").info("GET /api/patients")
		return list_patients()
	except ActionFailed as e:
		logger().error(f"Error fetching patients: {e}")
		raise api_error(500, "Server error", str(e))

@router.post("", status_code=201)
async def create_patient_route(payload: Any = Body(...)):
	logger(tag="create").info(f"POST /api/patients name={payload.get('name') if isinstance(payload, dict) else None}")
	result = validate_record(PatientFields, payload)
	if isinstance(result, Err):
		logger(tag="create").info(f"Validation failed: {result.reason}")
		raise api_error(400, result.reason, result.detail)
	try:
		patient = create_patient(result.record)
		return {"message": "Patient added successfully", "record": patient}
	except ActionFailed as e:
		logger().error(f"Error adding patient: {e}")
		raise api_error(500, "Server error", str(e))

@router.get("/{patient_id}")
async def get_patient_route(patient_id: str):
	try:
		logger(tag="read").info(f"GET /api/patients/{patient_id}")
		return get_patient(patient_id)
	except InvalidIdentity:
		raise api_error(400, "Invalid patient ID")
	except EntryNotFound:
		raise api_error(404, "Patient not found")
	except ActionFailed as e:
		logger().error(f"Error fetching patient: {e}")
		raise api_error(500, "Server error", str(e))

@router.put("/{patient_id}")
async def update_patient_route(patient_id: str, payload: Any = Body(...)):
	logger(tag="update").info(f"PUT /api/patients/{patient_id}")
	result = validate_record(PatientFields, payload)
	if isinstance(result, Err):
		logger(tag="update").info(f"Validation failed: {result.reason}")
		raise api_error(400, result.reason, result.detail)
	try:
		patient = update_patient(patient_id, result.record)
		return {"message": "Patient updated successfully", "record": patient}
	except InvalidIdentity:
		logger(tag="update").info(f"Invalid patient ID: {patient_id}")
		raise api_error(400, "Invalid patient ID")
	except EntryNotFound:
		logger(tag="update").info(f"Patient {patient_id} not found")
		raise api_error(404, "Patient not found")
	except ActionFailed as e:
		logger().error(f"Error updating patient: {e}")
		raise api_error(500, "Server error", str(e))

@router.delete("/{patient_id}")
async def delete_patient_route(patient_id: str):
	try:
		logger(tag="delete").info(f"DELETE /api/patients/{patient_id}")
		delete_patient(patient_id)
		return {"message": "Patient deleted successfully"}
	except InvalidIdentity:
		raise api_error(400, "Invalid patient ID")
	except EntryNotFound:
		raise api_error(404, "Patient not found")
	except ActionFailed as e:
		logger().error(f"Error deleting patient: {e}")
		raise api_error(500, "Server error", str(e))
