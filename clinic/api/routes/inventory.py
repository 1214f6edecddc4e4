# api/routes/inventory.py

from typing import Any

from fastapi import APIRouter, Body

from clinic.api.errors import api_error
from clinic.data.repositories.base import (ActionFailed, EntryNotFound,
                                           InvalidIdentity)
from clinic.data.repositories.inventory import (create_item, delete_item,
                                                get_item, list_items,
                                                update_item)
from clinic.models.inventory import InventoryFields
from clinic.models.validation import Err, validate_record
from clinic.utils.logger import logger

router = APIRouter(prefix="/api/inventory", tags=["Inventory"])

@router.get("")
async def list_inventory_route():
	try:
		logger(tag="list").info("GET /api/inventory")
		return list_items()
	except ActionFailed as e:
		logger().error(f"Error fetching inventory: {e}")
		raise api_error(500, "Failed to fetch inventory items", str(e))

@router.post("", status_code=201)
async def create_item_route(payload: Any = Body(...)):
	logger(tag="create").info("POST /api/inventory")
	result = validate_record(InventoryFields, payload)
	if isinstance(result, Err):
		logger(tag="create").info(f"Validation failed: {result.reason}")
		raise api_error(400, result.reason, result.detail)
	try:
		item = create_item(result.record)
		return {"message": "Inventory item added successfully", "record": item}
	except ActionFailed as e:
		logger().error(f"Error adding inventory item: {e}")
		raise api_error(500, "Failed to add inventory item", str(e))

@router.get("/{item_id}")
async def get_item_route(item_id: str):
	try:
		logger(tag="read").info(f"GET /api/inventory/{item_id}")
		return get_item(item_id)
	except InvalidIdentity:
		raise api_error(400, "Invalid inventory item ID")
	except EntryNotFound:
		raise api_error(404, "Inventory item not found")
	except ActionFailed as e:
		logger().error(f"Error fetching inventory item: {e}")
		raise api_error(500, "Failed to fetch inventory item", str(e))

@router.put("/{item_id}")
async def update_item_route(item_id: str, payload: Any = Body(...)):
	logger(tag="update").info(f"PUT /api/inventory/{item_id}")
	result = validate_record(InventoryFields, payload)
	if isinstance(result, Err):
		logger(tag="update").info(f"Validation failed: {result.reason}")
		raise api_error(400, result.reason, result.detail)
	try:
		item = update_item(item_id, result.record)
		return {"message": "Inventory item updated successfully", "record": item}
	except InvalidIdentity:
		raise api_error(400, "Invalid inventory item ID")
	except EntryNotFound:
		raise api_error(404, "Inventory item not found")
	except ActionFailed as e:
		logger().error(f"Error updating inventory item: {e}")
		raise api_error(500, "Failed to update inventory item", str(e))

@router.delete("/{item_id}")
async def delete_item_route(item_id: str):
	try:
		logger(tag="delete").info(f"DELETE /api/inventory/{item_id}")
		delete_item(item_id)
		return {"message": "Inventory item deleted successfully"}
	except InvalidIdentity:
		raise api_error(400, "Invalid inventory item ID")
	except EntryNotFound:
		raise api_error(404, "Inventory item not found")
	except ActionFailed as e:
		logger().error(f"Error deleting inventory item: {e}")
		raise api_error(500, "Failed to delete inventory item", str(e))
