# data/repositories/inventory.py
"""
Inventory operations for MongoDB.

## Fields
	_id: index
	name: Item name
	quantity: Units in stock
	supplier: Who supplies the item, empty if unknown
	purchaseDate: When the stock was bought
	expiryDate: Optional expiry
	lowStockThreshold: Quantity at or below which the item counts as low stock
"""

from typing import Any

from clinic.data.repositories.base import (delete_document, find_document,
                                           insert_document, list_documents,
                                           replace_document)
from clinic.utils.logger import logger

INVENTORY_COLLECTION = "inventory"

def list_items(*, collection_name: str = INVENTORY_COLLECTION) -> list[dict[str, Any]]:
	items = list_documents(collection_name)
	logger().info(f"Found {len(items)} inventory items")
	return items

def get_item(
	item_id: str,
	/, *,
	collection_name: str = INVENTORY_COLLECTION
) -> dict[str, Any]:
	return find_document(collection_name, item_id)

def create_item(
	fields: dict[str, Any],
	/, *,
	collection_name: str = INVENTORY_COLLECTION
) -> dict[str, Any]:
	item = insert_document(collection_name, fields)
	logger().info(f"Inventory item saved: {item['_id']} ({item['name']} x{item['quantity']})")
	return item

def update_item(
	item_id: str,
	/,
	fields: dict[str, Any],
	*,
	collection_name: str = INVENTORY_COLLECTION
) -> dict[str, Any]:
	item = replace_document(collection_name, item_id, fields)
	logger().info(f"Inventory item updated: {item_id}")
	return item

def delete_item(
	item_id: str,
	/, *,
	collection_name: str = INVENTORY_COLLECTION
) -> None:
	delete_document(collection_name, item_id)
	logger().info(f"Inventory item deleted: {item_id}")
