# data/repositories/base.py
"""
Generic document operations shared by the patient, inventory and expense
repositories.

Every function takes the collection name explicitly so that the entity
modules stay thin and tests can point them at scratch collections.
Documents leave this module serialised: the ObjectId becomes a string under
both `_id` and `id`, and datetimes become ISO-8601 strings.
"""

from contextlib import contextmanager
from datetime import datetime
from typing import Any, Iterator

from bson import ObjectId
from bson.errors import InvalidDocument
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from clinic.data.connection import get_collection
from clinic.utils.dates import to_iso
from clinic.utils.logger import logger


class ActionFailed(Exception):
	"""Raised when a database action fails."""

class EntryNotFound(Exception):
	"""Raised when an entry cannot be found in the database."""

class InvalidIdentity(Exception):
	"""Raised when an id is not a well formed ObjectId string."""

@contextmanager
def database_action(action: str) -> Iterator[None]:
	"""Logs driver and encoding failures and re-raises them as ActionFailed."""
	try:
		yield
	except (PyMongoError, InvalidDocument, OverflowError) as e:
		logger(tag=action).error(f"Database error: {e}")
		raise ActionFailed(str(e)) from e

def to_object_id(record_id: str) -> ObjectId:
	if not isinstance(record_id, str) or not ObjectId.is_valid(record_id):
		raise InvalidIdentity(f"'{record_id}' is not a valid id")
	return ObjectId(record_id)

def serialise(value: Any) -> Any:
	"""Converts a stored document into JSON friendly values, recursively."""
	if isinstance(value, dict):
		doc = {key: serialise(item) for key, item in value.items()}
		if "_id" in doc:
			doc["id"] = doc["_id"]
		return doc
	if isinstance(value, list):
		return [serialise(item) for item in value]
	if isinstance(value, ObjectId):
		return str(value)
	if isinstance(value, datetime):
		return to_iso(value)
	return value

def list_documents(collection_name: str) -> list[dict[str, Any]]:
	with database_action("list"):
		return [serialise(doc) for doc in get_collection(collection_name).find()]

def find_document(collection_name: str, record_id: str) -> dict[str, Any]:
	object_id = to_object_id(record_id)
	with database_action("find"):
		doc = get_collection(collection_name).find_one({"_id": object_id})
	if doc is None:
		raise EntryNotFound(record_id)
	return serialise(doc)

def insert_document(collection_name: str, document: dict[str, Any]) -> dict[str, Any]:
	doc = dict(document)
	doc.pop("_id", None)
	with database_action("insert"):
		result = get_collection(collection_name).insert_one(doc)
	doc["_id"] = result.inserted_id
	return serialise(doc)

def replace_document(
	collection_name: str,
	record_id: str,
	document: dict[str, Any]
) -> dict[str, Any]:
	"""Replaces the whole document, keeping its id. Fields left out are dropped."""
	object_id = to_object_id(record_id)
	replacement = {k: v for k, v in document.items() if k not in ("_id", "id")}
	with database_action("replace"):
		doc = get_collection(collection_name).find_one_and_replace(
			{"_id": object_id},
			replacement,
			return_document=ReturnDocument.AFTER
		)
	if doc is None:
		raise EntryNotFound(record_id)
	return serialise(doc)

def delete_document(collection_name: str, record_id: str) -> None:
	object_id = to_object_id(record_id)
	with database_action("delete"):
		result = get_collection(collection_name).delete_one({"_id": object_id})
	if result.deleted_count == 0:
		raise EntryNotFound(record_id)
