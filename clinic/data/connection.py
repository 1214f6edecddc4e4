# data/connection.py

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from clinic.config.settings import settings
from clinic.utils.logger import logger

_mongo_client: MongoClient | None = None

def get_client() -> MongoClient:
	"""Returns the shared client, connecting lazily on first use."""
	global _mongo_client
	if _mongo_client is None:
		try:
			logger().info("Initializing MongoDB connection.")
			_mongo_client = MongoClient(
				settings.MONGO_URI,
				serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS
			)
		except Exception as e:
			logger().error(f"Failed to connect to MongoDB: {e}")
			# Callers translate this into a server error
			raise
	return _mongo_client

def use_client(client: MongoClient | None) -> None:
	"""Replaces the shared client. Passing None drops it without closing."""
	global _mongo_client
	_mongo_client = client

def get_database(db_name: str | None = None) -> Database:
	return get_client()[db_name or settings.DB_NAME]

def get_collection(name: str) -> Collection:
	"""Retrieves a MongoDB collection by name. MongoDB creates it on first write."""
	return get_database().get_collection(name)

def close_connection():
	"""Closes the MongoDB connection."""
	global _mongo_client
	if _mongo_client:
		logger().info("Closing MongoDB connection.")
		_mongo_client.close()
		_mongo_client = None
