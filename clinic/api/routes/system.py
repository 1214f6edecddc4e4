# api/routes/system.py

import time

from fastapi import APIRouter
from pymongo.errors import PyMongoError

from clinic.data.connection import get_database
from clinic.utils.logger import logger

router = APIRouter(prefix="/system", tags=["System"])

@router.get("/health")
async def health_check():
	"""Reports whether MongoDB answers a ping."""
	try:
		get_database().command("ping")
		database = "operational"
	except PyMongoError as e:
		logger(tag="health").warning(f"MongoDB ping failed: {e}")
		database = "unavailable"
	return {
		"status": "healthy" if database == "operational" else "degraded",
		"timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
		"components": {"database": database}
	}
