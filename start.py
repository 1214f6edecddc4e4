#!/usr/bin/env python3
"""
Clinic Desk - Startup Script
Checks the environment and starts the API with uvicorn.
"""

import os

import uvicorn

from clinic.config.settings import settings


def main():
	"""Start the Clinic Desk API"""
	print("Clinic Desk API")
	print("=" * 50)

	if not os.getenv("MONGO_URI") and not os.path.exists(".env"):
		print("Warning: MONGO_URI is not set, falling back to a local MongoDB.")
	print(f"Database: {settings.DB_NAME}")
	print(f"API available at: http://{settings.HOST}:{settings.PORT}/api")
	print(f"API documentation at: http://{settings.HOST}:{settings.PORT}/docs")
	print("\nPress Ctrl+C to stop the server")
	print("=" * 50)

	uvicorn.run(
		"clinic.main:app",
		host=settings.HOST,
		port=settings.PORT,
		log_level=settings.LOG_LEVEL.lower(),
		reload=os.getenv("RELOAD", "").lower() in ("1", "true", "yes")
	)

if __name__ == "__main__":
	main()
