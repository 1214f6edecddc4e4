# config/settings.py

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
	"""Values read from the environment or the .env file."""

	# Database
	MONGO_URI: str = "mongodb://127.0.0.1:27017/"
	DB_NAME: str = "clinic"
	MONGO_TIMEOUT_MS: int = 5000

	# Server
	HOST: str = "0.0.0.0"
	PORT: int = 5000
	CORS_ORIGINS: list[str] = ["http://localhost:5173"]
	LOG_LEVEL: str = "INFO"

	# Dashboard client
	API_BASE_URL: str = "http://localhost:5000"
	API_TIMEOUT: int = 30

	class Config:
		env_file = ".env"
		env_file_encoding = "utf-8"
		extra = "ignore"

settings = Settings()
