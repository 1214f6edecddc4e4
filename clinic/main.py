# main.py
# Run with: uvicorn clinic.main:app --port 5000

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.routing import APIRoute

from clinic.config.settings import settings
from clinic.utils.logger import logger, setup_logging

# Needs to be called before any logs are sent
setup_logging(settings.LOG_LEVEL)

# Load environment variables from .env file
try:
	from dotenv import load_dotenv
	load_dotenv()
	logger(tag="env").info("Environment variables loaded from .env file")
except ImportError:
	logger(tag="env").warning("python-dotenv not available, using system environment variables")

# Import project modules after trying to load environment variables
from clinic.api.errors import register_error_handlers
from clinic.api.routes import expenses as expenses_route
from clinic.api.routes import inventory as inventory_route
from clinic.api.routes import patients as patients_route
from clinic.api.routes import system as system_route
from clinic.data.connection import close_connection

APP_NAME = "Clinic Desk"
APP_VERSION = "1.0.0"

@asynccontextmanager
async def lifespan(app: FastAPI):
	logger(tag="startup").info(f"Starting {APP_NAME} against database '{settings.DB_NAME}'")
	yield
	logger(tag="shutdown").info(f"Shutting down {APP_NAME}...")
	close_connection()

app = FastAPI(
	lifespan=lifespan,
	title=APP_NAME,
	description="Patients, inventory and expenses for a small clinic",
	version=APP_VERSION
)

app.add_middleware(
	CORSMiddleware,
	allow_origins=settings.CORS_ORIGINS,
	allow_credentials=True,
	allow_methods=["*"],
	allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(patients_route.router)
app.include_router(inventory_route.router)
app.include_router(expenses_route.router)
app.include_router(system_route.router)

@app.get("/", response_class=PlainTextResponse)
async def root():
	return "API Running"

@app.get("/api/info")
async def get_api_info():
	"""Get API information, lists all paths available in the api."""
	return {
		"name": APP_NAME,
		"version": APP_VERSION,
		"collections": ["patients", "inventory", "expenses"],
		"endpoints": sorted({route.path for route in app.routes if isinstance(route, APIRoute)})
	}
