# api/errors.py

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from clinic.utils.logger import logger


def api_error(status_code: int, message: str, error: str | None = None) -> HTTPException:
	"""Builds an HTTPException whose body renders as {message, error?}."""
	detail = {"message": message}
	if error:
		detail["error"] = error
	return HTTPException(status_code=status_code, detail=detail)

async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
	body = exc.detail if isinstance(exc.detail, dict) else {"message": str(exc.detail)}
	return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))

async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
	logger(tag="request").info(f"{request.method} {request.url.path} rejected: {exc.errors()}")
	errors = exc.errors()
	error = errors[0].get("msg") if errors else None
	return JSONResponse(status_code=400, content={"message": "Invalid request body", "error": error})

async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
	logger(tag="server").error(f"Server error on {request.method} {request.url.path}: {exc}")
	return JSONResponse(status_code=500, content={"message": "Internal server error", "error": str(exc)})

def register_error_handlers(app: FastAPI) -> None:
	app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
	app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
	app.add_exception_handler(Exception, unhandled_exception_handler)
