# core/client.py

from typing import Any

import httpx

from clinic.config.settings import settings
from clinic.utils.logger import logger


class ApiError(Exception):
	"""A failed call to the clinic API. `message` is safe to show to the user."""
	def __init__(self, message: str, status_code: int | None = None, error: str | None = None):
		super().__init__(message)
		self.message = message
		self.status_code = status_code
		self.error = error

class ValidationFailed(ApiError):
	"""The server rejected the submitted fields or the id (400)."""

class RecordNotFound(ApiError):
	"""The targeted record does not exist (404)."""

class TransportFailure(ApiError):
	"""The server could not be reached or failed internally."""

def open_client(base_url: str | None = None, **kwargs) -> httpx.AsyncClient:
	"""An AsyncClient pointed at the clinic API."""
	return httpx.AsyncClient(
		base_url=base_url or settings.API_BASE_URL,
		timeout=kwargs.pop("timeout", settings.API_TIMEOUT),
		**kwargs
	)

class CollectionClient:
	"""
	CRUD calls for one collection, e.g. `CollectionClient(http, "patients")`.

	Non-2xx responses are raised as ApiError subclasses carrying the server's
	`message` verbatim; network errors become TransportFailure.
	"""
	def __init__(self, http: httpx.AsyncClient, entity: str):
		self.http = http
		self.entity = entity
		self.path = f"/api/{entity}"

	async def list(self) -> list[dict[str, Any]]:
		records = await self._request("GET", self.path)
		return records if isinstance(records, list) else []

	async def create(self, fields: dict[str, Any]) -> dict[str, Any]:
		body = await self._request("POST", self.path, json=fields)
		return body["record"]

	async def read(self, record_id: str) -> dict[str, Any]:
		return await self._request("GET", f"{self.path}/{record_id}")

	async def update(self, record_id: str, fields: dict[str, Any]) -> dict[str, Any]:
		body = await self._request("PUT", f"{self.path}/{record_id}", json=fields)
		return body["record"]

	async def delete(self, record_id: str) -> str:
		body = await self._request("DELETE", f"{self.path}/{record_id}")
		return body.get("message", "Deleted")

	async def _request(self, method: str, path: str, **kwargs) -> Any:
		try:
			response = await self.http.request(method, path, **kwargs)
		except httpx.HTTPError as e:
			logger(tag=self.entity).warning(f"{method} {path} failed: {e}")
			raise TransportFailure(f"Could not reach the server: {e}") from e

		try:
			body = response.json()
		except ValueError:
			body = None

		if response.is_success:
			return body

		message = body.get("message") if isinstance(body, dict) else None
		error = body.get("error") if isinstance(body, dict) else None
		status = response.status_code
		logger(tag=self.entity).info(f"{method} {path} -> {status} {message}")
		if status == 400:
			raise ValidationFailed(message or "Invalid request", status, error)
		if status == 404:
			raise RecordNotFound(message or "Not found", status, error)
		raise TransportFailure(message or f"Server responded with {status}", status, error)
