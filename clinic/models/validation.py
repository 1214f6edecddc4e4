# models/validation.py

from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, ValidationError

from clinic.utils.dates import parse_when


@dataclass(frozen=True)
class Ok:
	"""A payload that passed validation, as the document to store."""
	record: dict[str, Any]

@dataclass(frozen=True)
class Err:
	"""A rejected payload. `reason` is shown to the user as is."""
	reason: str
	detail: str | None = None

ValidationResult = Ok | Err

def coerce_date(value: Any) -> Any:
	"""Before-validator for optional date fields: blank means unset."""
	if value is None or value == "":
		return None
	if isinstance(value, str):
		parsed = parse_when(value)
		if parsed is None:
			raise ValueError(f"'{value}' is not a valid date")
		return parsed
	return value

def blank_to_empty(value: Any) -> Any:
	return "" if value is None else value

# Largest integer BSON can store
MAX_STORED_INT = 2**63 - 1

def reject_bool(value: Any) -> Any:
	"""Before-validator for numeric fields; lax mode would read true as 1."""
	if isinstance(value, bool):
		raise ValueError("a boolean is not a number")
	return value

class EntityFields(BaseModel):
	"""
	Base schema for the request body of a Create or Update.

	Subclasses declare their fields with camelCase aliases and fill in the
	messages used when a payload is rejected. Messages are looked up by
	"<field>:<pydantic error type>" first, then by "<field>".
	"""
	model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="ignore")

	REQUIRED_MESSAGE: ClassVar[str] = "Required fields are missing"
	FIELD_MESSAGES: ClassVar[dict[str, str]] = {}

	def to_document(self) -> dict[str, Any]:
		"""The document to persist, with defaults applied."""
		return self.model_dump(by_alias=True, exclude_none=True)

	@classmethod
	def reason_for(cls, error: dict[str, Any]) -> str:
		if error["type"] in ("missing", "string_too_short"):
			return cls.REQUIRED_MESSAGE
		field = str(error["loc"][0]) if error["loc"] else ""
		return (
			cls.FIELD_MESSAGES.get(f"{field}:{error['type']}")
			or cls.FIELD_MESSAGES.get(field)
			or f"Invalid {field}"
		)

def validate_record(schema: type[EntityFields], payload: Any) -> ValidationResult:
	"""Checks a request body against an entity schema. Used for both Create and Update."""
	if not isinstance(payload, dict):
		return Err("Request body must be a JSON object")
	try:
		fields = schema.model_validate(payload)
	except ValidationError as e:
		error = e.errors()[0]
		return Err(schema.reason_for(error), error["msg"])
	return Ok(fields.to_document())
