# models/expense.py

from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field, field_validator

from clinic.models.validation import (EntityFields, blank_to_empty, coerce_date,
                                      reject_bool)
from clinic.utils.dates import utc_now

EXPENSE_CATEGORIES = ("Consumables", "Equipment", "Salaries", "Maintenance")

class ExpenseFields(EntityFields):
	REQUIRED_MESSAGE: ClassVar[str] = "Category and amount are required"
	FIELD_MESSAGES: ClassVar[dict[str, str]] = {
		"category": "Invalid category",
		"amount:greater_than": "Amount must be positive",
		"amount": "Amount must be a number",
		"date": "Invalid date",
	}

	category: str = Field(min_length=1)
	amount: float = Field(gt=0, allow_inf_nan=False)
	date: datetime | None = None
	description: str = ""

	@field_validator("amount", mode="before")
	@classmethod
	def numeric_amount(cls, value):
		return reject_bool(value)

	@field_validator("date", mode="before")
	@classmethod
	def parse_date(cls, value):
		return coerce_date(value)

	@field_validator("description", mode="before")
	@classmethod
	def blank_description(cls, value):
		return blank_to_empty(value)

	@field_validator("category")
	@classmethod
	def known_category(cls, value: str) -> str:
		if value not in EXPENSE_CATEGORIES:
			raise ValueError(f"'{value}' is not one of {', '.join(EXPENSE_CATEGORIES)}")
		return value

	def to_document(self) -> dict[str, Any]:
		doc = super().to_document()
		doc.setdefault("date", utc_now())
		return doc
