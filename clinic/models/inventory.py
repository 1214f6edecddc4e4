# models/inventory.py

from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field, field_validator

from clinic.models.validation import (MAX_STORED_INT, EntityFields, blank_to_empty,
                                      coerce_date, reject_bool)
from clinic.utils.dates import utc_now

DEFAULT_LOW_STOCK_THRESHOLD = 5

class InventoryFields(EntityFields):
	REQUIRED_MESSAGE: ClassVar[str] = "Name and quantity are required"
	FIELD_MESSAGES: ClassVar[dict[str, str]] = {
		"quantity:greater_than_equal": "Quantity cannot be negative",
		"quantity:less_than_equal": "Quantity is too large",
		"quantity": "Quantity must be a whole number",
		"lowStockThreshold": "Low stock threshold must be a whole number of zero or more",
		"purchaseDate": "Invalid purchase date",
		"expiryDate": "Invalid expiry date",
	}

	name: str = Field(min_length=1)
	quantity: int = Field(ge=0, le=MAX_STORED_INT)
	supplier: str = ""
	purchase_date: datetime | None = Field(None, alias="purchaseDate")
	expiry_date: datetime | None = Field(None, alias="expiryDate")
	low_stock_threshold: int | None = Field(None, alias="lowStockThreshold", ge=0, le=MAX_STORED_INT)

	@field_validator("quantity", mode="before")
	@classmethod
	def numeric_quantity(cls, value):
		return reject_bool(value)

	@field_validator("supplier", mode="before")
	@classmethod
	def blank_supplier(cls, value):
		return blank_to_empty(value)

	@field_validator("purchase_date", "expiry_date", mode="before")
	@classmethod
	def parse_dates(cls, value):
		return coerce_date(value)

	@field_validator("low_stock_threshold", mode="before")
	@classmethod
	def blank_threshold(cls, value):
		return None if value == "" else reject_bool(value)

	def to_document(self) -> dict[str, Any]:
		doc = super().to_document()
		doc.setdefault("purchaseDate", utc_now())
		doc.setdefault("lowStockThreshold", DEFAULT_LOW_STOCK_THRESHOLD)
		return doc
