# models/patient.py

from datetime import datetime
from typing import ClassVar, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from clinic.models.validation import (MAX_STORED_INT, EntityFields, blank_to_empty,
                                      coerce_date, reject_bool)

GENDERS = ("Male", "Female", "Other")

class Appointment(BaseModel):
	date: datetime | None = None
	purpose: str = ""

	@field_validator("date", mode="before")
	@classmethod
	def parse_date(cls, value):
		return coerce_date(value)

	@field_validator("purpose", mode="before")
	@classmethod
	def blank_purpose(cls, value):
		return blank_to_empty(value)

class PatientFields(EntityFields):
	REQUIRED_MESSAGE: ClassVar[str] = "Name, contact, age, and gender are required"
	FIELD_MESSAGES: ClassVar[dict[str, str]] = {
		"age": "Age must be a whole number of zero or more",
		"gender": "Invalid gender",
		"appointments": "Invalid appointment",
	}

	name: str = Field(min_length=1)
	contact: str = Field(min_length=1)
	age: int = Field(ge=0, le=MAX_STORED_INT)
	gender: Literal["Male", "Female", "Other"]
	medical_history: str = Field("", alias="medicalHistory")
	appointments: list[Appointment] = Field(default_factory=list)

	@field_validator("age", mode="before")
	@classmethod
	def numeric_age(cls, value):
		return reject_bool(value)

	@field_validator("medical_history", mode="before")
	@classmethod
	def blank_history(cls, value):
		return blank_to_empty(value)

	@field_validator("appointments", mode="before")
	@classmethod
	def missing_appointments(cls, value):
		return [] if value is None else value

	@model_validator(mode="after")
	def drop_incomplete_appointments(self):
		# Blank rows from the form carry neither a date nor a purpose
		self.appointments = [a for a in self.appointments if a.date and a.purpose]
		return self
