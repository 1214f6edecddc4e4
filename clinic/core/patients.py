# core/patients.py

from datetime import date
from typing import Any

from clinic.core.sync import CollectionView
from clinic.core.views import (Predicate, Record, count_by, field_equals,
                               number_between, text_contains, to_day)
from clinic.models.patient import GENDERS
from clinic.utils.dates import parse_when

AGE_BRACKETS: dict[str, tuple[int, int | None]] = {
	"0-18": (0, 18),
	"19-30": (19, 30),
	"31-50": (31, 50),
	"51+": (51, None),
}

def age_bracket(bracket: str | None) -> Predicate | None:
	if not bracket:
		return None
	if bracket not in AGE_BRACKETS:
		raise ValueError(f"Unknown age bracket '{bracket}'")
	low, high = AGE_BRACKETS[bracket]
	return number_between("age", low, high)

def has_appointment_on(day: date | str | None) -> Predicate | None:
	target = to_day(day)
	if target is None:
		return None
	def predicate(patient: Record) -> bool:
		for appointment in patient.get("appointments") or []:
			when = parse_when(appointment.get("date"))
			if when is not None and when.date() == target:
				return True
		return False
	return predicate

class PatientView(CollectionView):
	entity = "patients"
	label = "Patient"
	sort_fields = {"name": "text", "age": "number"}
	default_sort = ("name", False)

	def __init__(self, *args, **kwargs):
		super().__init__(*args, **kwargs)
		self.gender: str = ""
		self.age_bracket: str = ""
		self.name_query: str = ""
		self.appointment_day: date | str | None = None

	async def load(self) -> None:
		await super().load()
		# Rows without a name cannot be shown or edited
		self.records = [p for p in self.records if p.get("name")]

	def filters(self) -> list[Predicate | None]:
		return [
			field_equals("gender", self.gender),
			age_bracket(self.age_bracket),
			text_contains(["name"], self.name_query),
			has_appointment_on(self.appointment_day),
		]

	def summary(self) -> dict[str, Any]:
		patients = self.filtered()
		return {
			"count": len(patients),
			"by_gender": count_by(patients, "gender", GENDERS),
		}
