# utils/dates.py

from datetime import date, datetime, timezone
from typing import Any


def utc_now() -> datetime:
	return datetime.now(timezone.utc)

def parse_when(value: Any) -> datetime | None:
	"""
	Coerces a stored or submitted date into an aware UTC datetime.

	Accepts datetimes (naive values are read as UTC, which is how pymongo
	hands them back), plain dates, and ISO-8601 strings with or without a
	time part. Empty and unparseable values give None, which callers treat
	as "never".
	"""
	if value is None or value == "":
		return None
	if isinstance(value, datetime):
		return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value.astimezone(timezone.utc)
	if isinstance(value, date):
		return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
	if isinstance(value, str):
		text = value.strip()
		if text.endswith("Z"):
			text = text[:-1] + "+00:00"
		try:
			return parse_when(datetime.fromisoformat(text))
		except ValueError:
			return None
	return None

def to_iso(value: datetime) -> str:
	"""Serialises a datetime as ISO-8601 in UTC."""
	return parse_when(value).isoformat()  # type: ignore[union-attr]
