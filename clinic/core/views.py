# core/views.py
"""
Pure functions that derive what a screen shows from a snapshot.

Nothing here touches the network or mutates its input. Views recompute from
scratch on every call.

## Conventions
	Absent numbers count as 0, absent text as "".
	Absent dates mean "never" and always sort last.
	A filter built from an empty value is None and matches everything.
"""

from datetime import date, datetime
from typing import Any, Callable, Iterable

from clinic.utils.dates import parse_when

Record = dict[str, Any]
Predicate = Callable[[Record], bool]

SORT_KINDS = ("text", "number", "date")

def as_number(value: Any) -> float:
	if isinstance(value, bool):
		return float(value)
	if isinstance(value, (int, float)):
		return value
	try:
		return float(value)
	except (TypeError, ValueError):
		return 0

def as_text(value: Any) -> str:
	return "" if value is None else str(value)

def sort_records(
	records: Iterable[Record],
	field: str,
	*,
	kind: str = "text",
	descending: bool = False
) -> list[Record]:
	"""Stable sort; equal keys keep snapshot order in either direction."""
	if kind not in SORT_KINDS:
		raise ValueError(f"Unknown sort kind '{kind}'")
	records = list(records)
	if kind == "number":
		return sorted(records, key=lambda r: as_number(r.get(field)), reverse=descending)
	if kind == "text":
		return sorted(records, key=lambda r: as_text(r.get(field)).casefold(), reverse=descending)

	dated = [r for r in records if parse_when(r.get(field)) is not None]
	undated = [r for r in records if parse_when(r.get(field)) is None]
	dated.sort(key=lambda r: parse_when(r.get(field)), reverse=descending)
	return dated + undated

def filter_records(records: Iterable[Record], predicates: Iterable[Predicate | None]) -> list[Record]:
	"""Keeps records matching every predicate. None entries are skipped."""
	active = [p for p in predicates if p is not None]
	return [r for r in records if all(p(r) for p in active)]

def field_equals(field: str, value: Any) -> Predicate | None:
	if value is None or value == "":
		return None
	return lambda r: r.get(field) == value

def in_month(field: str, month: str | None) -> Predicate | None:
	"""Matches records whose date falls in `month`, given as YYYY-MM in UTC."""
	if not month:
		return None
	def predicate(record: Record) -> bool:
		when = parse_when(record.get(field))
		return when is not None and when.strftime("%Y-%m") == month
	return predicate

def to_day(value: date | str | None) -> date | None:
	if value is None or value == "":
		return None
	if isinstance(value, datetime):
		return parse_when(value).date()  # type: ignore[union-attr]
	if isinstance(value, date):
		return value
	parsed = parse_when(value)
	return parsed.date() if parsed else None

def on_day(field: str, day: date | str | None) -> Predicate | None:
	target = to_day(day)
	if target is None:
		return None
	def predicate(record: Record) -> bool:
		when = parse_when(record.get(field))
		return when is not None and when.date() == target
	return predicate

def text_contains(fields: Iterable[str], query: str | None) -> Predicate | None:
	"""Case-insensitive substring match against any of `fields`."""
	needle = (query or "").strip().casefold()
	if not needle:
		return None
	fields = tuple(fields)
	return lambda r: any(needle in as_text(r.get(f)).casefold() for f in fields)

def number_between(field: str, low: float | None = None, high: float | None = None) -> Predicate | None:
	"""Inclusive range; either bound may be open."""
	if low is None and high is None:
		return None
	def predicate(record: Record) -> bool:
		value = as_number(record.get(field))
		if low is not None and value < low:
			return False
		return high is None or value <= high
	return predicate

def total(records: Iterable[Record], field: str) -> float:
	return sum(as_number(r.get(field)) for r in records)

def count_by(records: Iterable[Record], field: str, keys: Iterable[str] | None = None) -> dict[str, int]:
	"""
	Tallies records per value of `field`.

	With `keys`, the result has exactly those keys (zero where nothing
	matched). Without, keys appear in first-seen order. Records missing
	the field are left out either way.
	"""
	counts: dict[str, int] = {k: 0 for k in keys} if keys is not None else {}
	fixed = keys is not None
	for record in records:
		key = record.get(field)
		if key is None or (fixed and key not in counts):
			continue
		counts[key] = counts.get(key, 0) + 1
	return counts

def sum_by(
	records: Iterable[Record],
	key_field: str,
	value_field: str,
	keys: Iterable[str] | None = None
) -> dict[str, float]:
	sums: dict[str, float] = {k: 0 for k in keys} if keys is not None else {}
	fixed = keys is not None
	for record in records:
		key = record.get(key_field)
		if key is None or (fixed and key not in sums):
			continue
		sums[key] = sums.get(key, 0) + as_number(record.get(value_field))
	return sums
