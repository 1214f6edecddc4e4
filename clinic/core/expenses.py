# core/expenses.py

from datetime import date
from typing import Any

from clinic.core.sync import CollectionView
from clinic.core.views import (Predicate, field_equals, in_month, sum_by,
                               total)
from clinic.models.expense import EXPENSE_CATEGORIES
from clinic.utils.dates import utc_now


def month_options(today: date | None = None, months: int = 12) -> list[dict[str, str]]:
	"""The current month and the ones before it, newest first, as {value, label}."""
	today = today or utc_now().date()
	options = []
	year, month = today.year, today.month
	for _ in range(months):
		first = date(year, month, 1)
		options.append({"value": first.strftime("%Y-%m"), "label": first.strftime("%B %Y")})
		year, month = (year, month - 1) if month > 1 else (year - 1, 12)
	return options

class ExpenseView(CollectionView):
	entity = "expenses"
	label = "Expense"
	sort_fields = {"date": "date", "amount": "number", "category": "text"}
	default_sort = ("date", True)

	def __init__(self, *args, **kwargs):
		super().__init__(*args, **kwargs)
		self.category = ""
		self.month = ""

	def filters(self) -> list[Predicate | None]:
		return [
			field_equals("category", self.category),
			in_month("date", self.month),
		]

	def summary(self) -> dict[str, Any]:
		expenses = self.filtered()
		return {
			"count": len(expenses),
			"total": total(expenses, "amount"),
			"by_category": sum_by(expenses, "category", "amount", EXPENSE_CATEGORIES),
		}
