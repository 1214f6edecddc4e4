# core/inventory.py

from typing import Any

from clinic.core.sync import CollectionView
from clinic.core.views import (Predicate, Record, as_number, count_by,
                               field_equals, text_contains)
from clinic.models.inventory import DEFAULT_LOW_STOCK_THRESHOLD


def is_low_stock(item: Record) -> bool:
	"""quantity <= lowStockThreshold, falling back to the default threshold."""
	threshold = item.get("lowStockThreshold")
	if threshold is None:
		threshold = DEFAULT_LOW_STOCK_THRESHOLD
	return as_number(item.get("quantity")) <= as_number(threshold)

def low_stock_only(enabled: bool) -> Predicate | None:
	return is_low_stock if enabled else None

class InventoryView(CollectionView):
	entity = "inventory"
	label = "Inventory item"
	sort_fields = {
		"name": "text",
		"quantity": "number",
		"supplier": "text",
		"purchaseDate": "date",
		"expiryDate": "date",
	}
	default_sort = ("name", False)

	def __init__(self, *args, **kwargs):
		super().__init__(*args, **kwargs)
		self.only_low_stock = False
		self.query = ""
		self.supplier = ""

	def filters(self) -> list[Predicate | None]:
		return [
			low_stock_only(self.only_low_stock),
			text_contains(["name", "supplier"], self.query),
			field_equals("supplier", self.supplier),
		]

	def summary(self) -> dict[str, Any]:
		items = self.filtered()
		return {
			"count": len(items),
			"low_stock": sum(1 for item in items if is_low_stock(item)),
			"by_supplier": count_by(items, "supplier"),
		}
