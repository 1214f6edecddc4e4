from .expense import EXPENSE_CATEGORIES, ExpenseFields
from .inventory import DEFAULT_LOW_STOCK_THRESHOLD, InventoryFields
from .patient import GENDERS, Appointment, PatientFields
from .validation import Err, Ok, ValidationResult, validate_record

__all__ = [
	'Appointment',
	'PatientFields',
	'InventoryFields',
	'ExpenseFields',
	'GENDERS',
	'EXPENSE_CATEGORIES',
	'DEFAULT_LOW_STOCK_THRESHOLD',
	'Ok',
	'Err',
	'ValidationResult',
	'validate_record',
]
