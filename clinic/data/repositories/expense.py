# data/repositories/expense.py
"""
Expense operations for MongoDB.

## Fields
	_id: index
	category: One of the fixed expense categories
	amount: Positive amount spent
	date: When the expense happened
	description: Optional note
"""

from typing import Any

from clinic.data.repositories.base import (delete_document, find_document,
                                           insert_document, list_documents,
                                           replace_document)
from clinic.utils.logger import logger

EXPENSES_COLLECTION = "expenses"

def list_expenses(*, collection_name: str = EXPENSES_COLLECTION) -> list[dict[str, Any]]:
	expenses = list_documents(collection_name)
	logger().info(f"Found {len(expenses)} expenses")
	return expenses

def get_expense(
	expense_id: str,
	/, *,
	collection_name: str = EXPENSES_COLLECTION
) -> dict[str, Any]:
	return find_document(collection_name, expense_id)

def create_expense(
	fields: dict[str, Any],
	/, *,
	collection_name: str = EXPENSES_COLLECTION
) -> dict[str, Any]:
	expense = insert_document(collection_name, fields)
	logger().info(f"Expense saved successfully: {expense['_id']}")
	return expense

def update_expense(
	expense_id: str,
	/,
	fields: dict[str, Any],
	*,
	collection_name: str = EXPENSES_COLLECTION
) -> dict[str, Any]:
	expense = replace_document(collection_name, expense_id, fields)
	logger().info(f"Expense updated successfully: {expense_id}")
	return expense

def delete_expense(
	expense_id: str,
	/, *,
	collection_name: str = EXPENSES_COLLECTION
) -> None:
	delete_document(collection_name, expense_id)
	logger().info(f"Expense deleted successfully: {expense_id}")
