# api/routes/expenses.py

from typing import Any

from fastapi import APIRouter, Body

from clinic.api.errors import api_error
from clinic.data.repositories.base import (ActionFailed, EntryNotFound,
                                           InvalidIdentity)
from clinic.data.repositories.expense import (create_expense, delete_expense,
                                              get_expense, list_expenses,
                                              update_expense)
from clinic.models.expense import ExpenseFields
from clinic.models.validation import Err, validate_record
from clinic.utils.logger import logger

router = APIRouter(prefix="/api/expenses", tags=["Expenses"])

@router.get("")
async def list_expenses_route():
	try:
		logger(tag="list").info("GET /api/expenses")
		return list_expenses()
	except ActionFailed as e:
		logger().error(f"Error fetching expenses: {e}")
		raise api_error(500, "Server error", str(e))

@router.post("", status_code=201)
async def create_expense_route(payload: Any = Body(...)):
	logger(tag="create").info(f"POST /api/expenses body={payload}")
	result = validate_record(ExpenseFields, payload)
	if isinstance(result, Err):
		logger(tag="create").info(f"Validation failed: {result.reason}")
		raise api_error(400, result.reason, result.detail)
	try:
		expense = create_expense(result.record)
		return {"message": "Expense added successfully", "record": expense}
	except ActionFailed as e:
		logger().error(f"Error adding expense: {e}")
		raise api_error(500, "Server error", str(e))

@router.get("/{expense_id}")
async def get_expense_route(expense_id: str):
	try:
		logger(tag="read").info(f"GET /api/expenses/{expense_id}")
		return get_expense(expense_id)
	except InvalidIdentity:
		raise api_error(400, "Invalid expense ID")
	except EntryNotFound:
		raise api_error(404, "Expense not found")
	except ActionFailed as e:
		logger().error(f"Error fetching expense: {e}")
		raise api_error(500, "Server error", str(e))

@router.put("/{expense_id}")
async def update_expense_route(expense_id: str, payload: Any = Body(...)):
	logger(tag="update").info(f"PUT /api/expenses/{expense_id}")
	result = validate_record(ExpenseFields, payload)
	if isinstance(result, Err):
		logger(tag="update").info(f"Validation failed: {result.reason}")
		raise api_error(400, result.reason, result.detail)
	try:
		expense = update_expense(expense_id, result.record)
		return {"message": "Expense updated successfully", "record": expense}
	except InvalidIdentity:
		raise api_error(400, "Invalid expense ID")
	except EntryNotFound:
		raise api_error(404, "Expense not found")
	except ActionFailed as e:
		logger().error(f"Error updating expense: {e}")
		raise api_error(500, "Server error", str(e))

@router.delete("/{expense_id}")
async def delete_expense_route(expense_id: str):
	try:
		logger(tag="delete").info(f"DELETE /api/expenses/{expense_id}")
		delete_expense(expense_id)
		return {"message": "Expense deleted successfully"}
	except InvalidIdentity:
		raise api_error(400, "Invalid expense ID")
	except EntryNotFound:
		raise api_error(404, "Expense not found")
	except ActionFailed as e:
		logger().error(f"Error deleting expense: {e}")
		raise api_error(500, "Server error", str(e))
