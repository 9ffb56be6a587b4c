"""Pure functions turning :class:`AppState` into the page view-model."""

from __future__ import annotations

from typing import Any

from employment_console.console.form import FIELD_LABELS, REQUIRED_FIELDS, FormBuffer
from employment_console.console.state import AppState, FormMode
from employment_console.models.employee import DEPARTMENTS, Employee

NOT_AVAILABLE = "N/A"


def format_salary(salary: float | None) -> str:
    if not salary:
        return "$0"
    if float(salary).is_integer():
        return f"${salary:,.0f}"
    return f"${salary:,.2f}"


def employee_row(employee: Employee) -> dict[str, Any]:
    return {
        "id": employee.id,
        "name": employee.full_name,
        "email": employee.email,
        "phone": employee.phone_number or NOT_AVAILABLE,
        "department": employee.department or NOT_AVAILABLE,
        "position": employee.position or NOT_AVAILABLE,
        "salary": format_salary(employee.salary),
        "hire_date": employee.hire_date or NOT_AVAILABLE,
        "active": employee.is_active,
        "status": "Active" if employee.is_active else "Inactive",
    }


def empty_message(query: str) -> str:
    if query:
        return f'No employees found matching "{query}"'
    return 'No employees found. Click "Add New Employee" to get started!'


def modal_view(mode: FormMode, form: FormBuffer, busy: bool) -> dict[str, Any]:
    if busy:
        submit_label = "Saving..."
    elif mode is FormMode.EDIT:
        submit_label = "Update Employee"
    else:
        submit_label = "Create Employee"

    return {
        "mode": mode.value,
        "title": "Edit Employee" if mode is FormMode.EDIT else "Add New Employee",
        "submit_label": submit_label,
        "fields": dict(form.values),
        "is_active": form.is_active,
        "labels": FIELD_LABELS,
        "required": REQUIRED_FIELDS,
        "departments": DEPARTMENTS,
    }


def build_page(state: AppState) -> dict[str, Any]:
    modal = state.modal
    return {
        "query": state.query,
        "busy": state.busy,
        "stats": state.store.stats(),
        "rows": [employee_row(employee) for employee in state.filtered],
        "empty_message": empty_message(state.query),
        "notices": list(enumerate(state.notices)),
        "modal": modal_view(modal.mode, state.form, state.busy) if modal else None,
    }
