"""Staging buffer behind the create/edit modal."""

from __future__ import annotations

import math

from employment_console.core.exceptions import FormValidationError
from employment_console.models.employee import Employee

TEXT_FIELDS: tuple[str, ...] = (
    "first_name",
    "last_name",
    "email",
    "phone_number",
    "department",
    "position",
    "salary",
    "hire_date",
)
REQUIRED_FIELDS: tuple[str, ...] = ("first_name", "last_name", "email")

FIELD_LABELS: dict[str, str] = {
    "first_name": "First Name",
    "last_name": "Last Name",
    "email": "Email Address",
    "phone_number": "Phone Number",
    "department": "Department",
    "position": "Position",
    "salary": "Salary",
    "hire_date": "Hire Date",
    "is_active": "Active Employee",
}


class FormBuffer:
    """Field-by-field copy of the employee being created or edited.

    Values are kept as the user typed them (text, plus the ``is_active``
    checkbox) and only converted to an :class:`Employee` on submit. A buffer is
    either reset to defaults (create mode, ``record_id`` is None) or loaded
    from a stored record (edit mode); the two are never merged.
    """

    def __init__(self) -> None:
        self.record_id: int | str | None = None
        self.values: dict[str, str] = {}
        self.is_active = True
        self.reset()

    def reset(self) -> None:
        self.record_id = None
        self.values = {name: "" for name in TEXT_FIELDS}
        self.is_active = True

    def load(self, employee: Employee) -> None:
        self.reset()
        self.record_id = employee.id
        self.values.update(
            first_name=employee.first_name or "",
            last_name=employee.last_name or "",
            email=employee.email or "",
            phone_number=employee.phone_number or "",
            department=employee.department or "",
            position=employee.position or "",
            salary=_format_salary(employee.salary),
            hire_date=employee.hire_date or "",
        )
        self.is_active = employee.is_active

    def set_field(self, name: str, value: str | bool) -> None:
        if name == "is_active":
            self.is_active = bool(value)
            return
        if name not in self.values:
            raise KeyError(f"Unknown form field: {name}")
        self.values[name] = "" if value is None else str(value)

    def missing_required(self) -> list[str]:
        return [name for name in REQUIRED_FIELDS if not self.values[name].strip()]

    def to_employee(self) -> Employee:
        missing = self.missing_required()
        if missing:
            labels = ", ".join(FIELD_LABELS[name] for name in missing)
            raise FormValidationError(missing, f"Please fill in the required fields: {labels}")

        salary_text = self.values["salary"].strip()
        salary: float | None = None
        if salary_text:
            try:
                salary = float(salary_text)
            except ValueError as err:
                raise FormValidationError(["salary"], "Salary must be a number") from err
            if not math.isfinite(salary):
                raise FormValidationError(["salary"], "Salary must be a finite number")

        return Employee(
            id=self.record_id,
            first_name=self.values["first_name"].strip(),
            last_name=self.values["last_name"].strip(),
            email=self.values["email"].strip(),
            phone_number=self.values["phone_number"].strip() or None,
            department=self.values["department"] or None,
            position=self.values["position"].strip() or None,
            salary=salary,
            hire_date=self.values["hire_date"].strip() or None,
            is_active=self.is_active,
        )


def _format_salary(salary: float | None) -> str:
    if salary is None:
        return ""
    if float(salary).is_integer():
        return str(int(salary))
    return str(salary)
