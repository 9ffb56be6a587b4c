"""Client-side record store and search filter."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from employment_console.models.employee import Employee, EmployeeStats

_SEARCHABLE_FIELDS = ("first_name", "last_name", "email", "department", "position")


def filter_employees(query: str, employees: Sequence[Employee]) -> list[Employee]:
    if not query:
        return list(employees)

    needle = query.lower()
    results: list[Employee] = []
    for employee in employees:
        for field in _SEARCHABLE_FIELDS:
            value = getattr(employee, field, None)
            if value and needle in value.lower():
                results.append(employee)
                break
    return results


class RecordStore:
    """Ordered snapshot of the remote employee list, replaced wholesale."""

    def __init__(self) -> None:
        self._records: tuple[Employee, ...] = ()

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> tuple[Employee, ...]:
        return self._records

    def replace(self, records: Iterable[Employee]) -> None:
        self._records = tuple(records)

    def get(self, employee_id: int | str) -> Employee | None:
        # Ids arrive from HTML forms as text, so compare on the string form.
        wanted = str(employee_id)
        for record in self._records:
            if record.id is not None and str(record.id) == wanted:
                return record
        return None

    def stats(self) -> EmployeeStats:
        active = sum(1 for record in self._records if record.is_active)
        return EmployeeStats(
            total=len(self._records),
            active=active,
            inactive=len(self._records) - active,
        )
