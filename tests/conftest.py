from __future__ import annotations

import anyio
import pytest
from starlette.testclient import TestClient

from employment_console.api.console import get_console
from employment_console.console.controller import ConsoleController
from employment_console.core.exceptions import ServerError, ValidationError
from employment_console.main import app
from employment_console.models.employee import Employee


class FakeGateway:
    """In-memory stand-in for the remote employees API."""

    def __init__(self, records: list[Employee] | None = None) -> None:
        self.records: dict[int, Employee] = {r.id: r for r in records or []}
        self.next_id = max(self.records, default=0) + 1
        self.calls: list[tuple] = []
        self.failures: dict[str, Exception] = {}
        self.holds: dict[str, tuple[anyio.Event, anyio.Event]] = {}

    def hold(self, name: str) -> tuple[anyio.Event, anyio.Event]:
        """Make the next `name` call wait; returns (entered, release) events."""
        entered, release = anyio.Event(), anyio.Event()
        self.holds[name] = (entered, release)
        return entered, release

    async def _record_call(self, name: str, *args) -> None:
        self.calls.append((name, *args))
        held = self.holds.pop(name, None)
        if held:
            entered, release = held
            entered.set()
            await release.wait()
        if name in self.failures:
            raise self.failures[name]

    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]

    async def list_employees(self) -> list[Employee]:
        await self._record_call("list")
        return list(self.records.values())

    async def create_employee(self, employee: Employee) -> Employee:
        await self._record_call("create", employee)
        saved = employee.model_copy(update={"id": self.next_id})
        self.records[saved.id] = saved
        self.next_id += 1
        return saved

    async def update_employee(self, employee_id, employee: Employee) -> Employee:
        await self._record_call("update", employee_id, employee)
        if employee.salary is not None and employee.salary < 0:
            raise ValidationError(400, "Salary must be non-negative")
        if employee_id not in self.records:
            raise ServerError(404, f"Employee not found with id: {employee_id}")
        saved = employee.model_copy(update={"id": employee_id})
        self.records[employee_id] = saved
        return saved

    async def delete_employee(self, employee_id) -> None:
        await self._record_call("delete", employee_id)
        if employee_id not in self.records:
            raise ServerError(404, f"Employee not found with id: {employee_id}")
        del self.records[employee_id]

    async def check_connection(self) -> bool:
        return True


ANN = Employee(
    id=1,
    first_name="Ann",
    last_name="Lee",
    email="a@x.com",
    department="IT",
    position="Software Engineer",
    salary=50000,
    is_active=True,
)


@pytest.fixture(autouse=True)
def _gateway_settings():
    from employment_console.core.config import settings

    original_url = settings.EMPLOYEES_API_URL
    settings.EMPLOYEES_API_URL = ""
    yield
    settings.EMPLOYEES_API_URL = original_url


@pytest.fixture
def ann() -> Employee:
    return ANN.model_copy()


@pytest.fixture
def fake_gateway(ann) -> FakeGateway:
    return FakeGateway([ann])


@pytest.fixture
def controller(fake_gateway) -> ConsoleController:
    return ConsoleController(fake_gateway)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def console_client(controller):
    app.dependency_overrides[get_console] = lambda: controller
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
