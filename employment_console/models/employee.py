"""Employee models for the remote employees API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEPARTMENTS: tuple[str, ...] = (
    "IT",
    "HR",
    "Finance",
    "Marketing",
    "Sales",
    "Operations",
    "Engineering",
    "Customer Support",
)


class Employee(BaseModel):
    """Employee record as exchanged with the remote API (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int | str | None = None
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    email: str = ""
    phone_number: str | None = Field(default=None, alias="phoneNumber")
    department: str | None = None
    position: str | None = None
    salary: float | None = None
    hire_date: str | None = Field(default=None, alias="hireDate")
    is_active: bool = Field(default=True, alias="isActive")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_payload(self) -> dict:
        """JSON body for create/update. Records without an id omit the key."""
        payload = self.model_dump(by_alias=True)
        if self.id is None:
            payload.pop("id")
        return payload


class EmployeeStats(BaseModel):
    total: int = 0
    active: int = 0
    inactive: int = 0
