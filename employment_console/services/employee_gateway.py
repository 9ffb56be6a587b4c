"""Gateway to the remote employees REST API.

This is the only place the console talks to the network. Every call opens its
own HTTP session, is issued exactly once, and maps transport and protocol
failures onto the :mod:`employment_console.core.exceptions` taxonomy.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp
from pydantic import ValidationError as PydanticValidationError

from employment_console.core.config import Settings
from employment_console.core.exceptions import (
    GatewayNotConfiguredError,
    NetworkError,
    ServerError,
    ValidationError,
)
from employment_console.models.employee import Employee

logger = logging.getLogger(__name__)

_JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


class EmployeeGateway:
    def __init__(self) -> None:
        self.initialized = False
        self.base_url = ""

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.EMPLOYEES_API_URL:
            logger.warning("Employees API URL missing, EmployeeGateway not initialized")
            return

        self.base_url = settings.EMPLOYEES_API_URL.rstrip("/")
        self.initialized = True
        logger.info("EmployeeGateway initialized (url=%s)", self.base_url)

    async def close(self) -> None:
        self.initialized = False
        self.base_url = ""

    def _record_url(self, employee_id: int | str) -> str:
        return f"{self.base_url}/{employee_id}"

    async def list_employees(self) -> list[Employee]:
        data = await self._request("GET", self.base_url)
        if not isinstance(data, list):
            raise ServerError(200, "Expected a JSON array of employees")
        return [self._parse_employee(item) for item in data]

    async def create_employee(self, employee: Employee) -> Employee:
        data = await self._request("POST", self.base_url, payload=employee.to_payload())
        return self._parse_employee(data)

    async def update_employee(self, employee_id: int | str, employee: Employee) -> Employee:
        data = await self._request(
            "PUT", self._record_url(employee_id), payload=employee.to_payload()
        )
        return self._parse_employee(data)

    async def delete_employee(self, employee_id: int | str) -> None:
        await self._request("DELETE", self._record_url(employee_id), expect_body=False)

    async def check_connection(self) -> bool:
        if not self.initialized:
            return False

        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(self.base_url, headers=_JSON_HEADERS) as response:
                    return response.status == 200
        except Exception:
            logger.exception("EmployeeGateway connection check failed")
            return False

    async def _request(
        self,
        method: str,
        url: str,
        payload: dict[str, Any] | None = None,
        expect_body: bool = True,
    ) -> Any:
        if not self.initialized:
            raise GatewayNotConfiguredError("Employees API is not configured")

        logger.debug("%s request to %s", method, url)
        try:
            async with aiohttp.ClientSession() as session:
                async with session.request(
                    method, url, headers=_JSON_HEADERS, json=payload
                ) as response:
                    if 200 <= response.status < 300:
                        if not expect_body:
                            return None
                        try:
                            return await response.json(content_type=None)
                        except ValueError as err:
                            raise ServerError(response.status, "Malformed JSON response") from err

                    error_text = await response.text()
                    raise self._status_error(method, response.status, error_text)
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            raise NetworkError(f"{method} {url} failed: {err}") from err

    @staticmethod
    def _parse_employee(raw: Any) -> Employee:
        try:
            return Employee.model_validate(raw)
        except PydanticValidationError as err:
            raise ServerError(200, f"Malformed employee record: {err}") from err

    @staticmethod
    def _status_error(method: str, status: int, error_text: str) -> ServerError:
        if method in ("POST", "PUT") and 400 <= status < 500:
            return ValidationError(status, error_text or "Failed to save employee")
        return ServerError(status, error_text or f"HTTP error! status: {status}")


employee_gateway = EmployeeGateway()
