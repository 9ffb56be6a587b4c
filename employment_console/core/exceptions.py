"""Errors raised by the employees gateway and the console form."""

from __future__ import annotations


class GatewayError(Exception):
    """Base class for failures talking to the remote employees API."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class GatewayNotConfiguredError(GatewayError):
    """The gateway has no API URL and cannot issue requests."""


class NetworkError(GatewayError):
    """The request could not be sent or no response was received."""


class ServerError(GatewayError):
    """The remote API answered with a non-2xx status."""

    def __init__(self, status: int, detail: str) -> None:
        super().__init__(detail)
        self.status = status

    def __str__(self) -> str:
        return f"{self.status} - {self.detail}"


class ValidationError(ServerError):
    """The remote API rejected a create/update payload (4xx)."""


class FormValidationError(Exception):
    def __init__(self, fields: list[str], message: str) -> None:
        super().__init__(message)
        self.fields = fields
        self.message = message
