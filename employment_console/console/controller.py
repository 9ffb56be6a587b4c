"""View controller for the employee console.

The controller owns the :class:`AppState` and is the only caller of the
employees gateway. Each action awaits at most one gateway call at a time and
always settles the view back to ``Idle`` or the open modal, whatever the
outcome.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from employment_console.console.state import (
    AppState,
    FormMode,
    Idle,
    Loading,
    ModalOpen,
    Notice,
    NoticeLevel,
)
from employment_console.core.exceptions import FormValidationError, GatewayError
from employment_console.services.employee_gateway import EmployeeGateway, employee_gateway

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = (
    "Failed to fetch employees. Make sure the employees API is running and reachable."
)
DELETE_FAILED_MESSAGE = "Failed to delete employee. Please try again."
DELETE_PROMPT = "Are you sure you want to delete {name}? This action cannot be undone!"


class ConsoleController:
    def __init__(self, gateway: EmployeeGateway) -> None:
        self.gateway = gateway
        self.state = AppState()
        self._pending: list[Loading] = []

    def _notify(self, level: NoticeLevel, message: str) -> None:
        self.state.notices.append(Notice(level=level, message=message))

    def _settled_view(self) -> Idle | ModalOpen:
        view = self.state.view
        return view.resume if isinstance(view, Loading) else view

    def _begin_loading(self, resume: Idle | ModalOpen) -> Loading:
        loading = Loading(resume=resume)
        self._pending.append(loading)
        self.state.view = loading
        return loading

    def _end_loading(self, loading: Loading) -> None:
        self._pending = [p for p in self._pending if p is not loading]
        # Leave the view alone if another action has moved it on meanwhile.
        if self.state.view is loading:
            self.state.view = self._pending[-1] if self._pending else loading.resume

    def _refuse_while_busy(self, action: str) -> bool:
        if self.state.busy:
            logger.warning("Ignoring %s while a request is outstanding", action)
            return True
        return False

    async def start(self) -> None:
        await self.refresh()

    async def refresh(self) -> bool:
        loading = self._begin_loading(self._settled_view())
        try:
            records = await self.gateway.list_employees()
        except GatewayError as err:
            logger.error("Error fetching employees: %s", err)
            self._notify(NoticeLevel.ERROR, FETCH_FAILED_MESSAGE)
            return False
        finally:
            self._end_loading(loading)

        self.state.store.replace(records)
        logger.info("Fetched %d employees", len(records))
        return True

    def set_query(self, query: str) -> None:
        self.state.query = query

    def clear_query(self) -> None:
        self.state.query = ""

    def dismiss_notice(self, index: int) -> bool:
        if 0 <= index < len(self.state.notices):
            del self.state.notices[index]
            return True
        return False

    def open_create(self) -> bool:
        if self._refuse_while_busy("add") or not isinstance(self.state.view, Idle):
            return False
        self.state.form.reset()
        self.state.view = ModalOpen(FormMode.CREATE)
        return True

    def open_edit(self, employee_id: int | str) -> bool:
        if self._refuse_while_busy("edit") or not isinstance(self.state.view, Idle):
            return False

        employee = self.state.store.get(employee_id)
        if employee is None:
            logger.warning("Cannot edit unknown employee %s", employee_id)
            self._notify(NoticeLevel.ERROR, f"Employee {employee_id} not found.")
            return False

        logger.info("Editing employee %s", employee.id)
        self.state.form.load(employee)
        self.state.view = ModalOpen(FormMode.EDIT)
        return True

    def close_modal(self) -> bool:
        if self._refuse_while_busy("close") or not isinstance(self.state.view, ModalOpen):
            return False
        self.state.form.reset()
        self.state.view = Idle()
        return True

    def update_field(self, name: str, value: str | bool) -> bool:
        if self._refuse_while_busy("field update") or not isinstance(self.state.view, ModalOpen):
            return False
        self.state.form.set_field(name, value)
        return True

    async def submit(self) -> bool:
        if self._refuse_while_busy("submit"):
            return False
        modal = self.state.view
        if not isinstance(modal, ModalOpen):
            logger.warning("Submit without an open form")
            return False

        form = self.state.form
        try:
            employee = form.to_employee()
        except FormValidationError as err:
            self._notify(NoticeLevel.ERROR, err.message)
            return False

        loading = self._begin_loading(modal)
        try:
            if modal.mode is FormMode.EDIT:
                saved = await self.gateway.update_employee(form.record_id, employee)
            else:
                saved = await self.gateway.create_employee(employee)
        except GatewayError as err:
            logger.error("Error saving employee: %s", err)
            self._notify(NoticeLevel.ERROR, f"Error: {err.detail}")
            return False
        finally:
            self._end_loading(loading)

        logger.info("Saved employee %s", saved.id)
        await self.refresh()

        self.state.form.reset()
        self.state.view = Idle()
        if modal.mode is FormMode.EDIT:
            self._notify(NoticeLevel.SUCCESS, "Employee updated successfully!")
        else:
            self._notify(NoticeLevel.SUCCESS, "Employee created successfully!")
        return True

    def delete_prompt(self, employee_id: int | str) -> str:
        employee = self.state.store.get(employee_id)
        name = employee.full_name if employee else str(employee_id)
        return DELETE_PROMPT.format(name=name)

    async def delete(self, employee_id: int | str, confirm: Callable[[str], bool]) -> bool:
        if self._refuse_while_busy("delete") or not isinstance(self.state.view, Idle):
            return False

        employee = self.state.store.get(employee_id)
        if employee is not None:
            employee_id = employee.id
        if not confirm(self.delete_prompt(employee_id)):
            logger.info("Delete of employee %s declined", employee_id)
            return False

        loading = self._begin_loading(Idle())
        try:
            await self.gateway.delete_employee(employee_id)
        except GatewayError as err:
            logger.error("Error deleting employee %s: %s", employee_id, err)
            self._notify(NoticeLevel.ERROR, DELETE_FAILED_MESSAGE)
            return False
        finally:
            self._end_loading(loading)

        logger.info("Deleted employee with ID: %s", employee_id)
        await self.refresh()
        self._notify(NoticeLevel.SUCCESS, "Employee deleted successfully!")
        return True


console = ConsoleController(employee_gateway)
