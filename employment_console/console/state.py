"""Application state owned by the console controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from employment_console.console.form import FormBuffer
from employment_console.console.store import RecordStore, filter_employees
from employment_console.models.employee import Employee


class FormMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class ModalOpen:
    mode: FormMode


@dataclass(frozen=True)
class Loading:
    # Settled state to return to once the outstanding call finishes.
    resume: Union[Idle, ModalOpen] = Idle()


ViewState = Union[Idle, Loading, ModalOpen]


class NoticeLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notice:
    level: NoticeLevel
    message: str


@dataclass
class AppState:
    store: RecordStore = field(default_factory=RecordStore)
    form: FormBuffer = field(default_factory=FormBuffer)
    view: ViewState = field(default_factory=Idle)
    query: str = ""
    notices: list[Notice] = field(default_factory=list)

    @property
    def busy(self) -> bool:
        return isinstance(self.view, Loading)

    @property
    def modal(self) -> ModalOpen | None:
        view = self.view.resume if isinstance(self.view, Loading) else self.view
        return view if isinstance(view, ModalOpen) else None

    @property
    def filtered(self) -> list[Employee]:
        return filter_employees(self.query, self.store.records)
