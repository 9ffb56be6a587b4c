"""
Console Router
Renders the employee console and turns posted forms into controller actions.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from employment_console.console.controller import ConsoleController, console
from employment_console.console.form import TEXT_FIELDS
from employment_console.console.render import build_page

logger = logging.getLogger(__name__)

router = APIRouter(tags=["console"])
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def get_console() -> ConsoleController:
    return console


def _back_to_console() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", response_class=HTMLResponse)
async def console_page(
    request: Request,
    controller: ConsoleController = Depends(get_console),  # noqa: B008
):
    return templates.TemplateResponse(
        request,
        "console.html",
        {"page": build_page(controller.state)},
    )


@router.post("/search")
async def search(
    query: str = Form(""),
    controller: ConsoleController = Depends(get_console),  # noqa: B008
):
    controller.set_query(query)
    return _back_to_console()


@router.post("/search/clear")
async def clear_search(controller: ConsoleController = Depends(get_console)):  # noqa: B008
    controller.clear_query()
    return _back_to_console()


@router.post("/refresh")
async def refresh(controller: ConsoleController = Depends(get_console)):  # noqa: B008
    await controller.refresh()
    return _back_to_console()


@router.post("/employees/new")
async def open_create(controller: ConsoleController = Depends(get_console)):  # noqa: B008
    controller.open_create()
    return _back_to_console()


@router.post("/employees/{employee_id}/edit")
async def open_edit(
    employee_id: str,
    controller: ConsoleController = Depends(get_console),  # noqa: B008
):
    controller.open_edit(employee_id)
    return _back_to_console()


@router.post("/modal/close")
async def close_modal(controller: ConsoleController = Depends(get_console)):  # noqa: B008
    controller.close_modal()
    return _back_to_console()


@router.post("/modal/submit")
async def submit_modal(
    request: Request,
    controller: ConsoleController = Depends(get_console),  # noqa: B008
):
    form = await request.form()
    for name in TEXT_FIELDS:
        value = form.get(name, "")
        if not isinstance(value, str):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Field '{name}' must be text",
            )
        controller.update_field(name, value)
    # Unchecked checkboxes are not posted at all.
    controller.update_field("is_active", form.get("is_active") is not None)

    await controller.submit()
    return _back_to_console()


@router.get("/employees/{employee_id}/delete", response_class=HTMLResponse)
async def confirm_delete(
    request: Request,
    employee_id: str,
    controller: ConsoleController = Depends(get_console),  # noqa: B008
):
    if controller.state.store.get(employee_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id '{employee_id}' not found",
        )

    return templates.TemplateResponse(
        request,
        "confirm_delete.html",
        {"employee_id": employee_id, "prompt": controller.delete_prompt(employee_id)},
    )


@router.post("/employees/{employee_id}/delete")
async def delete_employee(
    employee_id: str,
    confirmed: str = Form("no"),
    controller: ConsoleController = Depends(get_console),  # noqa: B008
):
    await controller.delete(employee_id, confirm=lambda prompt: confirmed == "yes")
    return _back_to_console()


@router.post("/notices/{index}/dismiss")
async def dismiss_notice(
    index: int,
    controller: ConsoleController = Depends(get_console),  # noqa: B008
):
    if not controller.dismiss_notice(index):
        logger.debug("Notice %d already dismissed", index)
    return _back_to_console()
