"""
events.py — Event pages (server-rendered HTML)

Routes:
    GET  /events                    All events
    GET  /events/all                Alias of /events
    GET  /events/add                Empty add form
    POST /events/add                Create; 303 → /events, or redisplay form with errors
    GET  /events/details/{id}       Single event
    GET  /events/edit/{id}          Edit form pre-filled from the store
    POST /events/edit               Update the event named by the form's `id`
    POST /events/edit/{id}          Same, but the form `id` must equal {id}
    POST /events/delete/{id}        Delete; 303 → /events
    POST /events/delete             Delete the event named by the form's `id`

Ids in the path only match integers, so /events/details/ and
/events/details/abc are plain 404s from the router.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from api.dependencies import get_event_service
from api.templating import templates
from schemas.event import FORM_FIELDS, bind_event_form, form_values_from_event
from services.event_service import EventService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["events"])


def _parse_id(raw: Optional[str]) -> Optional[int]:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def _render_form(
    request: Request,
    template: str,
    values: dict,
    errors: dict | None = None,
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        template,
        {
            "values": {k: v for k, v in values.items() if v is not None},
            "errors": errors or {},
            "fields": FORM_FIELDS,
        },
    )


def _redirect(request: Request, name: str, **path_params) -> RedirectResponse:
    return RedirectResponse(str(request.url_for(name, **path_params)), status_code=303)


# Decorators register bottom-up; "" must be registered first so
# url_for("list_events") resolves to /events.
@router.get("/all", response_class=HTMLResponse, include_in_schema=False)
@router.get("", response_class=HTMLResponse, summary="List events")
def list_events(request: Request, service: EventService = Depends(get_event_service)):
    return templates.TemplateResponse(
        request, "events/all.html", {"events": service.list_events()}
    )


@router.get("/add", response_class=HTMLResponse, summary="Add form")
def add_form(request: Request):
    return _render_form(request, "events/add.html", {})


@router.post("/add", response_class=HTMLResponse, summary="Create event")
def add_event(
    request: Request,
    name: Optional[str] = Form(None, alias="Name"),
    place: Optional[str] = Form(None, alias="Place"),
    start: Optional[str] = Form(None, alias="Start"),
    end: Optional[str] = Form(None, alias="End"),
    service: EventService = Depends(get_event_service),
):
    values = {"Name": name, "Place": place, "Start": start, "End": end}
    form, errors = bind_event_form(values)
    if form is None:
        logger.info("add form rejected", extra={"errors": errors})
        return _render_form(request, "events/add.html", values, errors)

    service.add(form)
    return _redirect(request, "list_events")


@router.get("/details/{event_id:int}", response_class=HTMLResponse, summary="Event details")
def event_details(
    request: Request,
    event_id: int,
    service: EventService = Depends(get_event_service),
):
    event = service.get_details(event_id)
    return templates.TemplateResponse(request, "events/details.html", {"event": event})


@router.get("/edit/{event_id:int}", response_class=HTMLResponse, summary="Edit form")
def edit_form(
    request: Request,
    event_id: int,
    service: EventService = Depends(get_event_service),
):
    event = service.get_for_edit(event_id)
    return _render_form(request, "events/edit.html", form_values_from_event(event))


def _submit_edit(
    request: Request,
    route_id: Optional[int],
    values: dict,
    service: EventService,
):
    target_id = service.resolve_edit_target(route_id, _parse_id(values.get("id")))

    form, errors = bind_event_form(values)
    if form is None:
        logger.info("edit form rejected", extra={"event_id": target_id, "errors": errors})
        return _render_form(request, "events/edit.html", values, errors)

    event = service.edit(target_id, form)
    return _redirect(request, "event_details", event_id=event.id)


@router.post("/edit", response_class=HTMLResponse, summary="Update event")
def edit_event(
    request: Request,
    form_id: Optional[str] = Form(None, alias="id"),
    name: Optional[str] = Form(None, alias="Name"),
    place: Optional[str] = Form(None, alias="Place"),
    start: Optional[str] = Form(None, alias="Start"),
    end: Optional[str] = Form(None, alias="End"),
    service: EventService = Depends(get_event_service),
):
    values = {"id": form_id, "Name": name, "Place": place, "Start": start, "End": end}
    return _submit_edit(request, None, values, service)


@router.post("/edit/{event_id:int}", response_class=HTMLResponse, summary="Update event by route id")
def edit_event_by_id(
    request: Request,
    event_id: int,
    form_id: Optional[str] = Form(None, alias="id"),
    name: Optional[str] = Form(None, alias="Name"),
    place: Optional[str] = Form(None, alias="Place"),
    start: Optional[str] = Form(None, alias="Start"),
    end: Optional[str] = Form(None, alias="End"),
    service: EventService = Depends(get_event_service),
):
    values = {"id": form_id, "Name": name, "Place": place, "Start": start, "End": end}
    return _submit_edit(request, event_id, values, service)


@router.post("/delete/{event_id:int}", summary="Delete event")
def delete_event(
    request: Request,
    event_id: int,
    service: EventService = Depends(get_event_service),
):
    service.delete(event_id)
    return _redirect(request, "list_events")


@router.post("/delete", summary="Delete event named by the form id")
@router.post("/delete/", include_in_schema=False)
def delete_event_by_form(
    request: Request,
    form_id: Optional[str] = Form(None, alias="id"),
    service: EventService = Depends(get_event_service),
):
    service.delete(_parse_id(form_id))
    return _redirect(request, "list_events")
