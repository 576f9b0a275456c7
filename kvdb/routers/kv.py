"""
Key-value store router

Every path and verb lands on one handler. The ``action`` form field
decides whether the request lists, inserts or deletes entries.
"""
import logging
from typing import Dict
from urllib.parse import parse_qsl

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from ..core.actions import Action, resolve_action
from ..core.errors import MissingFieldError, UnsupportedActionError
from ..core.render import render_page
from ..services.store import KeyValueStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["kv"])


def get_store(request: Request) -> KeyValueStore:
    """Dependency returning the store the application was built with"""
    return request.app.state.store


async def read_form(request: Request) -> Dict[str, str]:
    """Decode a form-url-encoded body; repeated fields keep the last value."""
    # Not request.form(): blank fields must stay as "" and invalid UTF-8 is replaced
    body = await request.body()
    return dict(parse_qsl(body.decode("utf-8", errors="replace"), keep_blank_values=True))


@router.api_route(
    "/{path:path}",
    methods=["GET", "HEAD", "POST", "PUT", "DELETE", "CONNECT", "OPTIONS", "TRACE", "PATCH"],
    response_class=HTMLResponse,
)
async def process(
    request: Request,
    store: KeyValueStore = Depends(get_store),
) -> HTMLResponse:
    """
    Apply the form's action to the store and render the resulting table.

    Raises:
        InvalidActionError: Unknown ``action`` value (422)
        MissingFieldError: ``key`` or ``value`` absent (422)
        UnsupportedActionError: Recognised but unhandled action (405)
    """
    params = await read_form(request)
    action = resolve_action(params.get("action"))

    if action == Action.INSERT:
        key = params.get("key")
        value = params.get("value")
        if key is None:
            raise MissingFieldError("key")
        if value is None:
            raise MissingFieldError("value")
        logger.info("Adding entry: '%s' := '%s'", key, value)
        await store.insert(key, value)
    elif action == Action.DELETE:
        key = params.get("key")
        if key is None:
            raise MissingFieldError("key")
        logger.info("Deleting entry with key '%s'", key)
        await store.delete(key)
    elif action != Action.LIST:
        raise UnsupportedActionError()

    return HTMLResponse(render_page(await store.get_all()))
