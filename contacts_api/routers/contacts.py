from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from contacts_api.core.utils import parse_int
from contacts_api.repositories.sql_repository import ContactRepository
from contacts_api.schemas import ContactOut, ContactPayload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contacts", tags=["contacts"])


def _get_repository(request: Request) -> ContactRepository:
    repo = getattr(getattr(request.app, "state", None), "repository", None)
    if not repo:
        raise RuntimeError("ContactRepository not configured")
    return repo


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _not_found() -> JSONResponse:
    return _error("Contact not found", 404)


def _read_payload(body: Any) -> ContactPayload:
    # raises pydantic.ValidationError for non-object bodies or non-text fields
    return ContactPayload.model_validate(body if body is not None else {})


@router.post("", response_model=ContactOut)
def create_contact(request: Request, body: Any = Body(None)):
    try:
        payload = _read_payload(body)
        contact = _get_repository(request).create_contact(payload.name, payload.number)
    except Exception:
        logger.exception("Failed to create contact")
        return _error("Failed to create contact", 500)
    return contact


@router.get("/{contact_id}", response_model=ContactOut)
def get_contact(contact_id: str, request: Request):
    try:
        contact = _get_repository(request).get_contact(parse_int(contact_id))
    except Exception:
        logger.exception("Failed to get contact %s", contact_id)
        return _error("Failed to get contact", 500)
    if contact is None:
        return _not_found()
    return contact


@router.put("/{contact_id}", response_model=ContactOut)
def update_contact(contact_id: str, request: Request, body: Any = Body(None)):
    try:
        payload = _read_payload(body)
        contact = _get_repository(request).update_contact(parse_int(contact_id), payload.name, payload.number)
    except Exception:
        # includes ContactNotFoundError: a missing row answers 500, not 404
        logger.exception("Failed to update contact %s", contact_id)
        return _error("Failed to update contact", 500)
    if contact is None:
        return _not_found()
    return contact


@router.delete("/{contact_id}")
def delete_contact(contact_id: str, request: Request):
    try:
        contact = _get_repository(request).delete_contact(parse_int(contact_id))
    except Exception:
        logger.exception("Failed to delete contact %s", contact_id)
        return _error("Failed to delete contact", 500)
    if contact is None:
        return _not_found()
    return {"message": "Contact deleted successfully"}
