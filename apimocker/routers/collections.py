from __future__ import annotations

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from apimocker.services.collection_service import (
    CollectionError,
    CollectionService,
    InvalidIdentifierTypeError,
    RecordNotFoundError,
)

router = APIRouter(tags=["collections"])

_ERROR_STATUS = {
    RecordNotFoundError: 404,
    InvalidIdentifierTypeError: 400,
}


def _get_collection_service(request: Request) -> CollectionService:
    svc = getattr(getattr(request.app, "state", None), "collection_service", None)
    if not svc:
        raise RuntimeError("CollectionService not configured")
    return svc


def _error_response(request: Request, exc: CollectionError) -> JSONResponse:
    legacy = getattr(request.app.state, "legacy_error_status", False)
    status = 200 if legacy else _ERROR_STATUS.get(type(exc), 400)
    return JSONResponse({"error": exc.message}, status_code=status)


@router.get("/{collection}")
def list_records(collection: str, request: Request):
    return _get_collection_service(request).list(collection)


@router.post("/{collection}")
def create_record(collection: str, request: Request, payload: dict = Body(...)):
    return _get_collection_service(request).create(collection, payload)


@router.get("/{collection}/{record_id}")
def get_record(collection: str, record_id: str, request: Request):
    try:
        return _get_collection_service(request).get_one(collection, record_id)
    except CollectionError as exc:
        return _error_response(request, exc)


@router.put("/{collection}/{record_id}")
def replace_record(collection: str, record_id: str, request: Request, payload: dict = Body(...)):
    try:
        return _get_collection_service(request).replace(collection, record_id, payload)
    except CollectionError as exc:
        return _error_response(request, exc)


@router.patch("/{collection}/{record_id}")
def update_record(collection: str, record_id: str, request: Request, payload: dict = Body(...)):
    try:
        return _get_collection_service(request).update(collection, record_id, payload)
    except CollectionError as exc:
        return _error_response(request, exc)


@router.delete("/{collection}/{record_id}")
def delete_record(collection: str, record_id: str, request: Request):
    try:
        return _get_collection_service(request).delete(collection, record_id)
    except CollectionError as exc:
        return _error_response(request, exc)
