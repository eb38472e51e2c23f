"""Routes exposing the produce store over HTTP."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import TypeAdapter, ValidationError

from supermarket.models.produce import ProduceRecord
from supermarket.services.produce_store import (
    InvalidProduceCodeError,
    ProduceStore,
    get_produce_store,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/produce", tags=["produce"])

StoreDependency = Annotated[ProduceStore, Depends(get_produce_store)]

_BATCH_ADAPTER = TypeAdapter(list[ProduceRecord])


def _is_json_content_type(content_type: str | None) -> bool:
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json"


async def _read_produce_batch(request: Request) -> list[ProduceRecord]:
    """Parse the request body into a batch of produce records.

    Raises:
        HTTPException: 415 for a non-JSON content type, 400 when the body is
            empty or does not describe a list of produce records.
    """
    if not _is_json_content_type(request.headers.get("content-type")):
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Content-Type must be application/json",
        )

    body = await request.body()
    if not body.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Body is empty.",
        )

    try:
        return _BATCH_ADAPTER.validate_json(body)
    except ValidationError as exc:
        logger.debug("Malformed produce batch: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Malformed produce batch ({exc.error_count()} error(s))",
        ) from exc


@router.get(
    "",
    response_model=list[ProduceRecord],
    summary="List all produce sorted by name",
)
async def list_produce(store: StoreDependency) -> list[ProduceRecord]:
    return store.list_produce()


@router.get(
    "/{produce_code}",
    response_model=ProduceRecord,
    summary="Fetch a single produce item",
)
async def get_produce(produce_code: str, store: StoreDependency) -> ProduceRecord:
    record = store.get(produce_code)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="produce not found"
        )
    return record


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    summary="Add or update a batch of produce",
)
async def upsert_produce(request: Request, store: StoreDependency) -> Response:
    """Validate and apply a JSON array of produce records as one unit."""

    batch = await _read_produce_batch(request)
    try:
        result = store.upsert(batch)
    except InvalidProduceCodeError as exc:
        logger.info("Rejected produce batch with code %r", exc.produce_code)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc

    logger.info(
        "Applied produce batch of %d (created=%d, updated=%d)",
        result.total,
        result.created,
        result.updated,
    )
    return Response(status_code=status.HTTP_201_CREATED)


@router.delete(
    "/{produce_code}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Remove a produce item",
)
async def delete_produce(produce_code: str, store: StoreDependency) -> Response:
    # Idempotent: unknown codes succeed too.
    store.delete(produce_code)
    logger.info("Delete requested for produce %s", produce_code)
    return Response(status_code=status.HTTP_200_OK)
