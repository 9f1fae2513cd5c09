"""
Items API — Item CRUD Route Handlers
=====================================

What:  Placeholder CRUD resource over the in-memory ItemStore.
How:   Each handler receives the store through `Depends(get_item_store)`.
       Request bodies are free-form JSON objects; no field is validated.

Status codes:
    GET    /api/items        200
    GET    /api/items/{id}   200 | 404 {"message": "Not found"}
    POST   /api/items        201
    PUT    /api/items/{id}   200 | 404 {"message": "Not found"}
    DELETE /api/items/{id}   204 (also when nothing matched)
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Response, status

from items_api.exceptions import NotFoundError
from items_api.schemas import ErrorResponse, Item
from items_api.store import ItemStore, get_item_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/items", tags=["Items"])

_NOT_FOUND = {404: {"description": "Item not found", "model": ErrorResponse}}


@router.get("", response_model=List[Item], summary="List all items")
async def list_items(store: ItemStore = Depends(get_item_store)) -> List[Dict[str, Any]]:
    return store.list()


@router.get(
    "/{item_id}",
    response_model=Item,
    responses=_NOT_FOUND,
    summary="Get a single item by id",
)
async def get_item(
    item_id: int,
    store: ItemStore = Depends(get_item_store),
) -> Dict[str, Any]:
    item = store.get(item_id)
    if item is None:
        raise NotFoundError(resource="item", resource_id=item_id)
    return item


@router.post(
    "",
    response_model=Item,
    status_code=status.HTTP_201_CREATED,
    summary="Create an item",
    description="Stores the request body as a new item and assigns it the next id.",
)
async def create_item(
    fields: Optional[Dict[str, Any]] = Body(default=None, examples=[{"name": "x"}]),
    store: ItemStore = Depends(get_item_store),
) -> Dict[str, Any]:
    item = store.create(fields or {})
    logger.info("Item %d created", item["id"])
    return item


@router.put(
    "/{item_id}",
    response_model=Item,
    responses=_NOT_FOUND,
    summary="Update an item",
    description=(
        "Shallow-merges the request body over the stored item. Supplied fields "
        "overwrite, fields not supplied are kept. The id never changes."
    ),
)
async def update_item(
    item_id: int,
    fields: Optional[Dict[str, Any]] = Body(default=None, examples=[{"name": "y"}]),
    store: ItemStore = Depends(get_item_store),
) -> Dict[str, Any]:
    item = store.update(item_id, fields or {})
    if item is None:
        raise NotFoundError(resource="item", resource_id=item_id)
    return item


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete an item",
    description="Removes the item if it exists. Responds 204 either way.",
)
async def delete_item(
    item_id: int,
    store: ItemStore = Depends(get_item_store),
) -> Response:
    if store.delete(item_id) is None:
        logger.debug("Delete of missing item %d ignored", item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
