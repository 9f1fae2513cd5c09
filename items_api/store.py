"""
Items API — In-Memory Item Store
=================================

What:  Ordered list of item records held in process memory.
How:   Lookups are linear scans by identifier. Identifiers come from a
       counter that remembers the highest id ever assigned, so a deleted
       id is never handed out again.
Who:   Owned by the FastAPI application (app.state.item_store) and injected
       into route handlers through `get_item_store`.

Every operation is synchronous and never awaits, so on a single event loop
each call completes without interleaving with other requests.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from fastapi import Request

logger = logging.getLogger(__name__)

Item = Dict[str, Any]


class ItemStore:
    """
    In-memory CRUD store for free-form item records.

    Each record is a dict with an integer "id" followed by whatever fields
    the caller supplied. Caller-supplied "id" keys are discarded: the store
    alone assigns identifiers. Records handed out are shallow copies, so a
    stored record only changes through update().
    """

    def __init__(self, initial: Optional[Iterable[Mapping[str, Any]]] = None):
        self._items: List[Item] = []
        self._last_id = 0
        for fields in initial or ():
            self.create(fields)

    def __len__(self) -> int:
        return len(self._items)

    def list(self) -> List[Item]:
        return [dict(item) for item in self._items]

    def get(self, item_id: int) -> Optional[Item]:
        for item in self._items:
            if item["id"] == item_id:
                return dict(item)
        return None

    def create(self, fields: Mapping[str, Any]) -> Item:
        """Append a new record with the next identifier and return it."""
        self._last_id += 1
        item: Item = {"id": self._last_id}
        item.update(_without_id(fields))
        self._items.append(item)
        logger.debug("Created item %d", item["id"])
        return dict(item)

    def update(self, item_id: int, fields: Mapping[str, Any]) -> Optional[Item]:
        """
        Shallow-merge `fields` over an existing record.

        Supplied keys overwrite, all other keys are preserved. Returns the
        merged record, or None when no record has `item_id`.
        """
        for index, item in enumerate(self._items):
            if item["id"] == item_id:
                merged = {**item, **_without_id(fields)}
                self._items[index] = merged
                return dict(merged)
        return None

    def delete(self, item_id: int) -> Optional[Item]:
        """Remove the record with `item_id` if present; returns it or None."""
        for index, item in enumerate(self._items):
            if item["id"] == item_id:
                return self._items.pop(index)
        return None


def _without_id(fields: Mapping[str, Any]) -> Item:
    return {key: value for key, value in fields.items() if key != "id"}


def get_item_store(request: Request) -> ItemStore:
    """FastAPI dependency returning the store attached to the running app."""
    return request.app.state.item_store
