"""
Items API — Pydantic Response Schemas
======================================

What:  Pydantic models describing the API responses.
How:   FastAPI uses these models to serialize responses and to generate the
       OpenAPI document served at /openapi.json and rendered at /docs.

Items are free-form: only "id" is declared, every other field the client
sent is carried through unchanged (extra="allow").
"""

from pydantic import BaseModel, Field


class Item(BaseModel):
    """
    A stored item: a store-assigned id plus arbitrary client fields.

    Example:
        {"id": 1, "name": "item-1"}
    """
    id: int = Field(description="Store-assigned identifier (positive, increasing)")

    model_config = {
        "extra": "allow",
        "json_schema_extra": {"example": {"id": 1, "name": "item-1"}},
    }


class ErrorResponse(BaseModel):
    """Body returned for 404 and 500 responses."""
    message: str = Field(description="Human-readable error message")

    model_config = {"json_schema_extra": {"example": {"message": "Not found"}}}


class HealthResponse(BaseModel):
    """Fixed liveness payload returned by GET /health."""
    status: str = Field(default="ok", description="Always 'ok' while the process serves requests")
