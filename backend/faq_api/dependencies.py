"""FastAPI dependency injection utilities."""
from typing import Annotated, TypeVar

from fastapi import Path, Request
from pydantic import BaseModel, ValidationError

from faq_api.database import get_db
from faq_api.middleware.error_handler import PayloadError
from faq_api.models.base import MAX_ID

__all__ = ["RecordId", "get_db", "read_payload"]

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# Ids outside the storable range can never match a record.
RecordId = Annotated[int, Path(ge=1, le=MAX_ID)]


async def read_payload(request: Request, schema: type[SchemaT]) -> SchemaT:
    """Parse the JSON body of ``request`` into ``schema``.

    Used by the update routes, which must look the record up before the body
    is parsed so that an unknown id answers 404 whatever the payload.
    """
    raw = await request.body()
    try:
        return schema.model_validate_json(raw)
    except ValidationError as exc:
        raise PayloadError() from exc
