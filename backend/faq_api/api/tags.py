"""Tags API."""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from faq_api.api.openapi import json_body
from faq_api.dependencies import RecordId, get_db, read_payload
from faq_api.schemas.common import AckResponse, ErrorResponse
from faq_api.schemas.tag import TagCreate, TagResponse, TagUpdate
from faq_api.services import tag_service

router = APIRouter()

_errors = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


# POST /tags
@router.post("", response_model=TagResponse, status_code=status.HTTP_201_CREATED, responses=_errors)
async def create_tag(body: TagCreate, db: AsyncSession = Depends(get_db)):
    tag = await tag_service.create_tag(db, body)
    return TagResponse.model_validate(tag)


# GET /tags
@router.get("", response_model=list[TagResponse], responses=_errors)
async def list_tags(db: AsyncSession = Depends(get_db)):
    tags = await tag_service.list_tags(db)
    return [TagResponse.model_validate(t) for t in tags]


# PUT /tags/{id}
@router.put("/{tag_id}", response_model=TagResponse, responses=_errors, openapi_extra=json_body(TagUpdate))
async def update_tag(tag_id: RecordId, request: Request, db: AsyncSession = Depends(get_db)):
    tag = await tag_service.get_tag(db, tag_id)
    body = await read_payload(request, TagUpdate)
    updated = await tag_service.update_tag(db, tag, body)
    return TagResponse.model_validate(updated)


# DELETE /tags/{id}
@router.delete("/{tag_id}", response_model=AckResponse, responses=_errors)
async def delete_tag(tag_id: RecordId, db: AsyncSession = Depends(get_db)):
    tag = await tag_service.get_tag(db, tag_id)
    await tag_service.delete_tag(db, tag)
    return AckResponse()
