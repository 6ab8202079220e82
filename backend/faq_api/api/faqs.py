"""FAQs API - CRUD plus listing by tag name."""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from faq_api.api.openapi import json_body
from faq_api.dependencies import RecordId, get_db, read_payload
from faq_api.schemas.common import AckResponse, ErrorResponse
from faq_api.schemas.faq import FAQCreate, FAQResponse, FAQUpdate
from faq_api.services import faq_service

router = APIRouter()
by_tag_router = APIRouter()

_not_found = {404: {"model": ErrorResponse}}
_bad_request = {400: {"model": ErrorResponse}}
_server_error = {500: {"model": ErrorResponse}}


# POST /faqs
@router.post(
    "",
    response_model=FAQResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**_bad_request, **_server_error},
)
async def create_faq(body: FAQCreate, db: AsyncSession = Depends(get_db)):
    faq = await faq_service.create_faq(db, body)
    return FAQResponse.model_validate(faq)


# GET /faqs
@router.get("", response_model=list[FAQResponse], responses=_server_error)
async def list_faqs(db: AsyncSession = Depends(get_db)):
    faqs = await faq_service.list_faqs(db)
    return [FAQResponse.model_validate(f) for f in faqs]


# GET /faqs/{id}
@router.get("/{faq_id}", response_model=FAQResponse, responses=_not_found)
async def read_faq(faq_id: RecordId, db: AsyncSession = Depends(get_db)):
    faq = await faq_service.get_faq(db, faq_id)
    return FAQResponse.model_validate(faq)


# PUT /faqs/{id}
@router.put(
    "/{faq_id}",
    response_model=FAQResponse,
    responses={**_not_found, **_bad_request, **_server_error},
    openapi_extra=json_body(FAQUpdate),
)
async def update_faq(faq_id: RecordId, request: Request, db: AsyncSession = Depends(get_db)):
    faq = await faq_service.get_faq(db, faq_id)
    body = await read_payload(request, FAQUpdate)
    updated = await faq_service.update_faq(db, faq, body)
    return FAQResponse.model_validate(updated)


# DELETE /faqs/{id}
@router.delete("/{faq_id}", response_model=AckResponse, responses={**_not_found, **_server_error})
async def delete_faq(faq_id: RecordId, db: AsyncSession = Depends(get_db)):
    faq = await faq_service.get_faq(db, faq_id)
    await faq_service.delete_faq(db, faq)
    return AckResponse()


# GET /faqs_by_tag/{tag}
@by_tag_router.get("/{tag}", response_model=list[FAQResponse], responses={**_not_found, **_server_error})
async def list_faqs_by_tag(tag: str, db: AsyncSession = Depends(get_db)):
    faqs = await faq_service.list_faqs_by_tag(db, tag)
    return [FAQResponse.model_validate(f) for f in faqs]
