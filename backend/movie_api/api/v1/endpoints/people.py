"""
People API Endpoints
"""

from typing import Dict, List
from fastapi import APIRouter, Depends, Query

from movie_api.api.v1.deps import get_pagination, get_person_service
from movie_api.models import (
    BaseResponse, PaginatedResponse, PersonCreate, PersonDetail, PersonSchema,
    PersonSearchResult, PersonUpdate,
)
from movie_api.services import PersonService

router = APIRouter()

@router.get("/", response_model=BaseResponse[PaginatedResponse[PersonSchema]])
async def get_people(
    pagination: Dict[str, int] = Depends(get_pagination),
    service: PersonService = Depends(get_person_service)
):
    """Get people with pagination"""

    result = await service.get_people_paginated(**pagination)
    result["items"] = [PersonSchema.model_validate(person) for person in result["items"]]

    return BaseResponse[PaginatedResponse[PersonSchema]](data=PaginatedResponse[PersonSchema](**result))

@router.get("/search", response_model=BaseResponse[List[PersonSearchResult]])
async def search_people(
    q: str = Query(..., min_length=1),
    limit: int = Query(10, ge=1, le=50),
    service: PersonService = Depends(get_person_service)
):
    """Search people by name"""

    people = await service.search_people(q, limit)
    return BaseResponse[List[PersonSearchResult]](
        data=[PersonSearchResult.model_validate(person) for person in people]
    )

@router.get("/{person_id}", response_model=BaseResponse[PersonDetail])
async def get_person(person_id: int, service: PersonService = Depends(get_person_service)):
    """Get person by ID with the titles they appear in"""

    detail = await service.get_person_detail(person_id)
    return BaseResponse[PersonDetail](data=PersonDetail(**detail))

@router.post("/", response_model=BaseResponse[PersonSchema], status_code=201)
async def create_person(person_data: PersonCreate, service: PersonService = Depends(get_person_service)):
    """Create new person"""

    person = await service.create_person(person_data)
    return BaseResponse[PersonSchema](
        message="Created successfully.",
        data=PersonSchema.model_validate(person),
    )

@router.put("/{person_id}", response_model=BaseResponse[PersonSchema])
async def update_person(
    person_id: int,
    person_data: PersonUpdate,
    service: PersonService = Depends(get_person_service)
):
    """Update person"""

    person = await service.update_person(person_id, person_data)
    return BaseResponse[PersonSchema](
        message="Updated successfully.",
        data=PersonSchema.model_validate(person),
    )

@router.delete("/{person_id}", response_model=BaseResponse[None])
async def delete_person(person_id: int, service: PersonService = Depends(get_person_service)):
    """Delete person; they are dropped from every cast they belong to"""

    await service.delete_person(person_id)
    return BaseResponse[None](message="Deleted successfully.")
