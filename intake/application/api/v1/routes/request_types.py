"""Request type REST routes."""

from typing import Annotated
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Response

from intake.domain.requesttype.command.create_request_type import (
    CreateRequestType,
    CreateRequestTypeHandler,
    RequestTypeCreated,
)
from intake.domain.requesttype.command.delete_request_type import (
    DeleteRequestType,
    DeleteRequestTypeHandler,
)
from intake.domain.requesttype.command.update_request_type import (
    RequestTypeUpdated,
    UpdateRequestType,
    UpdateRequestTypeHandler,
)
from intake.domain.requesttype.model.value import RequestTypeId
from intake.domain.requesttype.query.get_request_type import (
    GetRequestType,
    GetRequestTypeHandler,
    RequestTypeDetail,
)
from intake.domain.requesttype.query.list_extended_by import (
    ListExtendedBy,
    ListExtendedByHandler,
)
from intake.domain.requesttype.query.list_request_types import (
    ListRequestTypes,
    ListRequestTypesHandler,
    RequestTypeList,
)

router = APIRouter(prefix="/request-types", tags=["Request types"], route_class=DishkaRoute)


@router.post("", response_model=RequestTypeCreated, status_code=201)
async def create_request_type(
    body: CreateRequestType,
    handler: FromDishka[CreateRequestTypeHandler],
) -> RequestTypeCreated:
    return await handler.run(body)


@router.get("", response_model=RequestTypeList)
async def list_request_types(
    handler: FromDishka[ListRequestTypesHandler],
    source_organization: Annotated[str | None, Query()] = None,
    limit: Annotated[int | None, Query(ge=1)] = None,
    offset: Annotated[int | None, Query(ge=0)] = None,
) -> RequestTypeList:
    return await handler.run(
        ListRequestTypes(source_organization=source_organization, limit=limit, offset=offset)
    )


@router.get("/{id}", response_model=RequestTypeDetail)
async def get_request_type(
    id: UUID,
    handler: FromDishka[GetRequestTypeHandler],
    extend: Annotated[
        bool,
        Query(description="Add the properties of the request types this one extends"),
    ] = False,
) -> RequestTypeDetail:
    return await handler.run(GetRequestType(id=RequestTypeId(id), extend=extend))


@router.get("/{id}/extended-by", response_model=RequestTypeList)
async def list_extended_by(
    id: UUID,
    handler: FromDishka[ListExtendedByHandler],
) -> RequestTypeList:
    return await handler.run(ListExtendedBy(id=RequestTypeId(id)))


@router.put("/{id}", response_model=RequestTypeUpdated)
async def update_request_type(
    id: UUID,
    body: CreateRequestType,
    handler: FromDishka[UpdateRequestTypeHandler],
) -> RequestTypeUpdated:
    return await handler.run(UpdateRequestType(id=RequestTypeId(id), **body.model_dump()))


@router.delete("/{id}", status_code=204)
async def delete_request_type(
    id: UUID,
    handler: FromDishka[DeleteRequestTypeHandler],
) -> Response:
    await handler.run(DeleteRequestType(id=RequestTypeId(id)))
    return Response(status_code=204)
