from datetime import datetime
from typing import Any

from intake.domain.requesttype.model.value import RequestTypeId
from intake.domain.requesttype.model.visibility import (
    REQUEST_TYPE_VISIBILITY,
    Operation,
    project_properties,
    visible_fields,
)
from intake.domain.requesttype.service.request_type import RequestTypeService
from intake.domain.shared.query import Query, QueryHandler, Result


class GetRequestType(Query):
    id: RequestTypeId
    extend: bool = False  # Include properties inherited through `extends`


class RequestTypeDetail(Result):
    id: RequestTypeId
    source_organization: str
    name: str
    description: str | None
    properties: list[dict[str, Any]]
    available_from: datetime | None
    available_until: datetime | None
    created_at: datetime
    updated_at: datetime


class GetRequestTypeHandler(QueryHandler[GetRequestType, RequestTypeDetail]):
    request_type_service: RequestTypeService

    async def run(self, cmd: GetRequestType) -> RequestTypeDetail:
        request_type = await self.request_type_service.get_request_type(cmd.id)
        if cmd.extend:
            resolved = await self.request_type_service.resolve_properties(request_type)
            properties = resolved.as_list()
        else:
            properties = request_type.properties

        fields = visible_fields(REQUEST_TYPE_VISIBILITY, Operation.READ) - {"properties"}
        return RequestTypeDetail(
            **request_type.model_dump(include=fields),
            properties=project_properties(properties, Operation.READ),
        )
