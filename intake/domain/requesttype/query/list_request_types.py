from datetime import datetime

from pydantic import BaseModel

from intake.domain.requesttype.model.request_type import RequestType
from intake.domain.requesttype.model.value import RequestTypeId
from intake.domain.requesttype.service.request_type import RequestTypeService
from intake.domain.shared.query import Query, QueryHandler, Result


class ListRequestTypes(Query):
    source_organization: str | None = None
    limit: int | None = None
    offset: int | None = None


class RequestTypeSummary(BaseModel):
    id: RequestTypeId
    source_organization: str
    name: str
    description: str | None
    property_count: int
    created_at: datetime

    @classmethod
    def of(cls, request_type: RequestType) -> "RequestTypeSummary":
        return cls(
            id=request_type.id,
            source_organization=request_type.source_organization,
            name=request_type.name,
            description=request_type.description,
            property_count=len(request_type.properties),
            created_at=request_type.created_at,
        )


class RequestTypeList(Result):
    items: list[RequestTypeSummary]


class ListRequestTypesHandler(QueryHandler[ListRequestTypes, RequestTypeList]):
    request_type_service: RequestTypeService

    async def run(self, cmd: ListRequestTypes) -> RequestTypeList:
        request_types = await self.request_type_service.list_request_types(
            source_organization=cmd.source_organization,
            limit=cmd.limit,
            offset=cmd.offset,
        )
        return RequestTypeList(items=[RequestTypeSummary.of(rt) for rt in request_types])
