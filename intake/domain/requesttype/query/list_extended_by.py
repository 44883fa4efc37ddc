from intake.domain.requesttype.model.value import RequestTypeId
from intake.domain.requesttype.query.list_request_types import (
    RequestTypeList,
    RequestTypeSummary,
)
from intake.domain.requesttype.service.request_type import RequestTypeService
from intake.domain.shared.query import Query, QueryHandler


class ListExtendedBy(Query):
    id: RequestTypeId


class ListExtendedByHandler(QueryHandler[ListExtendedBy, RequestTypeList]):
    """Lists the request types that directly extend a request type."""

    request_type_service: RequestTypeService

    async def run(self, cmd: ListExtendedBy) -> RequestTypeList:
        request_types = await self.request_type_service.list_extended_by(cmd.id)
        return RequestTypeList(items=[RequestTypeSummary.of(rt) for rt in request_types])
