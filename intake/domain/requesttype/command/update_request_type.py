from datetime import datetime

from intake.domain.requesttype.command.create_request_type import CreateRequestType
from intake.domain.requesttype.model.value import RequestTypeId
from intake.domain.requesttype.service.request_type import RequestTypeService
from intake.domain.shared.command import CommandHandler, Result


class UpdateRequestType(CreateRequestType):
    """Replaces the full definition of the request type ``id``."""

    id: RequestTypeId


class RequestTypeUpdated(Result):
    id: RequestTypeId
    name: str
    property_count: int
    updated_at: datetime


class UpdateRequestTypeHandler(CommandHandler[UpdateRequestType, RequestTypeUpdated]):
    request_type_service: RequestTypeService

    async def run(self, cmd: UpdateRequestType) -> RequestTypeUpdated:
        request_type = await self.request_type_service.update_request_type(
            id=cmd.id,
            source_organization=cmd.source_organization,
            name=cmd.name,
            description=cmd.description,
            properties=cmd.properties,
            extends=cmd.extends,
            available_from=cmd.available_from,
            available_until=cmd.available_until,
        )
        return RequestTypeUpdated(
            id=request_type.id,
            name=request_type.name,
            property_count=len(request_type.properties),
            updated_at=request_type.updated_at,
        )
