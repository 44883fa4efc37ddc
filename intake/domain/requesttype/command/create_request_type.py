from datetime import datetime

from intake.domain.requesttype.model.property import PropertySpec
from intake.domain.requesttype.model.value import RequestTypeId
from intake.domain.requesttype.service.request_type import RequestTypeService
from intake.domain.shared.command import Command, CommandHandler, Result


class CreateRequestType(Command):
    source_organization: str
    name: str
    description: str | None = None
    properties: list[PropertySpec] = []
    extends: RequestTypeId | None = None
    available_from: datetime | None = None
    available_until: datetime | None = None


class RequestTypeCreated(Result):
    id: RequestTypeId
    name: str
    property_count: int
    created_at: datetime


class CreateRequestTypeHandler(CommandHandler[CreateRequestType, RequestTypeCreated]):
    request_type_service: RequestTypeService

    async def run(self, cmd: CreateRequestType) -> RequestTypeCreated:
        request_type = await self.request_type_service.create_request_type(
            source_organization=cmd.source_organization,
            name=cmd.name,
            description=cmd.description,
            properties=cmd.properties,
            extends=cmd.extends,
            available_from=cmd.available_from,
            available_until=cmd.available_until,
        )
        return RequestTypeCreated(
            id=request_type.id,
            name=request_type.name,
            property_count=len(request_type.properties),
            created_at=request_type.created_at,
        )
