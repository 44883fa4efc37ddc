from intake.domain.requesttype.model.value import RequestTypeId
from intake.domain.requesttype.service.request_type import RequestTypeService
from intake.domain.shared.command import Command, CommandHandler, Result


class DeleteRequestType(Command):
    id: RequestTypeId


class RequestTypeDeleted(Result):
    id: RequestTypeId


class DeleteRequestTypeHandler(CommandHandler[DeleteRequestType, RequestTypeDeleted]):
    request_type_service: RequestTypeService

    async def run(self, cmd: DeleteRequestType) -> RequestTypeDeleted:
        await self.request_type_service.delete_request_type(cmd.id)
        return RequestTypeDeleted(id=cmd.id)
