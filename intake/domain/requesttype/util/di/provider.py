from dishka import provide

from intake.config import Config
from intake.domain.requesttype.command.create_request_type import CreateRequestTypeHandler
from intake.domain.requesttype.command.delete_request_type import DeleteRequestTypeHandler
from intake.domain.requesttype.command.update_request_type import UpdateRequestTypeHandler
from intake.domain.requesttype.port.repository import RequestTypeRepository
from intake.domain.requesttype.query.get_request_type import GetRequestTypeHandler
from intake.domain.requesttype.query.list_extended_by import ListExtendedByHandler
from intake.domain.requesttype.query.list_request_types import ListRequestTypesHandler
from intake.domain.requesttype.service.definition import DefinitionValidator
from intake.domain.requesttype.service.request_type import RequestTypeService
from intake.domain.requesttype.service.resolver import ExtensionResolver
from intake.util.di.base import Provider
from intake.util.di.scope import Scope


class RequestTypeProvider(Provider):
    # Stateless collaborators
    @provide(scope=Scope.APP)
    def get_resolver(self, config: Config) -> ExtensionResolver:
        return ExtensionResolver(max_depth=config.resolver.max_depth)

    @provide(scope=Scope.APP)
    def get_definition_validator(self) -> DefinitionValidator:
        return DefinitionValidator()

    # Services
    @provide(scope=Scope.UOW)
    def get_request_type_service(
        self,
        request_type_repo: RequestTypeRepository,
        resolver: ExtensionResolver,
        validator: DefinitionValidator,
    ) -> RequestTypeService:
        return RequestTypeService(
            request_type_repo=request_type_repo,
            resolver=resolver,
            validator=validator,
        )

    # Command Handlers
    create_request_type_handler = provide(CreateRequestTypeHandler, scope=Scope.UOW)
    update_request_type_handler = provide(UpdateRequestTypeHandler, scope=Scope.UOW)
    delete_request_type_handler = provide(DeleteRequestTypeHandler, scope=Scope.UOW)

    # Query Handlers
    get_request_type_handler = provide(GetRequestTypeHandler, scope=Scope.UOW)
    list_request_types_handler = provide(ListRequestTypesHandler, scope=Scope.UOW)
    list_extended_by_handler = provide(ListExtendedByHandler, scope=Scope.UOW)
