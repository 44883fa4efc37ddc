from dishka import AsyncContainer, from_context, make_async_container
from starlette.requests import Request

from intake.config import Config
from intake.domain.requesttype.util.di import RequestTypeProvider
from intake.infrastructure.persistence import PersistenceProvider
from intake.util.di.base import Provider
from intake.util.di.scope import Scope


class ContextProvider(Provider):
    """Values handed to the container rather than built by it."""

    config = from_context(provides=Config, scope=Scope.APP)
    request = from_context(provides=Request, scope=Scope.UOW)


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    return make_async_container(
        ContextProvider(),
        PersistenceProvider(),
        RequestTypeProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
