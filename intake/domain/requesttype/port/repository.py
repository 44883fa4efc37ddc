from abc import abstractmethod
from typing import TYPE_CHECKING, List, Protocol

from intake.domain.requesttype.model.value import RequestTypeId
from intake.domain.shared.port import Port

if TYPE_CHECKING:
    from intake.domain.requesttype.model.request_type import RequestType


class RequestTypeRepository(Port, Protocol):
    @abstractmethod
    async def save(self, request_type: "RequestType") -> None: ...

    @abstractmethod
    async def get(self, id: RequestTypeId) -> "RequestType | None": ...

    @abstractmethod
    async def list(
        self,
        *,
        source_organization: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> "List[RequestType]": ...

    @abstractmethod
    async def list_extending(self, id: RequestTypeId) -> "List[RequestType]":
        """Request types whose ``extends`` points at ``id``."""
        ...

    @abstractmethod
    async def exists(self, id: RequestTypeId) -> bool: ...

    @abstractmethod
    async def delete(self, id: RequestTypeId) -> None: ...
