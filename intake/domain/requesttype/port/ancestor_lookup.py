"""Port giving the extension resolver access to parent request types."""

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

from intake.domain.shared.port import Port

if TYPE_CHECKING:
    from intake.domain.requesttype.model.request_type import RequestType


class AncestorLookup(Port, Protocol):
    """Synchronous, read-only access to the parent of a request type."""

    @abstractmethod
    def get_parent(self, request_type: "RequestType") -> "RequestType | None":
        """Return the request type that ``request_type`` extends, if any."""
        ...
