"""Value objects for the request type domain."""

from enum import StrEnum
from uuid import UUID, uuid4

from pydantic import RootModel


class RequestTypeId(RootModel[UUID]):
    """Unique identifier for a RequestType."""

    @classmethod
    def generate(cls) -> "RequestTypeId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)


class PropertyId(RootModel[UUID]):
    """Unique identifier for a Property."""

    @classmethod
    def generate(cls) -> "PropertyId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)


class PropertyType(StrEnum):
    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    NUMBER = "number"
    ARRAY = "array"


class PropertyFormat(StrEnum):
    """Value formats, orthogonal to PropertyType.

    Besides the OpenAPI formats this includes Dutch government formats:
    RSIN (organisation number), BAG (address register lookup),
    BSN (citizen service number) and IBAN.
    """

    INT32 = "int32"
    INT64 = "int64"
    FLOAT = "float"
    DOUBLE = "double"
    BYTE = "byte"
    BINARY = "binary"
    DATE = "date"
    DATE_TIME = "date-time"
    DURATION = "duration"
    PASSWORD = "password"
    BOOLEAN = "boolean"
    STRING = "string"
    UUID = "uuid"
    URI = "uri"
    EMAIL = "email"
    RSIN = "rsin"
    BAG = "bag"
    BSN = "bsn"
    IBAN = "iban"
