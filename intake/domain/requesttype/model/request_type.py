from datetime import datetime

from pydantic import model_validator
from typing_extensions import Self

from intake.domain.requesttype.model.property import Property
from intake.domain.requesttype.model.value import RequestTypeId
from intake.domain.shared.error import ValidationError
from intake.domain.shared.model.aggregate import Aggregate


class RequestType(Aggregate):
    """A service request definition composed of property fields.

    A request type may extend one other request type and so inherit its
    properties. Only the forward ``extends`` reference is stored; the inverse
    is computed by the repository on demand.
    """

    id: RequestTypeId
    source_organization: str
    name: str
    description: str | None = None
    properties: list[Property] = []
    extends: RequestTypeId | None = None
    available_from: datetime | None = None
    available_until: datetime | None = None
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="after")
    def check_properties(self) -> Self:
        for prop in self.properties:
            if prop.request_type_id != self.id:
                raise ValidationError(
                    f"Property '{prop.title}' is owned by request type {prop.request_type_id}",
                    field="properties",
                )

        titles = [p.title for p in self.properties]
        if len(titles) != len(set(titles)):
            raise ValidationError("Duplicate property titles within request type")

        names = [p.name for p in self.properties]
        if len(names) != len(set(names)):
            raise ValidationError("Property titles derive duplicate names within request type")
        return self
