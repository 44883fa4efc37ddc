import re
from datetime import datetime
from typing import Any

from pydantic import ConfigDict, computed_field

from intake.domain.requesttype.model.value import (
    PropertyFormat,
    PropertyId,
    PropertyType,
    RequestTypeId,
)
from intake.domain.shared.model.value import ValueObject

_WHITESPACE_RUN = re.compile(r"\s+")


def derive_name(title: str) -> str:
    """Derive the API-facing key of a property from its title.

    Leading and trailing whitespace is trimmed, every remaining run of
    whitespace becomes a single underscore and the result is lowercased.
    """
    return _WHITESPACE_RUN.sub("_", title.strip()).lower()


class PropertySpec(ValueObject):
    """The writable part of a property definition, as supplied by a caller."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str
    type: PropertyType
    format: PropertyFormat | None = None

    # Numeric constraints
    multiple_of: int | float | None = None
    minimum: int | float | None = None
    exclusive_minimum: bool | None = None
    maximum: int | float | None = None
    exclusive_maximum: bool | None = None

    # String constraints
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None

    # Array constraints
    items: list["PropertySpec"] = []
    additional_items: bool | None = None
    min_items: int | None = None
    max_items: int | None = None
    unique_items: bool | None = None

    # Object constraints
    min_properties: int | None = None
    max_properties: int | None = None

    # Date bounds: ISO 8601 date, date-time or duration
    min_date: str | None = None
    max_date: str | None = None

    enum: list[Any] | None = None
    all_of: list[Any] | None = None
    any_of: list[Any] | None = None
    one_of: list[Any] | None = None

    required: bool | None = None
    nullable: bool | None = None
    deprecated: bool | None = None
    read_only: bool | None = None
    write_only: bool | None = None
    default: Any = None

    description: str | None = None
    example: str | None = None
    external_doc: str | None = None

    available_from: datetime | None = None
    available_until: datetime | None = None


class Property(PropertySpec):
    """A field definition owned by exactly one RequestType.

    Properties are immutable. Inherited properties are shared by reference
    between the owning type and the effective property sets of its
    descendants, so they must never change after definition.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: PropertyId
    request_type_id: RequestTypeId
    items: list["Property"] = []

    @computed_field  # type: ignore[prop-decorator]
    @property
    def name(self) -> str:
        return derive_name(self.title)

    @classmethod
    def define(
        cls,
        spec: PropertySpec,
        request_type_id: RequestTypeId,
        id: PropertyId | None = None,
    ) -> "Property":
        """Create a property owned by ``request_type_id`` from a caller's spec."""
        return cls(
            id=id or PropertyId.generate(),
            request_type_id=request_type_id,
            items=[cls.define(item, request_type_id) for item in spec.items],
            **spec.model_dump(exclude={"items"}),
        )
