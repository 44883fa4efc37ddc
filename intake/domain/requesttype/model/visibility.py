"""Per-field visibility of request types and properties.

Each table maps a field name to the operations under which the field is
exposed: READ for representations returned to callers, WRITE for
definitions accepted from callers. Fields missing from a table are never
exposed.
"""

from enum import StrEnum
from typing import Any

from intake.domain.requesttype.model.property import Property, PropertySpec


class Operation(StrEnum):
    READ = "read"
    WRITE = "write"


READ_WRITE = frozenset({Operation.READ, Operation.WRITE})
READ_ONLY = frozenset({Operation.READ})
WRITE_ONLY = frozenset({Operation.WRITE})
HIDDEN: frozenset[Operation] = frozenset()

FieldVisibility = dict[str, frozenset[Operation]]

REQUEST_TYPE_VISIBILITY: FieldVisibility = {
    "id": READ_ONLY,
    "source_organization": READ_WRITE,
    "name": READ_WRITE,
    "description": READ_WRITE,
    "properties": READ_WRITE,
    "extends": WRITE_ONLY,
    "extended_by": HIDDEN,
    "available_from": READ_WRITE,
    "available_until": READ_WRITE,
    "created_at": READ_ONLY,
    "updated_at": READ_ONLY,
}

PROPERTY_VISIBILITY: FieldVisibility = {
    "id": READ_ONLY,
    "request_type_id": HIDDEN,
    "name": READ_ONLY,
    **{field: READ_WRITE for field in PropertySpec.model_fields},
}


def visible_fields(rules: FieldVisibility, operation: Operation) -> set[str]:
    return {field for field, operations in rules.items() if operation in operations}


def project_property(prop: Property, operation: Operation = Operation.READ) -> dict[str, Any]:
    """Render a property with only the fields visible for ``operation``.

    Unset (None) fields are left out. Nested ``items`` are projected with the
    same rules.
    """
    fields = visible_fields(PROPERTY_VISIBILITY, operation)
    data = prop.model_dump(mode="json", include=fields - {"items"}, exclude_none=True)
    if "items" in fields and prop.items:
        data["items"] = [project_property(item, operation) for item in prop.items]
    return data


def project_properties(
    properties: list[Property], operation: Operation = Operation.READ
) -> list[dict[str, Any]]:
    """Render a property list; own and resolved lists are rendered alike."""
    return [project_property(p, operation) for p in properties]
