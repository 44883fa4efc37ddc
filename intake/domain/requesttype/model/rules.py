"""Definition rules keyed by property type and format.

These tables decide which formats and which constraint keywords make sense
for each property type. They are evaluated by DefinitionValidator when a
request type is defined; they are not applied to submitted request values.
"""

from enum import StrEnum

from intake.domain.requesttype.model.value import PropertyFormat, PropertyType


class ConstraintGroup(StrEnum):
    NUMERIC = "numeric"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    DATE = "date"


CONSTRAINT_FIELDS: dict[ConstraintGroup, tuple[str, ...]] = {
    ConstraintGroup.NUMERIC: (
        "multiple_of",
        "minimum",
        "exclusive_minimum",
        "maximum",
        "exclusive_maximum",
    ),
    ConstraintGroup.STRING: ("min_length", "max_length", "pattern"),
    ConstraintGroup.ARRAY: (
        "items",
        "additional_items",
        "min_items",
        "max_items",
        "unique_items",
    ),
    ConstraintGroup.OBJECT: ("min_properties", "max_properties"),
    ConstraintGroup.DATE: ("min_date", "max_date"),
}

_TEXT_FORMATS = frozenset(
    {
        PropertyFormat.STRING,
        PropertyFormat.PASSWORD,
        PropertyFormat.BYTE,
        PropertyFormat.BINARY,
        PropertyFormat.DATE,
        PropertyFormat.DATE_TIME,
        PropertyFormat.DURATION,
        PropertyFormat.UUID,
        PropertyFormat.URI,
        PropertyFormat.EMAIL,
        PropertyFormat.RSIN,
        PropertyFormat.BAG,
        PropertyFormat.BSN,
        PropertyFormat.IBAN,
    }
)

FORMATS_BY_TYPE: dict[PropertyType, frozenset[PropertyFormat]] = {
    PropertyType.STRING: _TEXT_FORMATS,
    PropertyType.INTEGER: frozenset({PropertyFormat.INT32, PropertyFormat.INT64}),
    PropertyType.NUMBER: frozenset(
        {
            PropertyFormat.INT32,
            PropertyFormat.INT64,
            PropertyFormat.FLOAT,
            PropertyFormat.DOUBLE,
        }
    ),
    PropertyType.BOOLEAN: frozenset({PropertyFormat.BOOLEAN}),
    # An array's format describes its items
    PropertyType.ARRAY: frozenset(PropertyFormat),
}

CONSTRAINTS_BY_TYPE: dict[PropertyType, frozenset[ConstraintGroup]] = {
    PropertyType.STRING: frozenset({ConstraintGroup.STRING, ConstraintGroup.DATE}),
    PropertyType.INTEGER: frozenset({ConstraintGroup.NUMERIC}),
    PropertyType.NUMBER: frozenset({ConstraintGroup.NUMERIC}),
    PropertyType.BOOLEAN: frozenset(),
    PropertyType.ARRAY: frozenset({ConstraintGroup.ARRAY, ConstraintGroup.OBJECT}),
}

# Date bounds only make sense when the value itself is a date
DATE_BOUND_FORMATS = frozenset({PropertyFormat.DATE, PropertyFormat.DATE_TIME})

MIN_MAX_PAIRS: tuple[tuple[str, str], ...] = (
    ("minimum", "maximum"),
    ("min_length", "max_length"),
    ("min_items", "max_items"),
    ("min_properties", "max_properties"),
)

NON_NEGATIVE_FIELDS: tuple[str, ...] = (
    "min_length",
    "max_length",
    "min_items",
    "max_items",
    "min_properties",
    "max_properties",
)

TITLE_MAX_LENGTH = 255


def allowed_constraint_fields(type_: PropertyType) -> set[str]:
    return {
        field for group in CONSTRAINTS_BY_TYPE[type_] for field in CONSTRAINT_FIELDS[group]
    }


def all_constraint_fields() -> set[str]:
    return {field for fields in CONSTRAINT_FIELDS.values() for field in fields}
