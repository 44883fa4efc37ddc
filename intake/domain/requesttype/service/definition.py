"""Definition-time validation of request types and their properties."""

import json
import re
from collections.abc import Sequence
from datetime import UTC, date, datetime
from typing import Any

from intake.domain.requesttype.model.property import PropertySpec, derive_name
from intake.domain.requesttype.model.rules import (
    DATE_BOUND_FORMATS,
    FORMATS_BY_TYPE,
    MIN_MAX_PAIRS,
    NON_NEGATIVE_FIELDS,
    TITLE_MAX_LENGTH,
    all_constraint_fields,
    allowed_constraint_fields,
)
from intake.domain.shared.error import ValidationError
from intake.domain.shared.model.value import ValueObject

_ISO_DURATION = re.compile(
    r"^P(?!$)(\d+Y)?(\d+M)?(\d+W)?(\d+D)?(T(?=\d)(\d+H)?(\d+M)?(\d+(\.\d+)?S)?)?$"
)


class RuleViolation(ValueObject):
    field: str
    message: str


def _is_set(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, list):
        return len(value) > 0
    return True


def _is_iso8601(value: str) -> bool:
    for parse in (date.fromisoformat, datetime.fromisoformat):
        try:
            parse(value)
            return True
        except ValueError:
            continue
    return _ISO_DURATION.match(value) is not None


def _as_utc(value: datetime) -> datetime:
    # Naive datetimes are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _canonical(value: Any) -> str:
    return json.dumps(value, sort_keys=True, default=str)


class DefinitionValidator:
    """Checks a request type definition against the rule tables.

    All violations are collected; ``validate`` raises a ValidationError
    describing them, pointing at the first offending field.
    """

    def validate(
        self,
        name: str,
        properties: Sequence[PropertySpec],
        available_from: datetime | None = None,
        available_until: datetime | None = None,
    ) -> None:
        violations = self.violations(name, properties, available_from, available_until)
        if violations:
            message = "; ".join(f"{v.field}: {v.message}" for v in violations)
            raise ValidationError(
                f"Invalid request type definition: {message}",
                field=violations[0].field,
            )

    def violations(
        self,
        name: str,
        properties: Sequence[PropertySpec],
        available_from: datetime | None = None,
        available_until: datetime | None = None,
    ) -> list[RuleViolation]:
        found: list[RuleViolation] = []
        if not name.strip():
            found.append(RuleViolation(field="name", message="must not be blank"))
        if (
            available_from
            and available_until
            and _as_utc(available_from) > _as_utc(available_until)
        ):
            found.append(
                RuleViolation(
                    field="available_until", message="must not be before available_from"
                )
            )
        found.extend(self._check_siblings(properties, "properties"))
        return found

    def _check_siblings(
        self, properties: Sequence[PropertySpec], path: str
    ) -> list[RuleViolation]:
        found: list[RuleViolation] = []
        seen: dict[str, int] = {}
        for i, spec in enumerate(properties):
            field = f"{path}[{i}]"
            found.extend(self._check_property(spec, field))

            key = derive_name(spec.title)
            if key in seen:
                found.append(
                    RuleViolation(
                        field=f"{field}.title",
                        message=f"duplicates the title of {path}[{seen[key]}]",
                    )
                )
            else:
                seen[key] = i
        return found

    def _check_property(self, spec: PropertySpec, path: str) -> list[RuleViolation]:
        found: list[RuleViolation] = []

        def violation(field: str, message: str) -> None:
            found.append(RuleViolation(field=f"{path}.{field}", message=message))

        title = spec.title.strip()
        if not title:
            violation("title", "must not be blank")
        elif len(title) > TITLE_MAX_LENGTH:
            violation("title", f"must be at most {TITLE_MAX_LENGTH} characters")

        if spec.format is not None and spec.format not in FORMATS_BY_TYPE[spec.type]:
            violation("format", f"'{spec.format}' is not a valid format for type '{spec.type}'")

        allowed = allowed_constraint_fields(spec.type)
        for field in sorted(all_constraint_fields() - allowed):
            if _is_set(getattr(spec, field)):
                violation(field, f"does not apply to type '{spec.type}'")

        for field in NON_NEGATIVE_FIELDS:
            value = getattr(spec, field)
            if value is not None and value < 0:
                violation(field, "must not be negative")

        if spec.multiple_of is not None and spec.multiple_of <= 0:
            violation("multiple_of", "must be greater than zero")

        for low_field, high_field in MIN_MAX_PAIRS:
            low, high = getattr(spec, low_field), getattr(spec, high_field)
            if low is not None and high is not None and low > high:
                violation(high_field, f"must not be less than {low_field}")

        if (
            spec.minimum is not None
            and spec.minimum == spec.maximum
            and (spec.exclusive_minimum or spec.exclusive_maximum)
        ):
            violation("maximum", "exclusive bounds leave no valid values")

        if spec.pattern is not None:
            try:
                re.compile(spec.pattern)
            except re.error as e:
                violation("pattern", f"is not a valid regular expression: {e}")

        for field in ("min_date", "max_date"):
            value = getattr(spec, field)
            if value is None or field not in allowed:
                continue
            if spec.format not in DATE_BOUND_FORMATS:
                violation(field, "requires format 'date' or 'date-time'")
            elif not _is_iso8601(value):
                violation(field, "must be an ISO 8601 date, date-time or duration")

        if spec.enum is not None:
            if not spec.enum:
                violation("enum", "must not be empty")
            elif len({_canonical(v) for v in spec.enum}) != len(spec.enum):
                violation("enum", "must not contain duplicate values")
            elif spec.default is not None and _canonical(spec.default) not in {
                _canonical(v) for v in spec.enum
            }:
                violation("default", "must be one of the enum values")

        if spec.read_only and spec.write_only:
            violation("write_only", "cannot be combined with read_only")

        if spec.items:
            found.extend(self._check_siblings(spec.items, f"{path}.items"))

        return found
