"""Unit tests for the RequestType aggregate."""

from datetime import UTC, datetime

import pytest

from intake.domain.requesttype.model.property import Property, PropertySpec
from intake.domain.requesttype.model.request_type import RequestType
from intake.domain.requesttype.model.value import PropertyType, RequestTypeId
from intake.domain.shared.error import ValidationError


def _make_property(title: str, owner: RequestTypeId) -> Property:
    return Property.define(PropertySpec(title=title, type=PropertyType.STRING), owner)


def _make_request_type(id: RequestTypeId, properties: list[Property]) -> RequestType:
    now = datetime.now(UTC)
    return RequestType(
        id=id,
        source_organization="0000",
        name="Verhuizen",
        description="Het doorgeven van een verhuizing aan een gemeente",
        properties=properties,
        created_at=now,
        updated_at=now,
    )


class TestRequestTypeCreation:
    def test_create_with_owned_properties(self):
        id = RequestTypeId.generate()
        request_type = _make_request_type(
            id, [_make_property("Datum", id), _make_property("Adress", id)]
        )
        assert [p.title for p in request_type.properties] == ["Datum", "Adress"]
        assert request_type.extends is None

    def test_create_without_properties(self):
        request_type = _make_request_type(RequestTypeId.generate(), [])
        assert request_type.properties == []

    def test_extends_is_a_forward_reference(self):
        parent_id = RequestTypeId.generate()
        request_type = _make_request_type(RequestTypeId.generate(), [])
        request_type.extends = parent_id
        assert request_type.extends == parent_id


class TestRequestTypeInvariants:
    def test_rejects_property_owned_by_other_request_type(self):
        id = RequestTypeId.generate()
        foreign = _make_property("Datum", RequestTypeId.generate())
        with pytest.raises(ValidationError, match="owned by request type"):
            _make_request_type(id, [foreign])

    def test_rejects_duplicate_titles(self):
        id = RequestTypeId.generate()
        with pytest.raises(ValidationError, match="Duplicate property titles"):
            _make_request_type(id, [_make_property("Datum", id), _make_property("Datum", id)])

    def test_rejects_titles_deriving_same_name(self):
        id = RequestTypeId.generate()
        with pytest.raises(ValidationError, match="duplicate names"):
            _make_request_type(
                id, [_make_property("Doorgeven gegevens", id), _make_property("doorgeven  Gegevens", id)]
            )


class TestRequestTypeAssignment:
    def test_assigning_duplicate_titles_is_rejected(self):
        id = RequestTypeId.generate()
        request_type = _make_request_type(id, [_make_property("Datum", id)])

        with pytest.raises(ValidationError, match="Duplicate property titles"):
            request_type.properties = [_make_property("Datum", id), _make_property("Datum", id)]

    def test_assigning_foreign_property_is_rejected(self):
        id = RequestTypeId.generate()
        request_type = _make_request_type(id, [])

        with pytest.raises(ValidationError, match="owned by request type"):
            request_type.properties = [_make_property("Datum", RequestTypeId.generate())]

    def test_assigning_valid_properties_is_accepted(self):
        id = RequestTypeId.generate()
        request_type = _make_request_type(id, [])

        request_type.properties = [_make_property("Datum", id), _make_property("Wie", id)]

        assert [p.title for p in request_type.properties] == ["Datum", "Wie"]
