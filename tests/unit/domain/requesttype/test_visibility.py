"""Unit tests for field visibility and property projection."""

from intake.domain.requesttype.command.create_request_type import CreateRequestType
from intake.domain.requesttype.model.property import Property, PropertySpec
from intake.domain.requesttype.model.value import PropertyFormat, PropertyType, RequestTypeId
from intake.domain.requesttype.model.visibility import (
    PROPERTY_VISIBILITY,
    REQUEST_TYPE_VISIBILITY,
    Operation,
    project_properties,
    project_property,
    visible_fields,
)
from intake.domain.requesttype.query.get_request_type import RequestTypeDetail


class TestRequestTypeVisibility:
    def test_write_fields_match_create_command(self):
        assert visible_fields(REQUEST_TYPE_VISIBILITY, Operation.WRITE) == set(
            CreateRequestType.model_fields
        )

    def test_read_fields_match_detail(self):
        assert visible_fields(REQUEST_TYPE_VISIBILITY, Operation.READ) == set(
            RequestTypeDetail.model_fields
        )

    def test_extended_by_is_never_exposed(self):
        assert "extended_by" not in visible_fields(REQUEST_TYPE_VISIBILITY, Operation.READ)
        assert "extended_by" not in visible_fields(REQUEST_TYPE_VISIBILITY, Operation.WRITE)


class TestPropertyVisibility:
    def test_write_fields_match_property_spec(self):
        assert visible_fields(PROPERTY_VISIBILITY, Operation.WRITE) == set(
            PropertySpec.model_fields
        )

    def test_id_and_name_are_read_only(self):
        read = visible_fields(PROPERTY_VISIBILITY, Operation.READ)
        write = visible_fields(PROPERTY_VISIBILITY, Operation.WRITE)
        assert {"id", "name"} <= read
        assert not {"id", "name"} & write


class TestProjectProperty:
    def _make_property(self) -> Property:
        return Property.define(
            PropertySpec(
                title="Getuigen van partner",
                type=PropertyType.ARRAY,
                min_items=2,
                items=[
                    PropertySpec(
                        title="Naam getuige",
                        type=PropertyType.STRING,
                        format=PropertyFormat.STRING,
                    )
                ],
            ),
            RequestTypeId.generate(),
        )

    def test_read_hides_owner_and_unset_fields(self):
        data = project_property(self._make_property(), Operation.READ)

        assert "request_type_id" not in data
        assert "pattern" not in data
        assert data["name"] == "getuigen_van_partner"
        assert data["type"] == "array"
        assert data["min_items"] == 2

    def test_read_projects_nested_items(self):
        data = project_property(self._make_property(), Operation.READ)

        assert len(data["items"]) == 1
        item = data["items"][0]
        assert item["name"] == "naam_getuige"
        assert item["format"] == "string"
        assert "request_type_id" not in item

    def test_write_leaves_out_read_only_fields(self):
        data = project_property(self._make_property(), Operation.WRITE)

        assert "id" not in data
        assert "name" not in data
        assert PropertySpec.model_validate(data).title == "Getuigen van partner"

    def test_project_properties_keeps_order(self):
        owner = RequestTypeId.generate()
        props = [
            Property.define(PropertySpec(title=t, type=PropertyType.STRING), owner)
            for t in ("Datum", "Adress", "Wie")
        ]

        data = project_properties(props)

        assert [d["title"] for d in data] == ["Datum", "Adress", "Wie"]
