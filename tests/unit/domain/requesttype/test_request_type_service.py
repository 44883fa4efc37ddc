"""Unit tests for RequestTypeService."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from intake.domain.requesttype.model.property import Property, PropertySpec
from intake.domain.requesttype.model.request_type import RequestType
from intake.domain.requesttype.model.value import PropertyType, RequestTypeId
from intake.domain.requesttype.service.definition import DefinitionValidator
from intake.domain.requesttype.service.request_type import RequestTypeService
from intake.domain.requesttype.service.resolver import ExtensionResolver
from intake.domain.shared.error import (
    ConflictError,
    CycleDetectedError,
    ExtensionDepthExceededError,
    NotFoundError,
    ValidationError,
)


def _make_spec(title: str) -> PropertySpec:
    return PropertySpec(title=title, type=PropertyType.STRING)


def _make_request_type(
    name: str,
    titles: list[str],
    extends: RequestTypeId | None = None,
    id: RequestTypeId | None = None,
) -> RequestType:
    id = id or RequestTypeId.generate()
    now = datetime.now(UTC)
    return RequestType(
        id=id,
        source_organization="0000",
        name=name,
        properties=[Property.define(_make_spec(t), id) for t in titles],
        extends=extends,
        created_at=now,
        updated_at=now,
    )


def _make_repo(*request_types: RequestType) -> AsyncMock:
    """AsyncMock repository backed by a dict."""
    store = {rt.id: rt for rt in request_types}
    repo = AsyncMock()

    async def save(request_type: RequestType) -> None:
        store[request_type.id] = request_type

    async def get(id: RequestTypeId) -> RequestType | None:
        return store.get(id)

    async def exists(id: RequestTypeId) -> bool:
        return id in store

    async def list_extending(id: RequestTypeId) -> list[RequestType]:
        return [rt for rt in store.values() if rt.extends == id]

    repo.save.side_effect = save
    repo.get.side_effect = get
    repo.exists.side_effect = exists
    repo.list_extending.side_effect = list_extending
    return repo


def _make_service(repo: AsyncMock, max_depth: int | None = 32) -> RequestTypeService:
    return RequestTypeService(
        request_type_repo=repo,
        resolver=ExtensionResolver(max_depth=max_depth),
        validator=DefinitionValidator(),
    )


class TestRequestTypeServiceCreate:
    @pytest.mark.asyncio
    async def test_create_request_type(self):
        repo = _make_repo()
        service = _make_service(repo)

        result = await service.create_request_type(
            source_organization="0000",
            name="Verhuizen",
            properties=[_make_spec("Datum"), _make_spec("Adress")],
        )

        assert result.name == "Verhuizen"
        assert [p.name for p in result.properties] == ["datum", "adress"]
        assert all(p.request_type_id == result.id for p in result.properties)
        repo.save.assert_called_once_with(result)

    @pytest.mark.asyncio
    async def test_create_with_existing_parent(self):
        parent = _make_request_type("Verhuizen", ["Datum"])
        repo = _make_repo(parent)
        service = _make_service(repo)

        result = await service.create_request_type(
            source_organization="0000",
            name="Verhuizen kind",
            properties=[_make_spec("Wie")],
            extends=parent.id,
        )

        assert result.extends == parent.id

    @pytest.mark.asyncio
    async def test_create_with_unknown_parent_raises(self):
        repo = _make_repo()
        service = _make_service(repo)

        with pytest.raises(ValidationError) as exc_info:
            await service.create_request_type(
                source_organization="0000",
                name="Wees",
                properties=[],
                extends=RequestTypeId.generate(),
            )

        assert exc_info.value.field == "extends"
        repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_with_invalid_definition_raises(self):
        repo = _make_repo()
        service = _make_service(repo)

        with pytest.raises(ValidationError):
            await service.create_request_type(
                source_organization="0000",
                name="Verhuizen",
                properties=[_make_spec("Datum"), _make_spec("datum")],
            )

        repo.save.assert_not_called()


class TestRequestTypeServiceUpdate:
    @pytest.mark.asyncio
    async def test_update_keeps_ids_of_unchanged_titles(self):
        existing = _make_request_type("Verhuizen", ["Datum", "Adress"])
        datum_id = existing.properties[0].id
        repo = _make_repo(existing)
        service = _make_service(repo)

        result = await service.update_request_type(
            id=existing.id,
            source_organization="0000",
            name="Verhuizen",
            properties=[_make_spec("Datum"), _make_spec("Wie")],
        )

        assert result.properties[0].id == datum_id
        assert result.properties[1].title == "Wie"
        assert result.created_at == existing.created_at
        assert result.updated_at >= existing.updated_at

    @pytest.mark.asyncio
    async def test_update_unknown_raises_not_found(self):
        service = _make_service(_make_repo())

        with pytest.raises(NotFoundError):
            await service.update_request_type(
                id=RequestTypeId.generate(),
                source_organization="0000",
                name="Verhuizen",
                properties=[],
            )

    @pytest.mark.asyncio
    async def test_update_may_introduce_cycle_detected_on_resolve(self):
        parent = _make_request_type("Verhuizen", ["Datum"])
        child = _make_request_type("Verhuizen kind", ["Wie"], extends=parent.id)
        repo = _make_repo(parent, child)
        service = _make_service(repo)

        updated = await service.update_request_type(
            id=parent.id,
            source_organization="0000",
            name="Verhuizen",
            properties=[_make_spec("Datum")],
            extends=child.id,
        )

        with pytest.raises(CycleDetectedError):
            await service.resolve_properties(updated)


class TestRequestTypeServiceDelete:
    @pytest.mark.asyncio
    async def test_delete_request_type(self):
        rt = _make_request_type("Verhuizen", ["Datum"])
        repo = _make_repo(rt)
        service = _make_service(repo)

        await service.delete_request_type(rt.id)

        repo.delete.assert_called_once_with(rt.id)

    @pytest.mark.asyncio
    async def test_delete_extended_request_type_raises_conflict(self):
        parent = _make_request_type("Verhuizen", ["Datum"])
        child = _make_request_type("Verhuizen kind", [], extends=parent.id)
        repo = _make_repo(parent, child)
        service = _make_service(repo)

        with pytest.raises(ConflictError):
            await service.delete_request_type(parent.id)

        repo.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_self_extending_request_type(self):
        id = RequestTypeId.generate()
        rt = _make_request_type("Zelf", ["Datum"], extends=id, id=id)
        repo = _make_repo(rt)
        service = _make_service(repo)

        await service.delete_request_type(id)

        repo.delete.assert_called_once_with(id)

    @pytest.mark.asyncio
    async def test_delete_self_extending_request_type_with_children_raises(self):
        id = RequestTypeId.generate()
        rt = _make_request_type("Zelf", ["Datum"], extends=id, id=id)
        child = _make_request_type("Kind", [], extends=id)
        repo = _make_repo(rt, child)
        service = _make_service(repo)

        with pytest.raises(ConflictError, match="extended by 1 request type"):
            await service.delete_request_type(id)


class TestRequestTypeServiceQueries:
    @pytest.mark.asyncio
    async def test_get_unknown_raises_not_found(self):
        service = _make_service(_make_repo())

        with pytest.raises(NotFoundError):
            await service.get_request_type(RequestTypeId.generate())

    @pytest.mark.asyncio
    async def test_list_passes_filters(self):
        repo = _make_repo()
        repo.list.return_value = []
        service = _make_service(repo)

        await service.list_request_types(source_organization="0000", limit=10, offset=5)

        repo.list.assert_called_once_with(source_organization="0000", limit=10, offset=5)

    @pytest.mark.asyncio
    async def test_list_extended_by(self):
        parent = _make_request_type("Verhuizen", ["Datum"])
        child = _make_request_type("Verhuizen kind", [], extends=parent.id)
        other = _make_request_type("Trouwen", [])
        service = _make_service(_make_repo(parent, child, other))

        result = await service.list_extended_by(parent.id)

        assert [rt.id for rt in result] == [child.id]


class TestRequestTypeServiceResolve:
    @pytest.mark.asyncio
    async def test_resolves_over_stored_chain(self):
        grandparent = _make_request_type("Basis", ["Datum"])
        parent = _make_request_type("Verhuizen", ["Adress"], extends=grandparent.id)
        child = _make_request_type("Verhuizen kind", ["Wie"], extends=parent.id)
        service = _make_service(_make_repo(grandparent, parent, child))

        result = await service.resolve_properties(child)

        assert result.titles == ["Wie", "Adress", "Datum"]

    @pytest.mark.asyncio
    async def test_missing_parent_raises_not_found(self):
        child = _make_request_type("Wees", ["Datum"], extends=RequestTypeId.generate())
        service = _make_service(_make_repo(child))

        with pytest.raises(NotFoundError):
            await service.resolve_properties(child)

    @pytest.mark.asyncio
    async def test_loads_at_most_one_ancestor_beyond_max_depth(self):
        chain = [_make_request_type("T0", ["P0"])]
        for i in range(1, 10):
            chain.append(_make_request_type(f"T{i}", [f"P{i}"], extends=chain[-1].id))
        repo = _make_repo(*chain)
        service = _make_service(repo, max_depth=2)

        with pytest.raises(ExtensionDepthExceededError):
            await service.resolve_properties(chain[-1])

        assert repo.get.await_count == 3

    @pytest.mark.asyncio
    async def test_cycle_at_depth_boundary_is_reported_as_cycle(self):
        a_id, b_id = RequestTypeId.generate(), RequestTypeId.generate()
        a = _make_request_type("A", [], extends=b_id, id=a_id)
        b = _make_request_type("B", [], extends=a_id, id=b_id)
        service = _make_service(_make_repo(a, b), max_depth=1)

        with pytest.raises(CycleDetectedError):
            await service.resolve_properties(a)
