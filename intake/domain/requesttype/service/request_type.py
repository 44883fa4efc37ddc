import logging
from datetime import UTC, datetime

from intake.domain.requesttype.model.effective import EffectivePropertySet
from intake.domain.requesttype.model.property import Property, PropertySpec
from intake.domain.requesttype.model.request_type import RequestType
from intake.domain.requesttype.model.value import RequestTypeId
from intake.domain.requesttype.port.repository import RequestTypeRepository
from intake.domain.requesttype.service.definition import DefinitionValidator
from intake.domain.requesttype.service.resolver import ExtensionResolver, MappingAncestorLookup
from intake.domain.shared.error import ConflictError, NotFoundError, ValidationError
from intake.domain.shared.service import Service

logger = logging.getLogger(__name__)


class RequestTypeService(Service):
    request_type_repo: RequestTypeRepository
    resolver: ExtensionResolver
    validator: DefinitionValidator

    async def create_request_type(
        self,
        source_organization: str,
        name: str,
        properties: list[PropertySpec],
        description: str | None = None,
        extends: RequestTypeId | None = None,
        available_from: datetime | None = None,
        available_until: datetime | None = None,
    ) -> RequestType:
        self.validator.validate(name, properties, available_from, available_until)
        await self._check_extends(extends)

        id = RequestTypeId.generate()
        now = datetime.now(UTC)
        request_type = RequestType(
            id=id,
            source_organization=source_organization,
            name=name,
            description=description,
            properties=[Property.define(spec, id) for spec in properties],
            extends=extends,
            available_from=available_from,
            available_until=available_until,
            created_at=now,
            updated_at=now,
        )
        await self.request_type_repo.save(request_type)
        logger.info(
            "Request type created: id=%s, name=%s, extends=%s",
            request_type.id,
            request_type.name,
            request_type.extends,
        )
        return request_type

    async def update_request_type(
        self,
        id: RequestTypeId,
        source_organization: str,
        name: str,
        properties: list[PropertySpec],
        description: str | None = None,
        extends: RequestTypeId | None = None,
        available_from: datetime | None = None,
        available_until: datetime | None = None,
    ) -> RequestType:
        """Replace the definition of an existing request type.

        Properties keep their id when a property with the same title existed
        before. Cycles introduced through ``extends`` are not rejected here;
        they surface when the request type is resolved.
        """
        existing = await self.get_request_type(id)
        self.validator.validate(name, properties, available_from, available_until)
        await self._check_extends(extends)

        kept_ids = {p.title: p.id for p in existing.properties}
        request_type = RequestType(
            id=existing.id,
            source_organization=source_organization,
            name=name,
            description=description,
            properties=[
                Property.define(spec, existing.id, id=kept_ids.get(spec.title))
                for spec in properties
            ],
            extends=extends,
            available_from=available_from,
            available_until=available_until,
            created_at=existing.created_at,
            updated_at=datetime.now(UTC),
        )
        await self.request_type_repo.save(request_type)
        logger.info("Request type updated: id=%s, extends=%s", request_type.id, extends)
        return request_type

    async def delete_request_type(self, id: RequestTypeId) -> None:
        await self.get_request_type(id)
        # A request type extending itself does not keep itself alive
        extending = [rt for rt in await self.request_type_repo.list_extending(id) if rt.id != id]
        if extending:
            raise ConflictError(
                f"Request type {id} is extended by {len(extending)} request type(s) "
                f"and cannot be deleted"
            )
        await self.request_type_repo.delete(id)
        logger.info("Request type deleted: id=%s", id)

    async def get_request_type(self, id: RequestTypeId) -> RequestType:
        request_type = await self.request_type_repo.get(id)
        if request_type is None:
            raise NotFoundError(f"Request type not found: {id}")
        return request_type

    async def list_request_types(
        self,
        *,
        source_organization: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[RequestType]:
        return await self.request_type_repo.list(
            source_organization=source_organization, limit=limit, offset=offset
        )

    async def list_extended_by(self, id: RequestTypeId) -> list[RequestType]:
        await self.get_request_type(id)
        return await self.request_type_repo.list_extending(id)

    async def resolve_properties(self, request_type: RequestType) -> EffectivePropertySet:
        """Compute the effective property set of ``request_type``.

        The ancestry is loaded before resolution starts, so the resolver
        itself never waits on storage.
        """
        ancestry = await self._load_ancestry(request_type)
        return self.resolver.resolve(request_type, MappingAncestorLookup(ancestry))

    async def _load_ancestry(self, request_type: RequestType) -> dict[RequestTypeId, RequestType]:
        # One ancestor beyond max_depth is loaded so the resolver can tell a
        # cycle at the boundary from a chain that is merely too deep.
        max_depth = self.resolver.max_depth
        limit = None if max_depth is None else max_depth + 1

        loaded = {request_type.id: request_type}
        current = request_type
        while current.extends is not None and current.extends not in loaded:
            if limit is not None and len(loaded) - 1 >= limit:
                break
            parent = await self.request_type_repo.get(current.extends)
            if parent is None:
                break
            loaded[parent.id] = parent
            current = parent
        return loaded

    async def _check_extends(self, extends: RequestTypeId | None) -> None:
        if extends is None:
            return
        if not await self.request_type_repo.exists(extends):
            raise ValidationError(
                f"Request type '{extends}' not found (referenced by extends)",
                field="extends",
            )
