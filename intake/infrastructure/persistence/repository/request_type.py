from typing import Any, List
from uuid import UUID

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from intake.domain.requesttype.model.property import Property
from intake.domain.requesttype.model.request_type import RequestType
from intake.domain.requesttype.model.value import RequestTypeId
from intake.domain.requesttype.port.repository import RequestTypeRepository
from intake.infrastructure.persistence.tables import request_types_table


def _property_to_json(prop: Property) -> dict[str, Any]:
    # The derived name is recomputed on load, never stored
    data = prop.model_dump(mode="json", exclude={"name", "items"})
    data["items"] = [_property_to_json(item) for item in prop.items]
    return data


def _request_type_to_row(request_type: RequestType) -> dict[str, Any]:
    return {
        "id": str(request_type.id),
        "source_organization": request_type.source_organization,
        "name": request_type.name,
        "description": request_type.description,
        "properties": [_property_to_json(p) for p in request_type.properties],
        "extends_id": str(request_type.extends) if request_type.extends else None,
        "available_from": request_type.available_from,
        "available_until": request_type.available_until,
        "created_at": request_type.created_at,
        "updated_at": request_type.updated_at,
    }


def _row_to_request_type(row: dict[str, Any]) -> RequestType:
    extends_id = row["extends_id"]
    return RequestType(
        id=RequestTypeId(UUID(row["id"])),
        source_organization=row["source_organization"],
        name=row["name"],
        description=row["description"],
        properties=[Property.model_validate(p) for p in row["properties"]],
        extends=RequestTypeId(UUID(extends_id)) if extends_id else None,
        available_from=row["available_from"],
        available_until=row["available_until"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class SQLAlchemyRequestTypeRepository(RequestTypeRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, request_type: RequestType) -> None:
        row = _request_type_to_row(request_type)
        if await self.exists(request_type.id):
            stmt = (
                update(request_types_table)
                .where(request_types_table.c.id == row["id"])
                .values(**row)
            )
        else:
            stmt = insert(request_types_table).values(**row)
        await self.session.execute(stmt)
        await self.session.flush()

    async def get(self, id: RequestTypeId) -> RequestType | None:
        stmt = select(request_types_table).where(request_types_table.c.id == str(id))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return _row_to_request_type(dict(row)) if row else None

    async def list(
        self,
        *,
        source_organization: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> List[RequestType]:
        stmt = select(request_types_table).order_by(request_types_table.c.created_at.desc())
        if source_organization is not None:
            stmt = stmt.where(request_types_table.c.source_organization == source_organization)
        if offset is not None:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.session.execute(stmt)
        return [_row_to_request_type(dict(r)) for r in result.mappings().all()]

    async def list_extending(self, id: RequestTypeId) -> List[RequestType]:
        stmt = (
            select(request_types_table)
            .where(request_types_table.c.extends_id == str(id))
            .order_by(request_types_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [_row_to_request_type(dict(r)) for r in result.mappings().all()]

    async def exists(self, id: RequestTypeId) -> bool:
        stmt = select(request_types_table.c.id).where(request_types_table.c.id == str(id))
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def delete(self, id: RequestTypeId) -> None:
        await self.session.execute(
            delete(request_types_table).where(request_types_table.c.id == str(id))
        )
        await self.session.flush()
