"""Owner-scoped CRUD shared by the resource services."""

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

import structlog
from sqlalchemy import Select, delete, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from applytrack.exceptions import NotFound
from applytrack.models.base import Base
from applytrack.models.user import User
from applytrack.validation import parse_id, resolve_pagination

logger = structlog.get_logger()

ModelT = TypeVar("ModelT", bound=Base)


@dataclass
class ListParams:
    """Pagination, search and ordering for a list call."""

    limit: int | None = None
    offset: int | None = None
    search: str | None = None
    sort: str | None = None
    order: str | None = None


class OwnedResourceService(Generic[ModelT]):
    """CRUD over a table whose rows belong to exactly one user.

    Every query and every mutating statement is filtered by ``user_id``, so a
    row owned by someone else behaves exactly like a missing row.
    """

    model: ClassVar[type[Base]]
    entity_name: ClassVar[str] = "Record"
    search_columns: ClassVar[tuple[InstrumentedAttribute, ...]] = ()
    sort_columns: ClassVar[dict[str, InstrumentedAttribute]] = {}

    def __init__(self, db: AsyncSession):
        self.db = db

    def _owned(self, user: User) -> Select:
        return select(self.model).where(self.model.user_id == user.id)

    def _not_found(self) -> NotFound:
        return NotFound(f"{self.entity_name} not found")

    async def get(self, user: User, record_id: Any) -> ModelT:
        """Get one of the user's records by id."""
        record_id = parse_id(record_id)
        result = await self.db.execute(
            self._owned(user).where(self.model.id == record_id)
        )
        record = result.scalar_one_or_none()
        if record is None:
            raise self._not_found()
        return record

    async def list_records(
        self, user: User, params: ListParams, *filters
    ) -> list[ModelT]:
        """List the user's records with search, filters, ordering and paging."""
        limit, offset = resolve_pagination(params.limit, params.offset)

        query = self._owned(user)
        if params.search and self.search_columns:
            query = query.where(
                or_(
                    *(
                        column.icontains(params.search, autoescape=True)
                        for column in self.search_columns
                    )
                )
            )
        if filters:
            query = query.where(*filters)

        query = query.order_by(*self._ordering(params.sort, params.order))
        query = query.offset(offset).limit(limit)

        result = await self.db.execute(query)
        return list(result.scalars().all())

    def _ordering(self, sort: str | None, order: str | None) -> list:
        column = self.sort_columns.get(sort or "", self.model.created_at)
        primary = column.asc() if order == "asc" else column.desc()
        # Equal sort values fall back to insertion order.
        return [primary, self.model.id.asc()]

    async def _apply_changes(
        self, user: User, record: ModelT, changes: dict[str, Any]
    ) -> ModelT:
        """Persist ``changes`` on an owned record and reload it."""
        if not changes:
            return record

        result = await self.db.execute(
            update(self.model)
            .where(self.model.id == record.id, self.model.user_id == user.id)
            .values(**changes)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise self._not_found()

        await self.db.refresh(record)
        logger.info(
            "record_updated",
            entity=self.entity_name,
            record_id=record.id,
            user_id=user.id,
            fields=sorted(changes),
        )
        return record

    async def delete(self, user: User, record_id: Any) -> ModelT:
        """Delete an owned record and return its former state."""
        record = await self.get(user, record_id)
        await self._delete_owned(user, record)
        return record

    async def _delete_owned(self, user: User, record: ModelT) -> None:
        result = await self.db.execute(
            delete(self.model)
            .where(self.model.id == record.id, self.model.user_id == user.id)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise self._not_found()

        # Detach so the returned snapshot keeps its loaded attributes.
        self.db.expunge(record)
        logger.info(
            "record_deleted",
            entity=self.entity_name,
            record_id=record.id,
            user_id=user.id,
        )
