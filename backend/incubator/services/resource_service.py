"""
Incubator Backend — Generic Resource Service
==============================================

What:  One CRUD + list + stats implementation shared by every resource.
Why:   All resources behave the same way apart from their schemas, their
       searchable/filterable fields and a few write rules. Those differences
       live in a `ResourceConfig`; the behaviour lives here once.
How:   `ResourceService(config, database)` opens its own sessions from the
       injected `Database` handle. Subclasses adjust writes through the
       `before_create` / `before_update` hooks and add stats via `extra_stats`.

List contract:
    filter = scope AND public filter AND categorical filters AND date range
             AND (search over field₁ OR field₂ OR …)
    count(filter) and the sorted page window run concurrently, each on its
    own session, so totals and page can differ briefly under concurrent
    writes. Sorting breaks ties on `id`.

Publishing:
    For publishable resources `published_at` is stamped when a document is
    created as published, or first moves into published. It is never cleared
    and never rewritten while the document stays published.
"""

import asyncio
import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Type

from pydantic import BaseModel
from pydantic.alias_generators import to_camel, to_snake
from sqlalchemy import String, and_, case, cast, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.types import JSON

from incubator.database import Database, utcnow
from incubator.exceptions import ConflictError, NotFoundError
from incubator.models.user import User
from incubator.schemas.common import Page, Pagination
from incubator.schemas.user import UserRead

logger = logging.getLogger(__name__)


def stat_key(value: str) -> str:
    """Enum value → stats key ("in-progress" → "inProgress")."""
    return to_camel(value.replace("-", "_"))


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so search terms match literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


# Audit columns holding a user id; admin reads expand them to {id, name, email}
REFERENCE_FIELDS = ("created_by", "updated_by", "responded_by")


async def load_people(session: AsyncSession, rows: Sequence[Any]) -> Dict[uuid.UUID, Any]:
    """Users referenced by the audit columns of `rows`, keyed by id."""
    ids = set()
    for row in rows:
        for name in REFERENCE_FIELDS:
            value = getattr(row, name, None)
            if value is not None:
                ids.add(value)
    if not ids:
        return {}
    result = await session.execute(select(User).where(User.id.in_(ids)))
    return {user.id: user for user in result.scalars()}


@dataclass
class StatsSpec:
    """
    Aggregate definition for a resource's stats endpoint.

    Attributes:
        status_field:  enum column counted per value, one key per value
        status_values: the enum members of status_field
        counters:      key → (column, value) conditional counts, e.g.
                       {"active": ("is_active", True)}
        distributions: key → column grouped by value, count descending
        recent_order:  column the "recent" sample is ordered by (newest first)
        recent_limit:  size of the "recent" sample; 0 disables it
    """

    status_field: Optional[str] = None
    status_values: Sequence[str] = ()
    counters: Mapping[str, Tuple[str, Any]] = field(default_factory=dict)
    distributions: Mapping[str, str] = field(default_factory=dict)
    recent_order: str = "created_at"
    recent_limit: int = 5


@dataclass
class ResourceConfig:
    """Everything that distinguishes one resource from another."""

    name: str
    label: str
    model: Type[Any]
    create_schema: Type[BaseModel]
    read_schema: Type[BaseModel]
    query_schema: Type[BaseModel]
    update_schema: Optional[Type[BaseModel]] = None
    public_schema: Optional[Type[BaseModel]] = None
    public_query_schema: Optional[Type[BaseModel]] = None
    public_filter: Mapping[str, Any] = field(default_factory=dict)
    public_search_fields: Optional[Sequence[str]] = None
    public_create: bool = False
    receipt_schema: Optional[Type[BaseModel]] = None
    created_message: Optional[str] = None
    search_fields: Sequence[str] = ()
    filter_fields: Sequence[str] = ()
    date_field: str = "created_at"
    publishable: bool = False
    unique_fields: Mapping[str, str] = field(default_factory=dict)
    stats: Optional[StatsSpec] = None
    # column → allowed values, applied to every read
    scope: Mapping[str, Sequence[Any]] = field(default_factory=dict)

    @property
    def path(self) -> str:
        return f"/{self.name}"


class ResourceService:
    """
    CRUD, listing and statistics for one resource.

    Error Handling Strategy:
        Missing rows raise NotFoundError("<Label> not found"). Duplicate unique
        values are pre-checked and raise ConflictError with the configured
        message; an IntegrityError from a concurrent duplicate is converted to
        the same ConflictError. Other store failures surface as DatabaseError
        from the session context.
    """

    def __init__(self, config: ResourceConfig, database: Database):
        self.config = config
        self.database = database
        self.model = config.model

    # ══════════════════════════════════════════════════════════════════════
    # Hooks
    # ══════════════════════════════════════════════════════════════════════

    def before_create(self, values: Dict[str, Any], actor: Optional[UserRead]) -> Dict[str, Any]:
        return values

    def before_update(
        self, obj: Any, changes: Dict[str, Any], actor: Optional[UserRead]
    ) -> Dict[str, Any]:
        return changes

    async def extra_stats(self) -> Dict[str, Any]:
        return {}

    # ══════════════════════════════════════════════════════════════════════
    # Writes
    # ══════════════════════════════════════════════════════════════════════

    async def create(
        self,
        payload: BaseModel,
        actor: Optional[UserRead] = None,
        schema: Optional[Type[BaseModel]] = None,
    ) -> BaseModel:
        values = self.before_create(payload.model_dump(), actor)
        if self.config.publishable and values.get("status") == "published":
            values["published_at"] = utcnow()
        if actor is not None:
            values["created_by"] = actor.id
            values["updated_by"] = actor.id

        async with self.database.session() as session:
            await self._check_unique(session, values)
            obj = self.model(**values)
            session.add(obj)
            await self._flush(session, obj)
            people = await load_people(session, [obj])

        logger.info(
            "%s created: %s (by %s)", self.config.label, obj.id, actor.id if actor else "public"
        )
        return self._read(obj, people, schema)

    async def update(
        self,
        item_id: uuid.UUID,
        payload: BaseModel,
        actor: Optional[UserRead] = None,
    ) -> BaseModel:
        async with self.database.session() as session:
            obj = await self._get_or_404(session, item_id)
            changes = self.before_update(obj, payload.model_dump(exclude_unset=True), actor)
            await self._check_unique(session, changes, exclude_id=obj.id)
            if (
                self.config.publishable
                and changes.get("status") == "published"
                and obj.published_at is None
            ):
                changes["published_at"] = utcnow()
            self._apply(obj, changes, actor)
            await self._flush(session, obj)
            people = await load_people(session, [obj])

        logger.info("%s updated: %s fields=%s", self.config.label, item_id, sorted(changes))
        return self._read(obj, people)

    async def set_active(
        self,
        item_id: uuid.UUID,
        is_active: bool,
        actor: Optional[UserRead] = None,
    ) -> BaseModel:
        """Activate or deactivate (soft visibility toggle)."""
        async with self.database.session() as session:
            obj = await self._get_or_404(session, item_id)
            self._apply(obj, {"is_active": is_active}, actor)
            await self._flush(session, obj)
            people = await load_people(session, [obj])

        logger.info("%s %s: %s", self.config.label, "activated" if is_active else "deactivated", item_id)
        return self._read(obj, people)

    async def delete(self, item_id: uuid.UUID, actor: Optional[UserRead] = None) -> None:
        """Remove the row outright; there is no tombstone."""
        async with self.database.session() as session:
            obj = await self._get_or_404(session, item_id)
            await session.delete(obj)
        logger.info("%s deleted: %s (by %s)", self.config.label, item_id, actor.id if actor else "-")

    # ══════════════════════════════════════════════════════════════════════
    # Reads
    # ══════════════════════════════════════════════════════════════════════

    async def get(self, item_id: uuid.UUID) -> BaseModel:
        async with self.database.session() as session:
            obj = await self._get_or_404(session, item_id)
            people = await load_people(session, [obj])
        return self._read(obj, people)

    async def list(self, query: BaseModel) -> Page:
        return await self._page(
            query, self._conditions(query), self.config.read_schema
        )

    async def public_list(self, query: BaseModel) -> Page:
        conditions = self._conditions(
            query,
            public=True,
            search_fields=self.config.public_search_fields,
        )
        return await self._page(query, conditions, self.config.public_schema)

    async def stats(self) -> Dict[str, Any]:
        """
        Totals, per-status counts, counters, distributions and a recent sample.

        Totals, per-status counts and counters come from one aggregate query;
        each distribution is one GROUP BY; nothing is cached.
        """
        spec = self.config.stats or StatsSpec()
        model = self.model
        scope = self._scope_conditions()

        keys: List[str] = ["total"]
        columns = [func.count(model.id)]
        if spec.status_field:
            status_col = getattr(model, spec.status_field)
            for value in spec.status_values:
                keys.append(stat_key(value))
                columns.append(func.sum(case((status_col == value, 1), else_=0)))
        for key, (column, value) in spec.counters.items():
            keys.append(key)
            columns.append(func.sum(case((getattr(model, column) == value, 1), else_=0)))

        async def totals() -> Dict[str, int]:
            async with self.database.session() as session:
                row = (await session.execute(select(*columns).where(*scope))).one()
            return {key: int(count or 0) for key, count in zip(keys, row)}

        async def distribution(column: str) -> List[Dict[str, Any]]:
            col = getattr(model, column)
            count = func.count(model.id).label("count")
            stmt = (
                select(col, count)
                .where(*scope)
                .group_by(col)
                .order_by(count.desc(), col.asc())
            )
            async with self.database.session() as session:
                rows = (await session.execute(stmt)).all()
            return [{"value": value, "count": int(n)} for value, n in rows]

        async def recent() -> List[Dict[str, Any]]:
            stmt = (
                select(model)
                .where(*scope)
                .order_by(getattr(model, spec.recent_order).desc(), model.id.desc())
                .limit(spec.recent_limit)
            )
            async with self.database.session() as session:
                rows = (await session.execute(stmt)).scalars().all()
                people = await load_people(session, rows)
            return [self.dump(row, people=people) for row in rows]

        names = list(spec.distributions)
        results = await asyncio.gather(
            totals(),
            recent() if spec.recent_limit else _nothing(),
            *(distribution(spec.distributions[name]) for name in names),
        )
        data: Dict[str, Any] = dict(results[0])
        if spec.recent_limit:
            data["recent"] = results[1]
        data.update(zip(names, results[2:]))
        data.update(await self.extra_stats())
        return data

    def dump(
        self,
        obj: Any,
        schema: Optional[Type[BaseModel]] = None,
        people: Optional[Mapping[uuid.UUID, Any]] = None,
    ) -> Dict[str, Any]:
        """ORM row → JSON-ready dict with wire (camelCase) keys."""
        return self._read(obj, people, schema).model_dump(mode="json", by_alias=True)

    # ══════════════════════════════════════════════════════════════════════
    # Internals
    # ══════════════════════════════════════════════════════════════════════

    def _read(
        self,
        obj: Any,
        people: Optional[Mapping[uuid.UUID, Any]] = None,
        schema: Optional[Type[BaseModel]] = None,
    ) -> BaseModel:
        return (schema or self.config.read_schema).model_validate(
            obj, context={"people": people or {}}
        )

    async def _page(
        self,
        query: BaseModel,
        conditions: List[Any],
        schema: Type[BaseModel],
    ) -> Page:
        model = self.model
        page, limit = query.page, query.limit
        sort_col = getattr(model, to_snake(query.sort_by))
        if query.sort_order == "asc":
            order = (sort_col.asc(), model.id.asc())
        else:
            order = (sort_col.desc(), model.id.desc())

        async def count() -> int:
            async with self.database.session() as session:
                stmt = select(func.count(model.id)).where(*conditions)
                return (await session.execute(stmt)).scalar_one()

        async def fetch() -> Tuple[List[Any], Dict[uuid.UUID, Any]]:
            stmt = (
                select(model)
                .where(*conditions)
                .order_by(*order)
                .offset((page - 1) * limit)
                .limit(limit)
            )
            async with self.database.session() as session:
                rows = list((await session.execute(stmt)).scalars().all())
                return rows, await load_people(session, rows)

        total, (rows, people) = await asyncio.gather(count(), fetch())
        return Page[schema](
            items=[self._read(row, people, schema) for row in rows],
            pagination=Pagination.build(page, limit, total),
        )

    def _scope_conditions(self) -> List[Any]:
        return [
            getattr(self.model, column).in_(list(values))
            for column, values in self.config.scope.items()
        ]

    def _conditions(
        self,
        query: BaseModel,
        public: bool = False,
        search_fields: Optional[Sequence[str]] = None,
    ) -> List[Any]:
        model = self.model
        conditions = self._scope_conditions()

        if public:
            for column, value in self.config.public_filter.items():
                conditions.append(getattr(model, column) == value)

        for name in self.config.filter_fields:
            value = getattr(query, name, None)
            if value is not None:
                conditions.append(getattr(model, name) == value)

        date_col = getattr(model, self.config.date_field)
        date_from = getattr(query, "date_from", None)
        date_to = getattr(query, "date_to", None)
        if date_from is not None:
            conditions.append(date_col >= date_from)
        if date_to is not None:
            conditions.append(date_col <= date_to)

        search = getattr(query, "search", None)
        fields = self.config.search_fields if search_fields is None else search_fields
        if search and fields:
            pattern = f"%{escape_like(search)}%"
            conditions.append(
                or_(*(self._text(name).ilike(pattern, escape="\\") for name in fields))
            )
        return [and_(*conditions)] if conditions else []

    def _text(self, name: str):
        column = getattr(self.model, name)
        if isinstance(column.type, JSON):
            return cast(column, String)
        return column

    async def _get_or_404(self, session: AsyncSession, item_id: uuid.UUID) -> Any:
        obj = await session.get(self.model, item_id)
        if obj is None or not self._in_scope(obj):
            raise NotFoundError(resource=self.config.label, resource_id=str(item_id))
        return obj

    def _in_scope(self, obj: Any) -> bool:
        return all(
            getattr(obj, column) in values for column, values in self.config.scope.items()
        )

    async def _check_unique(
        self,
        session: AsyncSession,
        values: Mapping[str, Any],
        exclude_id: Optional[uuid.UUID] = None,
    ) -> None:
        for column, message in self.config.unique_fields.items():
            if values.get(column) is None:
                continue
            stmt = select(self.model.id).where(getattr(self.model, column) == values[column])
            if exclude_id is not None:
                stmt = stmt.where(self.model.id != exclude_id)
            if (await session.execute(stmt.limit(1))).first() is not None:
                raise ConflictError(message=message, context={"field": column})

    def _apply(self, obj: Any, changes: Mapping[str, Any], actor: Optional[UserRead]) -> None:
        for name, value in changes.items():
            setattr(obj, name, value)
        if actor is not None:
            obj.updated_by = actor.id

    async def _flush(self, session: AsyncSession, obj: Any) -> None:
        """Flush and reload server-side values; a unique violation becomes ConflictError."""
        try:
            await session.flush()
        except IntegrityError as exc:
            message = next(iter(self.config.unique_fields.values()), "Resource already exists")
            raise ConflictError(message=message, context={"error": str(exc.orig)}) from exc
        await session.refresh(obj)


async def _nothing() -> None:
    return None
