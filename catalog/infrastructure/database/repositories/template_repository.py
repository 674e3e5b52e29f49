"""SQLAlchemy implementation for the design template repository."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from sqlalchemy import String, and_, case, column, delete, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.db.models import DesignTemplate as DesignTemplateModel
from catalog.db.models import DesignTemplateLike, utcnow
from catalog.domain.templates.exceptions import TemplateSlugConflictError
from catalog.domain.templates.models import (
    CatalogScope,
    CategoryRef,
    DesignTemplate,
    TemplateFilters,
    TemplateStatus,
)

LIST_FIELDS = ("features", "files_included", "compatibility", "design_tools", "images")
COUNTERS = {"view_count", "sales_count"}

_SORT_COLUMNS = {
    "created_at": DesignTemplateModel.created_at,
    "updated_at": DesignTemplateModel.updated_at,
    "publish_date": DesignTemplateModel.publish_date,
    "last_update": DesignTemplateModel.last_update,
    "title": DesignTemplateModel.title,
    "price": DesignTemplateModel.price,
    "offer_price": DesignTemplateModel.offer_price,
    "rating": DesignTemplateModel.rating,
    "sales_count": DesignTemplateModel.sales_count,
    "view_count": DesignTemplateModel.view_count,
    "like_count": DesignTemplateModel.like_count,
}
_SORT_ALIASES = {
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "publishDate": "publish_date",
    "lastUpdate": "last_update",
    "offerPrice": "offer_price",
    "salesCount": "sales_count",
    "viewCount": "view_count",
    "likeCount": "like_count",
}


def resolve_sort_column(sort_by: str | None):
    """Map a caller supplied sort key onto a column, defaulting to creation time."""
    key = _SORT_ALIASES.get(sort_by or "", sort_by or "")
    return _SORT_COLUMNS.get(key, DesignTemplateModel.created_at)


class SqlTemplateRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, values: dict[str, Any]) -> DesignTemplate:
        model = DesignTemplateModel(**_encode(values))
        try:
            async with self.session.begin_nested():
                self.session.add(model)
        except IntegrityError as exc:
            _raise_on_slug_conflict(exc)
            raise
        created = await self.get_by_id(model.id)
        assert created is not None
        return created

    async def get_by_id(self, template_id: str, *, include_deleted: bool = True) -> DesignTemplate | None:
        stmt = select(DesignTemplateModel).where(DesignTemplateModel.id == template_id)
        if not include_deleted:
            stmt = stmt.where(DesignTemplateModel.is_deleted.is_(False))
        model = await self._first(stmt)
        if model is None:
            return None
        return _to_domain(model, await self._liked_by(model.id))

    async def get_public_by_slug(self, slug: str) -> DesignTemplate | None:
        stmt = (
            select(DesignTemplateModel)
            .where(DesignTemplateModel.slug == slug)
            .where(*_scope_conditions(CatalogScope.PUBLIC))
        )
        model = await self._first(stmt)
        if model is None:
            return None
        return _to_domain(model, await self._liked_by(model.id))

    async def slug_exists(self, slug: str, *, exclude_id: str | None = None) -> bool:
        stmt = select(DesignTemplateModel.id).where(DesignTemplateModel.slug == slug)
        if exclude_id is not None:
            stmt = stmt.where(DesignTemplateModel.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.first() is not None

    async def list_page(
        self,
        filters: TemplateFilters,
        *,
        scope: CatalogScope,
        sort_by: str,
        descending: bool,
        offset: int,
        limit: int,
    ) -> tuple[Sequence[DesignTemplate], int]:
        where = and_(*_scope_conditions(scope), *_filter_conditions(filters, scope))
        column = resolve_sort_column(sort_by)
        order = column.desc() if descending else column.asc()

        count_stmt = select(func.count()).select_from(DesignTemplateModel).where(where)
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            select(DesignTemplateModel)
            .where(where)
            .order_by(order, DesignTemplateModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [_to_domain(model) for model in result.scalars().all()], total

    async def list_featured(self, limit: int) -> Sequence[DesignTemplate]:
        stmt = (
            select(DesignTemplateModel)
            .where(*_scope_conditions(CatalogScope.PUBLIC))
            .where(DesignTemplateModel.is_featured.is_(True))
            .order_by(DesignTemplateModel.sales_count.desc(), DesignTemplateModel.id)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [_to_domain(model) for model in result.scalars().all()]

    async def update_fields(self, template_id: str, values: dict[str, Any]) -> DesignTemplate | None:
        if values:
            stmt = (
                update(DesignTemplateModel)
                .where(DesignTemplateModel.id == template_id)
                .values(**_encode(values))
                .execution_options(synchronize_session=False)
            )
            try:
                async with self.session.begin_nested():
                    await self.session.execute(stmt)
            except IntegrityError as exc:
                _raise_on_slug_conflict(exc)
                raise
        return await self.get_by_id(template_id)

    async def mark_deleted(self, template_id: str) -> None:
        stmt = (
            update(DesignTemplateModel)
            .where(DesignTemplateModel.id == template_id)
            .values(is_deleted=True, last_update=utcnow())
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)

    async def set_status(
        self,
        template_id: str,
        status: str,
        *,
        publish_date: datetime | None,
    ) -> DesignTemplate | None:
        values: dict[str, Any] = {"status": status, "last_update": utcnow()}
        if publish_date is not None:
            values["publish_date"] = publish_date
        stmt = (
            update(DesignTemplateModel)
            .where(DesignTemplateModel.id == template_id)
            .where(DesignTemplateModel.is_deleted.is_(False))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            return None
        return await self.get_by_id(template_id)

    async def increment_counter(self, template_id: str, counter: str, amount: int = 1) -> None:
        if counter not in COUNTERS:
            raise ValueError(f"Unknown counter: {counter}")
        column = getattr(DesignTemplateModel, counter)
        stmt = (
            update(DesignTemplateModel)
            .where(DesignTemplateModel.id == template_id)
            .values({counter: column + amount})
            .execution_options(synchronize_session=False)
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)

    async def set_rating(self, template_id: str, rating: float, review_count: int) -> None:
        stmt = (
            update(DesignTemplateModel)
            .where(DesignTemplateModel.id == template_id)
            .values(rating=rating, review_count=review_count)
            .execution_options(synchronize_session=False)
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)

    async def has_like(self, template_id: str, user_id: str) -> bool:
        stmt = select(DesignTemplateLike.user_id).where(
            DesignTemplateLike.template_id == template_id,
            DesignTemplateLike.user_id == user_id,
        )
        result = await self.session.execute(stmt.limit(1))
        return result.first() is not None

    async def add_like(self, template_id: str, user_id: str) -> int:
        # Set-union insert followed by an unconditional increment; membership
        # check and mutation are separate statements, so concurrent toggles for
        # the same pair can still drift like_count away from the set size.
        if not await self.has_like(template_id, user_id):
            try:
                async with self.session.begin_nested():
                    self.session.add(DesignTemplateLike(template_id=template_id, user_id=user_id))
            except IntegrityError:
                pass  # already a member
        await self.session.execute(
            update(DesignTemplateModel)
            .where(DesignTemplateModel.id == template_id)
            .values(like_count=DesignTemplateModel.like_count + 1)
            .execution_options(synchronize_session=False)
        )
        return await self._like_count(template_id)

    async def remove_like(self, template_id: str, user_id: str) -> int:
        await self.session.execute(
            delete(DesignTemplateLike).where(
                DesignTemplateLike.template_id == template_id,
                DesignTemplateLike.user_id == user_id,
            )
        )
        await self.session.execute(
            update(DesignTemplateModel)
            .where(DesignTemplateModel.id == template_id)
            .values(
                like_count=case(
                    (DesignTemplateModel.like_count > 0, DesignTemplateModel.like_count - 1),
                    else_=0,
                )
            )
            .execution_options(synchronize_session=False)
        )
        return await self._like_count(template_id)

    async def _first(self, stmt) -> DesignTemplateModel | None:
        result = await self.session.execute(stmt.execution_options(populate_existing=True))
        return result.scalars().first()

    async def _liked_by(self, template_id: str) -> frozenset[str]:
        stmt = select(DesignTemplateLike.user_id).where(DesignTemplateLike.template_id == template_id)
        result = await self.session.execute(stmt)
        return frozenset(result.scalars().all())

    async def _like_count(self, template_id: str) -> int:
        stmt = select(DesignTemplateModel.like_count).where(DesignTemplateModel.id == template_id)
        result = await self.session.execute(stmt)
        return max(0, result.scalar_one_or_none() or 0)


def _raise_on_slug_conflict(exc: IntegrityError) -> None:
    # two writers can both pass slug_exists; the unique index settles it
    if "slug" in str(exc.orig).lower():
        raise TemplateSlugConflictError("Design template with this slug already exists") from exc


def _scope_conditions(scope: CatalogScope) -> list[Any]:
    conditions: list[Any] = [DesignTemplateModel.is_deleted.is_(False)]
    if scope is CatalogScope.PUBLIC:
        conditions.append(DesignTemplateModel.status == TemplateStatus.APPROVED.value)
    return conditions


def _filter_conditions(filters: TemplateFilters, scope: CatalogScope) -> list[Any]:
    conditions: list[Any] = []

    if filters.search_term:
        term = filters.search_term
        conditions.append(
            or_(
                DesignTemplateModel.title.icontains(term, autoescape=True),
                DesignTemplateModel.description.icontains(term, autoescape=True),
                _feature_matches(term),
            )
        )
    if filters.category_id:
        conditions.append(DesignTemplateModel.category_id == filters.category_id)
    if filters.platform:
        conditions.append(DesignTemplateModel.platform == filters.platform)
    if filters.template_type:
        conditions.append(DesignTemplateModel.template_type == filters.template_type)
    if filters.access_type:
        conditions.append(DesignTemplateModel.access_type == filters.access_type)
    if filters.min_price is not None or filters.max_price is not None:
        conditions.append(
            or_(
                _in_range(DesignTemplateModel.offer_price, filters.min_price, filters.max_price),
                _in_range(DesignTemplateModel.price, filters.min_price, filters.max_price),
            )
        )
    if filters.min_rating is not None:
        conditions.append(DesignTemplateModel.rating >= filters.min_rating)
    if scope is CatalogScope.ADMIN and filters.status:
        conditions.append(DesignTemplateModel.status == filters.status)
    return conditions


def _feature_matches(term: str):
    # one row per list entry, so JSON punctuation never takes part in the match
    feature = func.json_each(DesignTemplateModel.features).table_valued(column("value", String)).alias("feature")
    return (
        select(1)
        .select_from(feature)
        .where(feature.c.value.icontains(term, autoescape=True))
        .correlate(DesignTemplateModel)
        .exists()
    )


def _in_range(target, minimum: Optional[float], maximum: Optional[float]):
    bounds = []
    if minimum is not None:
        bounds.append(target >= minimum)
    if maximum is not None:
        bounds.append(target <= maximum)
    return and_(*bounds)


def _encode(values: dict[str, Any]) -> dict[str, Any]:
    encoded = dict(values)
    for name in LIST_FIELDS:
        if name in encoded:
            encoded[name] = json.dumps(list(encoded[name] or []), ensure_ascii=False)
    return encoded


def _decode_list(raw: str | None) -> list[str]:
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        return []
    return [str(item) for item in value] if isinstance(value, list) else []


def _aware(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_domain(model: DesignTemplateModel, liked_by: frozenset[str] = frozenset()) -> DesignTemplate:
    category = None
    if model.category is not None:
        category = CategoryRef(id=model.category.id, name=model.category.name, slug=model.category.slug)
    return DesignTemplate(
        id=model.id,
        title=model.title,
        slug=model.slug,
        author_id=model.author_id,
        category_id=model.category_id,
        category=category,
        platform=model.platform,
        template_type=model.template_type,
        access_type=model.access_type,
        price=model.price,
        offer_price=model.offer_price,
        license_type=model.license_type,
        regular_license_price=model.regular_license_price,
        extended_license_price=model.extended_license_price,
        rating=model.rating or 0,
        review_count=model.review_count or 0,
        sales_count=model.sales_count or 0,
        view_count=model.view_count or 0,
        like_count=max(0, model.like_count or 0),
        version=model.version,
        features=_decode_list(model.features),
        files_included=_decode_list(model.files_included),
        compatibility=_decode_list(model.compatibility),
        design_tools=_decode_list(model.design_tools),
        description=model.description,
        long_description=model.long_description,
        images=_decode_list(model.images),
        preview_url=model.preview_url,
        download_file=model.download_file,
        documentation_url=model.documentation_url,
        status=model.status,
        is_deleted=bool(model.is_deleted),
        is_featured=bool(model.is_featured),
        publish_date=_aware(model.publish_date),
        last_update=_aware(model.last_update),
        created_at=_aware(model.created_at),
        updated_at=_aware(model.updated_at),
        liked_by=liked_by,
    )
