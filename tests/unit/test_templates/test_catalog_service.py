"""
Catalog store: creation, visibility, listing, updates and soft deletion.
"""

from unittest.mock import AsyncMock

import pytest

from catalog.core.config import PaginationSettings
from catalog.domain.templates import ListQuery, TemplateFilters, TemplateStatus, TemplateUpdateInput
from catalog.infrastructure.database.repositories import SqlCategoryRepository, SqlTemplateRepository
from catalog.modules.moderation import ModerationService
from catalog.modules.templates import (
    TemplateCatalogService,
    TemplateNotFoundError,
    TemplatePermissionError,
    TemplateSlugConflictError,
    TemplateValidationError,
    build_unique_slug,
    slugify,
)


@pytest.fixture
def categories():
    return AsyncMock()


@pytest.fixture
def service_with_mock_categories(session, categories, pagination) -> TemplateCatalogService:
    return TemplateCatalogService(SqlTemplateRepository(session), categories, pagination)


class TestSlugs:
    def test_slugify_collapses_non_alphanumerics(self):
        assert slugify("  Modern SaaS -- Dashboard UI Kit! ") == "modern-saas-dashboard-ui-kit"

    def test_unique_slug_keeps_title_prefix(self):
        first = build_unique_slug("Modern Kit")
        second = build_unique_slug("Modern Kit")

        assert first.startswith("modern-kit-")
        assert first != second

    def test_unique_slug_for_symbol_only_title(self):
        assert build_unique_slug("!!!")


class TestCreate:
    @pytest.mark.asyncio
    async def test_derived_slugs_are_unique_for_same_title(self, make_template):
        first = await make_template(title="Landing Page Pro")
        second = await make_template(title="Landing Page Pro")

        assert first.slug.startswith("landing-page-pro-")
        assert first.slug != second.slug

    @pytest.mark.asyncio
    async def test_defaults_and_timestamps(self, make_template):
        template = await make_template()

        assert template.status == TemplateStatus.PENDING.value
        assert template.is_deleted is False
        assert template.like_count == template.view_count == template.sales_count == 0
        assert template.version == "1.0.0"
        assert template.publish_date is not None
        assert template.last_update is not None
        assert template.category is not None and template.category.slug == "ui-kits"

    @pytest.mark.asyncio
    async def test_explicit_slug_is_lowercased(self, make_template):
        template = await make_template(slug="My-Custom-Slug")

        assert template.slug == "my-custom-slug"

    @pytest.mark.asyncio
    async def test_explicit_slug_conflict(self, make_template):
        await make_template(slug="taken")

        with pytest.raises(TemplateSlugConflictError):
            await make_template(slug="taken")

    @pytest.mark.asyncio
    async def test_negative_price_rejected(self, make_template):
        with pytest.raises(TemplateValidationError):
            await make_template(price=-1)

    @pytest.mark.asyncio
    async def test_author_cannot_create_approved(self, catalog_service, make_template):
        with pytest.raises(TemplateValidationError):
            await make_template(status="approved")

        page = await catalog_service.list_public(TemplateFilters(), ListQuery())
        assert page.meta.total == 0

    @pytest.mark.asyncio
    async def test_draft_is_an_authoring_status(self, make_template):
        template = await make_template(status="draft")

        assert template.status == TemplateStatus.DRAFT.value

    @pytest.mark.asyncio
    async def test_increments_category_product_count(self, session, make_template, category):
        await make_template()
        await make_template()

        refreshed = await SqlCategoryRepository(session).get_by_id(category.id)
        assert refreshed.product_count == 2

    @pytest.mark.asyncio
    async def test_category_failure_does_not_fail_create(
        self, service_with_mock_categories, categories, template_input
    ):
        categories.increment_product_count.side_effect = RuntimeError("category store down")

        template = await service_with_mock_categories.create(template_input())

        assert template.id
        categories.increment_product_count.assert_awaited_once_with(template.category_id)


class TestReads:
    @pytest.mark.asyncio
    async def test_get_by_id_ignores_status(self, catalog_service, make_template):
        template = await make_template()

        assert (await catalog_service.get_by_id(template.id)).status == "pending"

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, catalog_service):
        with pytest.raises(TemplateNotFoundError):
            await catalog_service.get_by_id("missing")

    @pytest.mark.asyncio
    async def test_get_by_slug_requires_approved(self, catalog_service, make_template, make_approved_template):
        pending = await make_template(slug="pending-kit")
        approved = await make_approved_template(slug="approved-kit")

        assert (await catalog_service.get_by_slug("approved-kit")).id == approved.id
        with pytest.raises(TemplateNotFoundError):
            await catalog_service.get_by_slug(pending.slug)


class TestListing:
    @pytest.mark.asyncio
    async def test_public_listing_only_shows_approved_live_records(
        self, session, catalog_service, make_template, make_approved_template, author
    ):
        visible = await make_approved_template(title="Visible")
        await make_template(title="Pending")
        rejected = await make_template(title="Rejected")
        await ModerationService.with_session(session).set_status(rejected.id, TemplateStatus.REJECTED)
        deleted = await make_approved_template(title="Deleted")
        await catalog_service.soft_delete(deleted.id, actor_id=author.id, is_admin=False)

        page = await catalog_service.list_public(TemplateFilters(), ListQuery())

        assert [item.id for item in page.data] == [visible.id]
        assert page.meta.total == 1

    @pytest.mark.asyncio
    async def test_price_range_matches_offer_or_list_price(self, catalog_service, make_approved_template):
        discounted = await make_approved_template(title="Discounted", price=100, offer_price=30)
        await make_approved_template(title="Cheap", price=5)
        in_range = await make_approved_template(title="Mid", price=20)

        page = await catalog_service.list_public(TemplateFilters(min_price=10, max_price=50), ListQuery())

        assert {item.id for item in page.data} == {discounted.id, in_range.id}

    @pytest.mark.asyncio
    async def test_pagination_meta(self, catalog_service, make_approved_template):
        for price in range(1, 26):
            await make_approved_template(title=f"Kit {price}", price=price)

        last_page = await catalog_service.list_public(
            TemplateFilters(),
            ListQuery(page=3, limit=10, sort_by="price", sort_order="asc"),
        )

        assert last_page.meta.total == 25
        assert last_page.meta.total_pages == 3
        assert [item.price for item in last_page.data] == [21, 22, 23, 24, 25]

    @pytest.mark.asyncio
    async def test_default_and_clamped_limits(self, session, make_approved_template):
        service = TemplateCatalogService.with_session(session, PaginationSettings(default_limit=2, max_limit=3))
        for index in range(5):
            await make_approved_template(title=f"Kit {index}")

        default_page = await service.list_public(TemplateFilters(), ListQuery())
        clamped_page = await service.list_public(TemplateFilters(), ListQuery(limit=1000))

        assert default_page.meta.limit == 2 and len(default_page.data) == 2
        assert clamped_page.meta.limit == 3 and len(clamped_page.data) == 3
        assert clamped_page.meta.total_pages == 2

    @pytest.mark.asyncio
    async def test_empty_result(self, catalog_service):
        page = await catalog_service.list_public(TemplateFilters(), ListQuery())

        assert page.data == []
        assert page.meta.total == 0
        assert page.meta.total_pages == 0

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_across_text_fields(self, catalog_service, make_approved_template):
        by_title = await make_approved_template(title="Crypto Dashboard")
        by_feature = await make_approved_template(title="Finance Kit", features=["Dark mode", "CRYPTO widgets"])
        await make_approved_template(title="Wedding Invite")

        page = await catalog_service.list_public(TemplateFilters(search_term="crypto"), ListQuery())

        assert {item.id for item in page.data} == {by_title.id, by_feature.id}

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, catalog_service, make_approved_template):
        await make_approved_template(title="Plain Kit")

        page = await catalog_service.list_public(TemplateFilters(search_term="%"), ListQuery())

        assert page.data == []

    @pytest.mark.asyncio
    async def test_search_matches_whole_feature_entries(self, catalog_service, make_approved_template):
        await make_approved_template(title="No Features")
        both = await make_approved_template(title="Two Features", features=["Dark a", "b mode"])

        bracket = await catalog_service.list_public(TemplateFilters(search_term="["), ListQuery())
        across_entries = await catalog_service.list_public(TemplateFilters(search_term='a", "b'), ListQuery())
        inside_entry = await catalog_service.list_public(TemplateFilters(search_term="dark a"), ListQuery())

        assert bracket.meta.total == 0
        assert across_entries.meta.total == 0
        assert [item.id for item in inside_entry.data] == [both.id]

    @pytest.mark.asyncio
    async def test_sort_by_price_ascending(self, catalog_service, make_approved_template):
        for price in (30, 10, 20):
            await make_approved_template(title=f"Kit {price}", price=price)

        page = await catalog_service.list_public(TemplateFilters(), ListQuery(sort_by="price", sort_order="asc"))

        assert [item.price for item in page.data] == [10, 20, 30]

    @pytest.mark.asyncio
    async def test_exact_match_filters(self, catalog_service, make_approved_template):
        figma = await make_approved_template(platform="Figma", access_type="free")
        await make_approved_template(platform="Sketch")

        page = await catalog_service.list_public(
            TemplateFilters(platform="Figma", access_type="free"),
            ListQuery(),
        )

        assert [item.id for item in page.data] == [figma.id]

    @pytest.mark.asyncio
    async def test_admin_listing_sees_every_status_but_not_deleted(
        self, catalog_service, make_template, make_approved_template, author
    ):
        pending = await make_template(title="Pending")
        approved = await make_approved_template(title="Approved")
        deleted = await make_template(title="Deleted")
        await catalog_service.soft_delete(deleted.id, actor_id=author.id, is_admin=False)

        everything = await catalog_service.list_admin(TemplateFilters(), ListQuery())
        only_pending = await catalog_service.list_admin(TemplateFilters(status="pending"), ListQuery())

        assert {item.id for item in everything.data} == {pending.id, approved.id}
        assert [item.id for item in only_pending.data] == [pending.id]

    @pytest.mark.asyncio
    async def test_status_filter_ignored_on_public_listing(self, catalog_service, make_template):
        await make_template(title="Pending")

        page = await catalog_service.list_public(TemplateFilters(status="pending"), ListQuery())

        assert page.data == []

    @pytest.mark.asyncio
    async def test_featured_ordered_by_sales(self, catalog_service, make_template, make_approved_template):
        low = await make_approved_template(title="Low", is_featured=True)
        high = await make_approved_template(title="High", is_featured=True)
        await make_approved_template(title="Not featured")
        await make_template(title="Featured but pending", is_featured=True)
        await catalog_service.increment_sales_count(high.id)

        featured = await catalog_service.list_featured()

        assert [item.id for item in featured] == [high.id, low.id]
        assert len(await catalog_service.list_featured(1)) == 1

    @pytest.mark.asyncio
    async def test_soft_deleted_template_leaves_featured(self, catalog_service, make_approved_template, author):
        kept = await make_approved_template(title="Kept", is_featured=True)
        removed = await make_approved_template(title="Removed", is_featured=True)

        await catalog_service.soft_delete(removed.id, author.id, False)

        assert [item.id for item in await catalog_service.list_featured()] == [kept.id]


class TestUpdate:
    @pytest.mark.asyncio
    async def test_owner_can_update(self, catalog_service, make_template, author):
        template = await make_template()

        updated = await catalog_service.update(
            template.id,
            TemplateUpdateInput(title="Renamed", price=99.0),
            actor_id=author.id,
            is_admin=False,
        )

        assert updated.title == "Renamed"
        assert updated.price == 99.0
        assert updated.slug == template.slug
        assert updated.last_update >= template.last_update

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", ["approved", "rejected"])
    async def test_author_cannot_set_moderation_status(self, catalog_service, make_template, author, status):
        template = await make_template()

        with pytest.raises(TemplateValidationError):
            await catalog_service.update(template.id, TemplateUpdateInput(status=status), author.id, False)

        unchanged = await catalog_service.get_by_id(template.id)
        page = await catalog_service.list_public(TemplateFilters(), ListQuery())
        assert unchanged.status == TemplateStatus.PENDING.value
        assert page.meta.total == 0

    @pytest.mark.asyncio
    async def test_author_can_move_back_to_draft(self, catalog_service, make_template, author):
        template = await make_template()

        updated = await catalog_service.update(template.id, TemplateUpdateInput(status="draft"), author.id, False)

        assert updated.status == TemplateStatus.DRAFT.value

    @pytest.mark.asyncio
    async def test_non_owner_forbidden(self, catalog_service, make_template, fan):
        template = await make_template()

        with pytest.raises(TemplatePermissionError):
            await catalog_service.update(template.id, TemplateUpdateInput(title="Hijack"), fan.id, False)

    @pytest.mark.asyncio
    async def test_admin_can_update_any(self, catalog_service, make_template):
        template = await make_template()

        updated = await catalog_service.update(template.id, TemplateUpdateInput(is_featured=True), "admin-1", True)

        assert updated.is_featured is True

    @pytest.mark.asyncio
    async def test_explicit_null_on_required_field_is_ignored(self, catalog_service, make_template, author):
        template = await make_template(offer_price=10)

        updated = await catalog_service.update(
            template.id,
            TemplateUpdateInput(title=None, offer_price=None),
            author.id,
            False,
        )

        assert updated.title == template.title
        assert updated.offer_price is None

    @pytest.mark.asyncio
    async def test_slug_conflict_on_update(self, catalog_service, make_template, author):
        await make_template(slug="taken")
        template = await make_template()

        with pytest.raises(TemplateSlugConflictError):
            await catalog_service.update(template.id, TemplateUpdateInput(slug="Taken"), author.id, False)

    @pytest.mark.asyncio
    async def test_deleted_template_cannot_be_updated(self, catalog_service, make_template, author):
        template = await make_template()
        await catalog_service.soft_delete(template.id, author.id, False)

        with pytest.raises(TemplateNotFoundError):
            await catalog_service.update(template.id, TemplateUpdateInput(title="Back"), author.id, False)


class TestSoftDelete:
    @pytest.mark.asyncio
    async def test_marks_deleted_and_decrements_category_once(
        self, service_with_mock_categories, categories, template_input, author
    ):
        service = service_with_mock_categories
        template = await service.create(template_input())

        await service.soft_delete(template.id, author.id, False)

        categories.decrement_product_count.assert_awaited_once_with(template.category_id)
        assert (await service.get_by_id(template.id)).is_deleted is True
        with pytest.raises(TemplateNotFoundError):
            await service.soft_delete(template.id, author.id, False)
        categories.decrement_product_count.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_non_owner_forbidden(self, catalog_service, make_template, fan):
        template = await make_template()

        with pytest.raises(TemplatePermissionError):
            await catalog_service.soft_delete(template.id, fan.id, False)

    @pytest.mark.asyncio
    async def test_hidden_from_slug_lookup(self, catalog_service, make_approved_template, author):
        template = await make_approved_template(slug="gone")
        await catalog_service.soft_delete(template.id, author.id, False)

        with pytest.raises(TemplateNotFoundError):
            await catalog_service.get_by_slug("gone")
        with pytest.raises(TemplateNotFoundError):
            await catalog_service.get_by_id(template.id, include_deleted=False)


class TestCounters:
    @pytest.mark.asyncio
    async def test_view_and_sales_counters(self, catalog_service, make_template):
        template = await make_template()

        await catalog_service.increment_view_count(template.id)
        await catalog_service.increment_view_count(template.id)
        outcome = await catalog_service.increment_sales_count(template.id)

        refreshed = await catalog_service.get_by_id(template.id)
        assert outcome.ok is True
        assert refreshed.view_count == 2
        assert refreshed.sales_count == 1

    @pytest.mark.asyncio
    async def test_counter_failure_is_reported(self, pagination, categories):
        repository = AsyncMock()
        repository.increment_counter.side_effect = RuntimeError("db gone")
        service = TemplateCatalogService(repository, categories, pagination)

        outcome = await service.increment_view_count("any")

        assert outcome.ok is False

    @pytest.mark.asyncio
    async def test_set_rating(self, catalog_service, make_template):
        template = await make_template()

        outcome = await catalog_service.set_rating(template.id, 4.5, 12)

        refreshed = await catalog_service.get_by_id(template.id)
        assert outcome.ok is True
        assert refreshed.rating == 4.5
        assert refreshed.review_count == 12

    @pytest.mark.asyncio
    @pytest.mark.parametrize(("rating", "review_count"), [(5.1, 1), (-0.1, 1), (3, -1)])
    async def test_set_rating_validates(self, catalog_service, make_template, rating, review_count):
        template = await make_template()

        with pytest.raises(TemplateValidationError):
            await catalog_service.set_rating(template.id, rating, review_count)
