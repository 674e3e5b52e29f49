"""
Shared fixtures: an in-memory catalog database and factories on top of it.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from catalog.core.config import PaginationSettings
from catalog.db import models  # noqa: F401
from catalog.domain.templates import TemplateCreateInput, TemplateStatus
from catalog.infrastructure.database.base import Base
from catalog.infrastructure.database.repositories import (
    SqlAccountRepository,
    SqlCategoryRepository,
)
from catalog.infrastructure.database.session import enable_sqlite_savepoints
from catalog.modules.moderation import ModerationService
from catalog.modules.templates import TemplateCatalogService

STORED_ZIP_URL = "https://res.cloudinary.com/demo/raw/upload/v12345/folder/file.zip"


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_savepoints(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


# =============================================================================
# Catalog Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def author(session):
    return await SqlAccountRepository(session).create(
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        role="mentor",
    )


@pytest_asyncio.fixture
async def fan(session):
    return await SqlAccountRepository(session).create(
        first_name="Grace",
        last_name="Hopper",
        email="grace@example.com",
        role="user",
    )


@pytest_asyncio.fixture
async def category(session):
    return await SqlCategoryRepository(session).create(name="UI Kits", slug="ui-kits")


@pytest.fixture
def pagination() -> PaginationSettings:
    return PaginationSettings()


@pytest.fixture
def catalog_service(session, pagination) -> TemplateCatalogService:
    return TemplateCatalogService.with_session(session, pagination)


@pytest.fixture
def template_input(author, category):
    """Build a valid create payload; keyword overrides win."""

    def build(**overrides) -> TemplateCreateInput:
        data = {
            "title": "Dashboard Kit",
            "author_id": author.id,
            "category_id": category.id,
            "platform": "Figma",
            "template_type": "UI Kit",
            "price": 49.0,
            "regular_license_price": 49.0,
            "description": "Admin dashboard components",
            "download_file": STORED_ZIP_URL,
        }
        data.update(overrides)
        return TemplateCreateInput(**data)

    return build


@pytest.fixture
def make_template(catalog_service, template_input):
    async def create(**overrides):
        return await catalog_service.create(template_input(**overrides))

    return create


@pytest.fixture
def make_approved_template(session, make_template):
    async def create(**overrides):
        template = await make_template(**overrides)
        return await ModerationService.with_session(session).set_status(template.id, TemplateStatus.APPROVED)

    return create
