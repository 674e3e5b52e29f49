"""
Seed a fresh catalog database.
Creates an admin account and the default design template categories.
"""
import asyncio

from sqlalchemy import select

from catalog.core.security import create_access_token
from catalog.db.models import Account, Category
from catalog.infrastructure.database.repositories.account_repository import SqlAccountRepository
from catalog.infrastructure.database.repositories.category_repository import SqlCategoryRepository
from catalog.infrastructure.database.session import get_session, init_db
from catalog.modules.templates import slugify

DEFAULT_CATEGORIES = ("UI Kits", "Website Templates", "Mobile App Templates", "Dashboards", "Icons")


async def seed_catalog():
    await init_db()

    async for db in get_session():
        stmt = select(Account).where(Account.role.in_(["admin", "super_admin"]))
        admin = (await db.execute(stmt)).scalars().first()
        if admin is None:
            profile = await SqlAccountRepository(db).create(
                first_name="Catalog",
                last_name="Admin",
                email="admin@example.com",
                role="super_admin",
            )
            admin_id = profile.id
            print(f"Admin account created: {admin_id}")
        else:
            admin_id = admin.id
            print(f"Admin account already exists: {admin_id}")

        categories = SqlCategoryRepository(db)
        existing = set((await db.execute(select(Category.slug))).scalars().all())
        for name in DEFAULT_CATEGORIES:
            slug = slugify(name)
            if slug in existing:
                continue
            category = await categories.create(name=name, slug=slug)
            print(f"Category created: {category.name} ({category.id})")
        await db.commit()

        print("=" * 50)
        print("Development token for the admin account:")
        print(create_access_token(admin_id, "super_admin"))
        print("=" * 50)


if __name__ == "__main__":
    asyncio.run(seed_catalog())
