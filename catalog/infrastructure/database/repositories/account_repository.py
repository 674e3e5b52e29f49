"""SQLAlchemy implementation for account lookups."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.db.models import Account
from catalog.domain.accounts.models import AccountProfile


class SqlAccountRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str | None = None,
        role: str = "user",
    ) -> AccountProfile:
        account = Account(first_name=first_name, last_name=last_name, email=email, role=role)
        self.session.add(account)
        await self.session.flush()
        return self._to_domain(account)

    async def get_by_id(self, account_id: str) -> AccountProfile | None:
        stmt = select(Account).where(Account.id == account_id)
        result = await self.session.execute(stmt)
        account = result.scalars().first()
        return self._to_domain(account) if account else None

    @staticmethod
    def _to_domain(model: Account) -> AccountProfile:
        return AccountProfile(
            id=model.id,
            first_name=model.first_name or "",
            last_name=model.last_name or "",
            email=model.email,
            role=model.role,
        )
