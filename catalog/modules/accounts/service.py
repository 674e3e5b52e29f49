"""Account lookups used to enrich engagement notifications."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.accounts.models import AccountProfile
from catalog.infrastructure.database.repositories.account_repository import SqlAccountRepository


class AccountDirectory:
    def __init__(self, repository: SqlAccountRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "AccountDirectory":
        return cls(SqlAccountRepository(session))

    async def get_by_id(self, account_id: str) -> AccountProfile | None:
        return await self._repository.get_by_id(account_id)
