"""Seed helpers for search integration tests (in-memory SQLite)."""

from collections.abc import Sequence
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.models import Contact, Person, Tenant
from app.infrastructure.search.collection import SelectCollection


class Seeder:
    """Creates rows in the test session and flushes so ids are assigned."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, *objs: Any) -> None:
        self.session.add_all(objs)
        await self.session.flush()

    async def tenant(self, code: str) -> Tenant:
        tenant = Tenant(code=code, name=f"Agency {code}")
        await self.add(tenant)
        return tenant

    async def person(self, phone: str | None = None) -> Person:
        person = Person(normalized_phone=phone)
        await self.add(person)
        return person

    async def contact(
        self,
        tenant: Tenant,
        first_name: str,
        last_name: str | None = None,
        *,
        middle_name: str | None = None,
        email: str | None = None,
        person: Person | None = None,
        phone: str | None = None,
    ) -> Contact:
        person = person or await self.person(phone)
        contact = Contact(
            tenant_id=tenant.id,
            person_id=person.id,
            first_name=first_name,
            last_name=last_name,
            middle_name=middle_name,
            email=email,
        )
        await self.add(contact)
        return contact


@pytest.fixture
def seed(db_session: AsyncSession) -> Seeder:
    return Seeder(db_session)


@pytest.fixture
def fetch(db_session: AsyncSession):
    """Execute a collection's statement and return the entity rows."""

    async def _fetch(collection: SelectCollection) -> Sequence[Any]:
        result = await db_session.execute(collection.statement)
        return result.scalars().all()

    return _fetch
