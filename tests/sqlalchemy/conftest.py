from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sample_models import (
    AddressRow,
    Base,
    CityRow,
    OrderLineRow,
    OrderRow,
    PersonRow,
)
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from sqlalchemy.ext.asyncio import AsyncSession

SEED = [
    (1, "Ana", 30, True),
    (2, "Bob", 50, False),
    (3, "Cara", 35, True),
    (4, "Dan", 70, True),
    (5, "Eva", 25, False),
    (6, "Frank", 18, True),
]


@pytest.fixture
async def engine():
    eng = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as sess:
        yield sess


@pytest.fixture
async def seeded(session) -> AsyncSession:
    """Six people; Ana has an address in Lisbon and two orders."""
    lisbon = CityRow(id=1, name="Lisbon")
    address = AddressRow(id=1, street="Main St", city=lisbon)
    people = [
        PersonRow(id=pk, name=name, age=age, is_active=active)
        for pk, name, age, active in SEED
    ]
    people[0].address = address
    session.add_all(people)
    await session.flush()
    session.add_all(
        [
            OrderRow(
                id=1,
                person_id=1,
                total=120,
                lines=[OrderLineRow(id=1, sku="A"), OrderLineRow(id=2, sku="B")],
            ),
            OrderRow(id=2, person_id=1, total=40),
            OrderRow(id=3, person_id=4, total=15),
        ]
    )
    await session.commit()
    # Start every test from an empty identity map.
    session.expunge_all()
    return session
