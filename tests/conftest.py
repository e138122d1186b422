"""
Fixtures compartidas: base SQLite en memoria, repositorio en memoria para
probar el dominio sin base de datos, y un TestClient con la sesión
sustituida.
"""

import datetime as dt
from dataclasses import replace
from decimal import Decimal
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.core.exceptions import MovementNotFoundError
from app.database import get_session
from app.domain.movement import Movement
from app.domain.ports import MovementRepository
from app.main import app
from app.models.enums import MovementType
from app.models.movement import MovementRecord  # noqa: F401


class InMemoryMovementRepository(MovementRepository):
    """Doble de prueba del puerto: guarda los movimientos en un dict."""

    def __init__(self):
        self.items: Dict[int, Movement] = {}
        self.next_id = 1

    def save(self, movement: Movement) -> Movement:
        saved = replace(movement, id=self.next_id)
        self.items[saved.id] = saved
        self.next_id += 1
        return saved

    def find_by_id(self, movement_id: int) -> Optional[Movement]:
        return self.items.get(movement_id)

    def find_all(self) -> List[Movement]:
        return list(self.items.values())

    def update(self, movement: Movement) -> Movement:
        if movement.id not in self.items:
            raise MovementNotFoundError(movement.id)
        self.items[movement.id] = movement
        return movement

    def delete(self, movement_id: int) -> None:
        self.items.pop(movement_id, None)

    def find_by_type(self, movement_type: MovementType) -> List[Movement]:
        return [m for m in self.items.values() if m.type == movement_type]

    def find_by_category(self, category: str) -> List[Movement]:
        return [m for m in self.items.values() if m.category == category]


def make_movement(
    type=MovementType.expense,
    amount="10.00",
    date=dt.date(2025, 1, 5),
    category="Food",
    description="Compra",
    notes=None,
    id=None,
) -> Movement:
    return Movement(
        id=id,
        description=description,
        amount=Decimal(amount) if isinstance(amount, str) else amount,
        type=type,
        date=date,
        category=category,
        notes=notes,
    )


@pytest.fixture
def memory_repository():
    return InMemoryMovementRepository()


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()
