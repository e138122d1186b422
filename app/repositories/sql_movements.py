from typing import List, Optional

from sqlmodel import Session, select

from app.core.exceptions import MovementNotFoundError
from app.domain.movement import Movement
from app.domain.ports import MovementRepository
from app.models.enums import MovementType
from app.models.movement import MovementRecord


def _to_domain(record: MovementRecord) -> Movement:
    return Movement(
        id=record.id,
        description=record.description,
        amount=record.amount,
        type=record.type,
        date=record.date,
        category=record.category,
        notes=record.notes,
    )


def _copy_fields(movement: Movement, record: MovementRecord) -> MovementRecord:
    record.description = movement.description
    record.amount = movement.amount
    record.type = movement.type
    record.date = movement.date
    record.category = movement.category
    record.notes = movement.notes
    return record


class SqlMovementRepository(MovementRepository):
    """Adaptador SQLModel del puerto de movimientos (tabla `movement`)."""

    def __init__(self, session: Session):
        self.session = session

    def save(self, movement: Movement) -> Movement:
        record = MovementRecord(
            description=movement.description,
            amount=movement.amount,
            type=movement.type,
            date=movement.date,
            category=movement.category,
            notes=movement.notes,
        )
        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        return _to_domain(record)

    def find_by_id(self, movement_id: int) -> Optional[Movement]:
        record = self.session.get(MovementRecord, movement_id)
        return _to_domain(record) if record else None

    def find_all(self) -> List[Movement]:
        records = self.session.exec(
            select(MovementRecord).order_by(MovementRecord.date.desc(), MovementRecord.id.desc())
        ).all()
        return [_to_domain(r) for r in records]

    def update(self, movement: Movement) -> Movement:
        record = self.session.get(MovementRecord, movement.id) if movement.id is not None else None
        if not record:
            raise MovementNotFoundError(movement.id)
        _copy_fields(movement, record)
        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        return _to_domain(record)

    def delete(self, movement_id: int) -> None:
        record = self.session.get(MovementRecord, movement_id)
        if not record:
            return
        self.session.delete(record)
        self.session.commit()

    def find_by_type(self, movement_type: MovementType) -> List[Movement]:
        records = self.session.exec(
            select(MovementRecord).where(MovementRecord.type == movement_type)
        ).all()
        return [_to_domain(r) for r in records]

    def find_by_category(self, category: str) -> List[Movement]:
        records = self.session.exec(
            select(MovementRecord)
            .where(MovementRecord.category == category)
            .order_by(MovementRecord.date.desc(), MovementRecord.id.desc())
        ).all()
        return [_to_domain(r) for r in records]
