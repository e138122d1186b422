import datetime as dt
from decimal import Decimal
from typing import Dict, List, Optional

from app.domain import aggregation
from app.domain.movement import Movement, ValidationResult
from app.domain.service import MovementService
from app.models.enums import MovementType
from app.schemas.movement import MovementCreate


def _to_movement(data: MovementCreate, movement_id: Optional[int] = None) -> Movement:
    return Movement(
        id=movement_id,
        description=data.description,
        amount=data.amount,
        type=MovementType.parse(data.type),
        date=data.date or dt.date.today(),
        category=data.category,
        notes=data.notes,
    )


class MovementUseCases:
    """
    Casos de uso de gestión de movimientos.

    No contiene reglas propias: traduce los DTOs a entidades de dominio y
    delega en MovementService.
    """

    def __init__(self, service: MovementService):
        self.service = service

    def create(self, data: MovementCreate) -> ValidationResult:
        return self.service.create_movement(_to_movement(data))

    def list_all(self) -> List[Movement]:
        return self.service.get_all_movements()

    def get(self, movement_id: int) -> Optional[Movement]:
        return self.service.get_movement(movement_id)

    def update(self, movement_id: int, data: MovementCreate) -> ValidationResult:
        return self.service.update_movement(_to_movement(data, movement_id))

    def delete(self, movement_id: int) -> None:
        self.service.delete_movement(movement_id)

    def list_by_category(self, category: str) -> List[Movement]:
        return self.service.get_movements_by_category(category)

    def total_expenses(self) -> Decimal:
        return self.service.total_expenses()

    def total_income(self) -> Decimal:
        return self.service.total_income()

    def balance(self) -> Decimal:
        return self.service.balance()

    def category_totals(self, movement_type: MovementType) -> Dict[str, Decimal]:
        return self.service.category_totals(movement_type)

    def category_statistics(self) -> List[aggregation.CategoryStatistic]:
        return self.service.category_statistics()

    def monthly_summaries(self) -> List[aggregation.MonthlySummary]:
        return self.service.monthly_summaries()

    def summary(self, movements: List[Movement]) -> aggregation.MovementSummary:
        return aggregation.movement_summary(movements)
