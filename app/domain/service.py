import logging
from decimal import Decimal
from typing import Dict, List, Optional

from app.domain import aggregation
from app.domain.movement import Movement, ValidationResult, validate_movement
from app.domain.ports import MovementRepository
from app.models.enums import MovementType

logger = logging.getLogger(__name__)


class MovementService:
    """Reglas de negocio de los movimientos sobre el puerto de persistencia."""

    def __init__(self, repository: MovementRepository):
        self.repository = repository

    def create_movement(self, movement: Movement) -> ValidationResult:
        result = validate_movement(movement)
        if not result.ok:
            logger.warning("Movimiento rechazado: %s", "; ".join(result.errors))
            return result
        saved = self.repository.save(movement)
        logger.info("Movimiento creado id=%s tipo=%s", saved.id, saved.type.value)
        return ValidationResult(movement=saved)

    def update_movement(self, movement: Movement) -> ValidationResult:
        result = validate_movement(movement)
        if not result.ok:
            logger.warning("Actualización rechazada id=%s: %s", movement.id, "; ".join(result.errors))
            return result
        updated = self.repository.update(movement)
        logger.info("Movimiento actualizado id=%s", updated.id)
        return ValidationResult(movement=updated)

    def delete_movement(self, movement_id: int) -> None:
        if self.repository.find_by_id(movement_id) is None:
            logger.debug("Nada que eliminar, no existe el movimiento id=%s", movement_id)
            return
        self.repository.delete(movement_id)
        logger.info("Movimiento eliminado id=%s", movement_id)

    def get_movement(self, movement_id: int) -> Optional[Movement]:
        return self.repository.find_by_id(movement_id)

    def get_all_movements(self) -> List[Movement]:
        return self.repository.find_all()

    def get_movements_by_category(self, category: str) -> List[Movement]:
        return self.repository.find_by_category(category)

    def total_expenses(self) -> Decimal:
        return aggregation.total_expenses(self.repository.find_by_type(MovementType.expense))

    def total_income(self) -> Decimal:
        return aggregation.total_income(self.repository.find_by_type(MovementType.income))

    def balance(self) -> Decimal:
        return self.total_income() - self.total_expenses()

    def category_totals(self, movement_type: MovementType) -> Dict[str, Decimal]:
        return aggregation.category_totals(self.repository.find_by_type(movement_type), movement_type)

    def category_statistics(self) -> List[aggregation.CategoryStatistic]:
        # El porcentaje de cada categoría de gasto se calcula sobre el total de ingresos
        return aggregation.category_statistics(
            self.category_totals(MovementType.expense),
            self.total_income(),
        )

    def monthly_summaries(self) -> List[aggregation.MonthlySummary]:
        return aggregation.monthly_summaries(self.repository.find_all())
