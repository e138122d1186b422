"""
Entidad de dominio: Movimiento (gasto o ingreso del hogar).

Los montos son `Decimal` para que las sumas no acumulen errores de
redondeo. La entidad es inmutable; una actualización crea una instancia
nueva con `dataclasses.replace`.
"""

import datetime as dt
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Tuple

from app.models.enums import MovementType

DESCRIPTION_REQUIRED = "La descripción es requerida"
AMOUNT_REQUIRED = "La cantidad es requerida y debe ser mayor a cero"
AMOUNT_PRECISION = "La cantidad admite como máximo 2 decimales"
AMOUNT_TOO_LARGE = "La cantidad no puede superar 9999999999999.99"
TYPE_REQUIRED = "El tipo de movimiento es requerido"
DATE_REQUIRED = "La fecha es requerida"
CATEGORY_REQUIRED = "La categoría es requerida"

INVALID_MOVEMENT = "El movimiento no es válido"

# numeric(15, 2): 15 dígitos se guardan sin pérdida incluso donde el motor usa
# coma flotante (SQLite)
AMOUNT_QUANTUM = Decimal("0.01")
MAX_AMOUNT = Decimal("9999999999999.99")


@dataclass(frozen=True)
class Movement:
    description: Optional[str]
    amount: Optional[Decimal]
    type: Optional[MovementType]
    date: Optional[dt.date]
    category: Optional[str]
    notes: Optional[str] = None
    id: Optional[int] = None
    """Lo asigna el almacenamiento al persistir; None antes de guardar."""

    def is_valid(self) -> bool:
        return not validate_movement(self).errors


@dataclass(frozen=True)
class ValidationResult:
    """Movimiento validado o la lista de invariantes que incumple."""

    movement: Movement
    errors: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.errors


def _is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def validate_movement(movement: Movement) -> ValidationResult:
    """Comprueba las invariantes del movimiento sin lanzar excepciones."""
    errors = []
    if _is_blank(movement.description):
        errors.append(DESCRIPTION_REQUIRED)
    if movement.amount is None or movement.amount <= Decimal("0"):
        errors.append(AMOUNT_REQUIRED)
    elif movement.amount > MAX_AMOUNT:
        errors.append(AMOUNT_TOO_LARGE)
    elif movement.amount != movement.amount.quantize(AMOUNT_QUANTUM):
        errors.append(AMOUNT_PRECISION)
    if movement.type is None:
        errors.append(TYPE_REQUIRED)
    if movement.date is None:
        errors.append(DATE_REQUIRED)
    if _is_blank(movement.category):
        errors.append(CATEGORY_REQUIRED)
    return ValidationResult(movement=movement, errors=tuple(errors))
