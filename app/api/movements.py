from decimal import Decimal
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.core.dependencies import get_movement_use_cases
from app.core.exceptions import MovementNotFoundError
from app.domain.movement import INVALID_MOVEMENT, Movement, ValidationResult
from app.models.enums import MovementType
from app.schemas.movement import (
    CategoryStatisticRead,
    MonthlySummaryRead,
    MovementCreate,
    MovementListRead,
    MovementRead,
    MovementSummaryRead,
)
from app.services.movements import MovementUseCases

router = APIRouter(prefix="/movements", tags=["movements"])


def _raise_if_invalid(result: ValidationResult) -> None:
    if not result.ok:
        raise HTTPException(
            status_code=400,
            detail={"message": INVALID_MOVEMENT, "errors": list(result.errors)},
        )


def _list_with_summary(movements: List[Movement], use_cases: MovementUseCases) -> MovementListRead:
    return MovementListRead(
        movements=[MovementRead.model_validate(m) for m in movements],
        summary=MovementSummaryRead.model_validate(use_cases.summary(movements)),
    )


@router.post("", response_model=MovementRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=MovementRead, status_code=status.HTTP_201_CREATED)
def create_movement(
    movement_data: MovementCreate,
    use_cases: MovementUseCases = Depends(get_movement_use_cases),
):
    result = use_cases.create(movement_data)
    _raise_if_invalid(result)
    return MovementRead.model_validate(result.movement)


@router.get("", response_model=MovementListRead)
@router.get("/", response_model=MovementListRead)
def list_movements(use_cases: MovementUseCases = Depends(get_movement_use_cases)):
    return _list_with_summary(use_cases.list_all(), use_cases)


@router.get("/summary", response_model=MovementSummaryRead)
def get_summary(use_cases: MovementUseCases = Depends(get_movement_use_cases)):
    return MovementSummaryRead.model_validate(use_cases.summary(use_cases.list_all()))


@router.get("/statistics", response_model=List[CategoryStatisticRead])
def get_category_statistics(use_cases: MovementUseCases = Depends(get_movement_use_cases)):
    """
    Gasto por categoría y su porcentaje sobre el total de ingresos.
    """
    return [CategoryStatisticRead.model_validate(s) for s in use_cases.category_statistics()]


@router.get("/monthly", response_model=List[MonthlySummaryRead])
def get_monthly_summaries(use_cases: MovementUseCases = Depends(get_movement_use_cases)):
    """
    Resumen por mes, del más reciente al más antiguo.
    """
    return [MonthlySummaryRead.model_validate(s) for s in use_cases.monthly_summaries()]


@router.get("/category-totals", response_model=Dict[str, Decimal])
def get_category_totals(
    type: MovementType = Query(MovementType.expense),
    use_cases: MovementUseCases = Depends(get_movement_use_cases),
):
    return use_cases.category_totals(type)


@router.get("/category/{category}", response_model=MovementListRead)
def list_movements_by_category(
    category: str,
    use_cases: MovementUseCases = Depends(get_movement_use_cases),
):
    return _list_with_summary(use_cases.list_by_category(category), use_cases)


@router.get("/{movement_id}", response_model=MovementRead)
def get_movement(
    movement_id: int,
    use_cases: MovementUseCases = Depends(get_movement_use_cases),
):
    movement = use_cases.get(movement_id)
    if movement is None:
        raise HTTPException(status_code=404, detail="Movimiento no encontrado")
    return MovementRead.model_validate(movement)


@router.put("/{movement_id}", response_model=MovementRead)
def update_movement(
    movement_id: int,
    movement_data: MovementCreate,
    use_cases: MovementUseCases = Depends(get_movement_use_cases),
):
    try:
        result = use_cases.update(movement_id, movement_data)
    except MovementNotFoundError:
        raise HTTPException(status_code=404, detail="Movimiento no encontrado")
    _raise_if_invalid(result)
    return MovementRead.model_validate(result.movement)


@router.delete("/{movement_id}")
def delete_movement(
    movement_id: int,
    use_cases: MovementUseCases = Depends(get_movement_use_cases),
):
    use_cases.delete(movement_id)
    return {"message": "Movimiento eliminado correctamente"}
