"""
Cálculos de resumen sobre colecciones de movimientos.

Todas las funciones son puras: reciben una colección ya obtenida del
repositorio y devuelven registros nuevos, sin estado compartido. Las sumas
se hacen con `Decimal` de principio a fin; el único valor flotante es el
porcentaje de `CategoryStatistic`, pensado para mostrar.
"""

import datetime as dt
from collections import defaultdict
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Optional

from app.domain.movement import Movement
from app.models.enums import MovementType

ZERO = Decimal("0")
PERCENT_QUANTUM = Decimal("0.0001")

MONTH_NAMES = {
    1: "January",
    2: "February",
    3: "March",
    4: "April",
    5: "May",
    6: "June",
    7: "July",
    8: "August",
    9: "September",
    10: "October",
    11: "November",
    12: "December",
}


@dataclass(frozen=True)
class MovementSummary:
    total_expenses: Decimal
    total_income: Decimal
    balance: Decimal
    movement_count: int
    expense_count: int
    income_count: int


@dataclass(frozen=True)
class MonthlySummary:
    month: str
    month_label: str
    total_expenses: Decimal
    total_income: Decimal
    balance: Decimal
    expense_count: int
    income_count: int
    movement_count: int


@dataclass(frozen=True)
class CategoryStatistic:
    category: str
    total: Decimal
    percentage: float


def total_by_type(movements: Iterable[Movement], movement_type: MovementType) -> Decimal:
    """Suma exacta de los montos del tipo indicado; cero si no hay ninguno."""
    return sum((m.amount for m in movements if m.type == movement_type), ZERO)


def total_expenses(movements: Iterable[Movement]) -> Decimal:
    return total_by_type(movements, MovementType.expense)


def total_income(movements: Iterable[Movement]) -> Decimal:
    return total_by_type(movements, MovementType.income)


def balance(movements: Iterable[Movement]) -> Decimal:
    """Ingresos menos gastos. Positivo significa ganancia neta."""
    movements = list(movements)
    return total_income(movements) - total_expenses(movements)


def category_totals(movements: Iterable[Movement], movement_type: MovementType) -> Dict[str, Decimal]:
    totals: Dict[str, Decimal] = defaultdict(lambda: ZERO)
    for m in movements:
        if m.type == movement_type:
            totals[m.category] += m.amount
    return dict(totals)


def _percentage(total: Decimal, reference: Optional[Decimal]) -> float:
    if reference is None or reference <= ZERO:
        return 0.0
    ratio = (total / reference).quantize(PERCENT_QUANTUM, rounding=ROUND_HALF_UP)
    return float(ratio * 100)


def category_statistics(totals: Dict[str, Decimal], reference: Optional[Decimal]) -> List[CategoryStatistic]:
    """
    Convierte totales por categoría en porcentajes respecto a `reference`.

    Con una referencia nula o no positiva todos los porcentajes son 0.0.
    Orden: total descendente y, a igual total, nombre de categoría.
    """
    statistics = [
        CategoryStatistic(category=category, total=total, percentage=_percentage(total, reference))
        for category, total in totals.items()
    ]
    statistics.sort(key=lambda s: (-s.total, s.category))
    return statistics


def month_code(date: dt.date) -> str:
    """Clave de agrupación "YYYY-MM"."""
    return f"{date.year:04d}-{date.month:02d}"


def month_label(code: str) -> str:
    """
    "2025-01" -> "January 2025".

    Si el código no tiene forma año-mes o el mes está fuera de 1-12 se
    devuelve el código tal cual.
    """
    parts = code.split("-") if isinstance(code, str) else []
    if len(parts) != 2:
        return code
    year, month = parts
    try:
        month_number = int(month)
        int(year)
    except ValueError:
        return code
    name = MONTH_NAMES.get(month_number)
    if name is None:
        return code
    return f"{name} {year}"


def _summarize_month(code: str, movements: List[Movement]) -> MonthlySummary:
    expenses = [m for m in movements if m.type == MovementType.expense]
    income = [m for m in movements if m.type == MovementType.income]
    month_expenses = total_expenses(expenses)
    month_income = total_income(income)
    return MonthlySummary(
        month=code,
        month_label=month_label(code),
        total_expenses=month_expenses,
        total_income=month_income,
        balance=month_income - month_expenses,
        expense_count=len(expenses),
        income_count=len(income),
        movement_count=len(expenses) + len(income),
    )


def monthly_summaries(movements: Iterable[Movement]) -> List[MonthlySummary]:
    """Resúmenes por mes, del más reciente al más antiguo."""
    by_month: Dict[str, List[Movement]] = defaultdict(list)
    for m in movements:
        by_month[month_code(m.date)].append(m)

    return [
        _summarize_month(code, by_month[code])
        for code in sorted(by_month, reverse=True)
    ]


def movement_summary(movements: Iterable[Movement]) -> MovementSummary:
    movements = list(movements)
    expenses = total_expenses(movements)
    income = total_income(movements)
    expense_count = sum(1 for m in movements if m.type == MovementType.expense)
    income_count = sum(1 for m in movements if m.type == MovementType.income)
    return MovementSummary(
        total_expenses=expenses,
        total_income=income,
        balance=income - expenses,
        movement_count=len(movements),
        expense_count=expense_count,
        income_count=income_count,
    )
