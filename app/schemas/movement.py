import datetime as dt
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from app.models.enums import MovementType

class MovementCreate(BaseModel):
    # Todo opcional: las invariantes las valida el dominio y se devuelven como 400
    description: Optional[str] = None
    amount: Optional[Decimal] = None
    type: Optional[str] = None  # "expense" o "income", sin distinguir mayúsculas
    date: Optional[dt.date] = None  # hoy si no se indica
    category: Optional[str] = None
    notes: Optional[str] = None

class MovementRead(BaseModel):
    id: int
    description: str
    amount: Decimal
    type: MovementType
    date: dt.date
    category: str
    notes: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class MovementSummaryRead(BaseModel):
    total_expenses: Decimal
    total_income: Decimal
    balance: Decimal
    movement_count: int
    expense_count: int
    income_count: int

    model_config = ConfigDict(from_attributes=True)

class MovementListRead(BaseModel):
    movements: List[MovementRead]
    summary: MovementSummaryRead

class MonthlySummaryRead(BaseModel):
    month: str  # "2025-01"
    month_label: str  # "January 2025"
    total_expenses: Decimal
    total_income: Decimal
    balance: Decimal
    expense_count: int
    income_count: int
    movement_count: int

    model_config = ConfigDict(from_attributes=True)

class CategoryStatisticRead(BaseModel):
    category: str
    total: Decimal
    percentage: float

    model_config = ConfigDict(from_attributes=True)
