import datetime as dt
from decimal import Decimal
from typing import Optional

from sqlalchemy import Column, Text
from sqlmodel import SQLModel, Field

from app.models.enums import MovementType

class MovementRecord(SQLModel, table=True):
    __tablename__ = "movement"

    id: Optional[int] = Field(default=None, primary_key=True)
    description: str
    amount: Decimal = Field(max_digits=15, decimal_places=2)
    type: MovementType
    date: dt.date = Field(index=True)
    category: str = Field(index=True)
    notes: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
