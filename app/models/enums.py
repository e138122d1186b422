from enum import Enum
from typing import Optional

class MovementType(str, Enum):
    expense = "expense"
    income = "income"

    @classmethod
    def parse(cls, value) -> Optional["MovementType"]:
        """Acepta el tipo sin distinguir mayúsculas ("EXPENSE", "income"...)."""
        if value is None or isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None
