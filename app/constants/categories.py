from enum import Enum

class DefaultCategory(str, Enum):
    FOOD = "Food"
    TRANSPORT = "Transport"
    UTILITIES = "Utilities"
    HEALTH = "Health"
    EDUCATION = "Education"
    ENTERTAINMENT = "Entertainment"
    HOUSEHOLD = "Household"
    OTHER = "Other"


# Catálogo sugerido para formularios; no se impone como conjunto cerrado
CATEGORY_CATALOG = [category.value for category in DefaultCategory]
