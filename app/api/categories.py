from typing import List

from fastapi import APIRouter

from app.constants.categories import CATEGORY_CATALOG

router = APIRouter(prefix="/categories", tags=["categories"])

@router.get("", response_model=List[str])
@router.get("/", response_model=List[str])
def list_categories():
    """
    Catálogo de categorías sugeridas. Los movimientos pueden usar otras.
    """
    return CATEGORY_CATALOG
