from fastapi import Depends
from sqlmodel import Session

from app.database import get_session
from app.domain.service import MovementService
from app.repositories.sql_movements import SqlMovementRepository
from app.services.movements import MovementUseCases

def get_movement_use_cases(session: Session = Depends(get_session)) -> MovementUseCases:
    return MovementUseCases(MovementService(SqlMovementRepository(session)))
