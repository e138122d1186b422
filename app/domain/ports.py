"""
Puerto de persistencia de movimientos.

El dominio solo conoce este contrato; la implementación concreta (SQL hoy)
vive en `app.repositories`.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.movement import Movement
from app.models.enums import MovementType


class MovementRepository(ABC):
    """Interfaz para guardar y consultar movimientos."""

    @abstractmethod
    def save(self, movement: Movement) -> Movement:
        """Persiste un movimiento nuevo y lo devuelve con su id asignado."""
        ...

    @abstractmethod
    def find_by_id(self, movement_id: int) -> Optional[Movement]:
        """Devuelve el movimiento o None si no existe."""
        ...

    @abstractmethod
    def find_all(self) -> List[Movement]:
        ...

    @abstractmethod
    def update(self, movement: Movement) -> Movement:
        """Reemplaza todos los campos del movimiento con ese id.

        Raises:
            MovementNotFoundError: si no existe un movimiento con ese id.
        """
        ...

    @abstractmethod
    def delete(self, movement_id: int) -> None:
        """Elimina el movimiento. Un id inexistente no es un error."""
        ...

    @abstractmethod
    def find_by_type(self, movement_type: MovementType) -> List[Movement]:
        ...

    @abstractmethod
    def find_by_category(self, category: str) -> List[Movement]:
        ...
