class FinanzasError(Exception):
    """Excepción base de la aplicación."""


class MovementNotFoundError(FinanzasError):
    """No existe un movimiento con el id indicado."""

    def __init__(self, movement_id: int):
        self.movement_id = movement_id
        super().__init__(f"Movimiento no encontrado: {movement_id}")
