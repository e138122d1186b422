"""Configuración de logging de la aplicación."""
import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Todos los módulos usan logging.getLogger(__name__), así que cuelgan de "app"
ROOT_LOGGER_NAME = "app"


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Configura el logger raíz de la aplicación. Idempotente."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Evitar handlers duplicados si el lifespan corre más de una vez (tests)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)
    logger.propagate = False

    return logger
