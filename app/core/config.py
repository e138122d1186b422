import os
from dotenv import load_dotenv

load_dotenv()  # Carga las variables de entorno desde .env si existe

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./finanzas.db")

# echo=True imprime las queries; útil solo en desarrollo
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
