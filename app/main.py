import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.api import categories, movements
from app.core.config import CORS_ORIGINS, LOG_LEVEL
from app.core.logging import setup_logging
from app.database import create_db_and_tables

logger = logging.getLogger(__name__)

STORAGE_ERROR_DETAIL = "Error al acceder a los movimientos. Inténtalo de nuevo más tarde."

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(LOG_LEVEL)
    create_db_and_tables()
    logger.info("Servidor de contabilidad del hogar iniciado")
    yield

app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(
        "Error de almacenamiento en %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=500,
        content={"detail": STORAGE_ERROR_DETAIL},
    )

app.include_router(movements.router)
app.include_router(categories.router)

@app.get("/")
def root():
    return {"message": "Servidor de contabilidad del hogar"}
