from contextlib import asynccontextmanager
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.api.v1 import router as api_router
from app.api import deps
from app.api.errors import register_error_handlers
from app.core.config import settings
from app.core.database import init_db
from app.core.logging import configure_logging
import logging

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Gestiona el ciclo de vida de la aplicación.

    Startup: crea las tablas que falten.
    """
    logger.info("Iniciando aplicación...")
    init_db()
    logger.info("Aplicación iniciada exitosamente")

    yield

    logger.info("Cerrando aplicación...")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Users, products and orders with atomic stock-checked order creation",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(api_router.api_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
def root():
    """
    Root endpoint
    """
    return {"message": "E-commerce API", "version": "1.0.0"}


@app.get("/health")
def health_check(db: Session = Depends(deps.get_db)):
    """
    Health check endpoint
    """
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except SQLAlchemyError:
        logger.warning("Health check: base de datos no disponible", exc_info=True)
        db_status = "unhealthy"

    return {
        "status": "healthy" if db_status == "healthy" else "unhealthy",
        "database": db_status,
        "environment": settings.ENVIRONMENT,
        "version": "1.0.0"
    }
