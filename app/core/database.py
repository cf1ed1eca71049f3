from datetime import datetime, timezone
from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import settings
import logging

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    if url.startswith("postgresql"):
        return {
            "pool_pre_ping": True,
            "connect_args": {
                "options": f"-c statement_timeout={settings.DB_STATEMENT_TIMEOUT_MS}"
            },
        }
    return {}


engine = create_engine(
    settings.DATABASE_URL, echo=settings.SQL_ECHO, **_engine_kwargs(settings.DATABASE_URL)
)

if engine.dialect.name == "sqlite":

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        # SQLite ignora ON DELETE CASCADE sin este pragma
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def utcnow() -> datetime:
    """Hora UTC sin zona, con microsegundos (CURRENT_TIMESTAMP de SQLite solo tiene segundos)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _import_models():
    # Registrar todas las tablas en Base.metadata
    from app.models import order, product, user  # noqa: F401


def init_db():
    """
    Inicializa la base de datos creando todas las tablas.
    """
    _import_models()
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Error creando tablas: {e}")
        raise
    logger.info("Tablas de base de datos creadas")


def reset_db():
    """Drop all tables and recreate them."""
    _import_models()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    logger.info("All tables dropped and recreated")
