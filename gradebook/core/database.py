from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import QueuePool, StaticPool
from .config import settings
import logging

logger = logging.getLogger(__name__)

# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================

def build_engine(database_url: str) -> Engine:
    """
    Create a database engine for the given URL.

    PostgreSQL gets a connection pool sized from settings. SQLite is used for
    local runs and tests: connections may cross threads (FastAPI runs sync
    endpoints in a threadpool) and an in-memory database shares one connection.
    """
    if database_url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        new_engine = create_engine(database_url, echo=settings.DB_ECHO_SQL, **options)
    else:
        new_engine = create_engine(
            database_url,

            # Connection pool settings
            poolclass=QueuePool,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,

            # Test connection before using (detect disconnects)
            pool_pre_ping=True,

            echo=settings.DB_ECHO_SQL,

            connect_args={
                "connect_timeout": 10,
            }
        )

    event.listen(new_engine, "connect", set_sqlite_pragma)
    event.listen(new_engine, "checkout", receive_checkout)
    return new_engine


# =============================================================================
# EVENT LISTENERS
# =============================================================================

def set_sqlite_pragma(dbapi_conn, connection_record):
    """
    Event listener for new database connections.
    SQLite does not enforce foreign keys unless asked to on every connection.
    """
    module = type(dbapi_conn).__module__
    if module.startswith("sqlite3") or module.startswith("pysqlite"):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
    if settings.DEBUG:
        logger.debug("New database connection established")


def receive_checkout(dbapi_conn, connection_record, connection_proxy):
    """
    Event listener when connection is retrieved from pool.
    """
    if settings.DEBUG:
        logger.debug("Connection checked out from pool")


engine = build_engine(settings.DATABASE_URL)


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False
)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def create_database_tables(bind: Engine = None):
    """
    Create all database tables defined in models.

    Only use this in development and tests. In production, use Alembic
    migrations instead.
    """
    # Register every model on Base.metadata
    from gradebook.models import admin, mark, school_class, session, student, subject  # noqa: F401

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables created successfully")


def drop_database_tables(bind: Engine = None):
    """
    Drop all database tables.

    This will delete all data! Only use in development/testing.
    """
    logger.warning("Dropping all database tables...")
    Base.metadata.drop_all(bind=bind or engine)
    logger.info("Database tables dropped")


def check_database_connection() -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection successful, False otherwise
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("Database connection successful")
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


# =============================================================================
# INITIALIZATION
# =============================================================================

def init_db():
    """
    Initialize database.
    Run this when starting the application.
    """
    logger.info("Initializing database...")

    if not check_database_connection():
        raise RuntimeError("Cannot connect to database!")

    if settings.AUTO_CREATE_TABLES:
        create_database_tables()

    logger.info("Database initialized successfully")


if __name__ == "__main__":
    """Test database connection when running this file directly."""
    logging.basicConfig(level=logging.INFO)

    from .config import print_config
    print_config()

    if check_database_connection():
        db: Session = SessionLocal()
        print("Session created successfully!")
        db.close()
    else:
        print("Connection failed!")
