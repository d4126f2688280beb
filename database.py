import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from config import get_db_url
from models import Base

logger = logging.getLogger(__name__)

DATABASE_URL = get_db_url()

# SQLite-specific configuration
if "sqlite" in DATABASE_URL:
    engine = create_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},
        echo=False,  # Set to True for SQL debug logging
    )
else:
    engine = create_engine(DATABASE_URL, echo=False, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables initialized successfully!")


if __name__ == "__main__":
    init_db()
