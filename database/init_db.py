import logging

from sqlalchemy import text
from tenacity import retry, stop_after_attempt, wait_fixed

from database.database import get_engine
from database.models import Base

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@retry(stop=stop_after_attempt(5), wait=wait_fixed(2))
def init_db(engine=None):
    """Create all tables, waiting for the database to accept connections."""
    engine = engine or get_engine()
    logger.info("Initializing database...")
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("Database is reachable.")

        Base.metadata.create_all(bind=engine)
        logger.info("Tables created or verified.")

    except Exception as e:
        logger.error(f"Error initializing DB: {e}")
        raise


if __name__ == "__main__":
    init_db()
