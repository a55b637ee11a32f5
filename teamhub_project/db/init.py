import logging
import time

from teamhub_project.db.config import DatabaseManager
from teamhub_project.db.migrations import run_all_migrations

logger = logging.getLogger(__name__)


def initialize_database(max_retries=5, retry_delay=2):
    """
    Initialize database indexes.
    Includes retry logic for Docker environments.
    """
    db_manager = DatabaseManager()

    for attempt in range(max_retries):
        if db_manager.check_database_health():
            break
        if attempt < max_retries - 1:
            logger.warning(
                f"Database health check failed, attempt {attempt + 1}. Retrying in {retry_delay} seconds..."
            )
            time.sleep(retry_delay)
        else:
            logger.error("All database connection attempts failed")
            return False

    migrations_success = run_all_migrations()
    if not migrations_success:
        logger.error("Database initialization finished with failed migrations")
        return False

    logger.info("Database initialization completed successfully")
    return True
