import logging
from typing import Callable, List

from pymongo import ASCENDING

from teamhub_project.db.config import DatabaseManager
from teamhub.models.team import TeamModel
from teamhub.models.user import UserModel

logger = logging.getLogger(__name__)


def migrate_team_indexes() -> bool:
    """
    Create the indexes the teams collection relies on.
    The unique index on teamName is the authoritative guard against duplicate names
    when two creates race past the service-level existence check.
    Idempotent: create_index is a no-op for an identical existing index.
    """
    logger.info("Starting team indexes migration")
    try:
        collection = DatabaseManager().get_collection(TeamModel.collection_name)
        collection.create_index([("teamName", ASCENDING)], unique=True, name="teamName_unique")
        collection.create_index([("displayOrder", ASCENDING)], name="displayOrder_asc")
        logger.info("Team indexes migration completed")
        return True
    except Exception as e:
        logger.error(f"Team indexes migration failed: {e}")
        return False


def migrate_user_indexes() -> bool:
    logger.info("Starting user indexes migration")
    try:
        collection = DatabaseManager().get_collection(UserModel.collection_name)
        collection.create_index([("email", ASCENDING)], unique=True, name="email_unique")
        logger.info("User indexes migration completed")
        return True
    except Exception as e:
        logger.error(f"User indexes migration failed: {e}")
        return False


MIGRATIONS: List[Callable[[], bool]] = [
    migrate_team_indexes,
    migrate_user_indexes,
]


def run_all_migrations() -> bool:
    """
    Run every migration, continuing past failures.

    Returns:
        bool: True if all migrations succeeded, False otherwise
    """
    results = [migration() for migration in MIGRATIONS]
    success_count = sum(1 for result in results if result)
    logger.info(f"Migrations completed: {success_count}/{len(results)} successful")
    return all(results)
