from django.apps import AppConfig
import logging
import sys

logger = logging.getLogger(__name__)


class TeamhubConfig(AppConfig):
    name = "teamhub"

    def ready(self):
        """Ensure MongoDB indexes when the development server starts"""

        if "test" in sys.argv:
            logger.info("Test mode detected - skipping database initialization")
            return

        if "runserver" not in sys.argv:
            return

        from teamhub_project.db.init import initialize_database

        if not initialize_database():
            logger.warning("Database initialization failed - run 'manage.py migrate_indexes' once MongoDB is reachable")
