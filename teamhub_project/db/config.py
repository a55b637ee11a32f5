import logging
import threading
from typing import Optional

from django.conf import settings
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    Process-wide MongoDB client holder. The client is created lazily from
    MONGODB_URI / DB_NAME so that importing repositories never opens a connection.
    """

    __instance: Optional["DatabaseManager"] = None
    _lock = threading.Lock()

    def __new__(cls, *args, **kwargs):
        if cls.__instance is None:
            with cls._lock:
                if cls.__instance is None:
                    instance = super().__new__(cls, *args, **kwargs)
                    instance._database_client = None
                    instance._db = None
                    cls.__instance = instance
        return cls.__instance

    @classmethod
    def reset(cls):
        """Drop the cached client so the next access reconnects with current settings."""
        with cls._lock:
            if cls.__instance is not None and cls.__instance._database_client is not None:
                cls.__instance._database_client.close()
            cls.__instance = None

    def _get_database_client(self) -> MongoClient:
        if self._database_client is None:
            with self._lock:
                # Another thread may have created the client while this one waited
                if self._database_client is None:
                    self._database_client = MongoClient(settings.MONGODB_URI, tz_aware=True)
                    logger.info("MongoDB client created")
        return self._database_client

    def get_database(self) -> Database:
        if self._db is None:
            self._db = self._get_database_client()[settings.DB_NAME]
        return self._db

    def get_collection(self, collection_name: str) -> Collection:
        return self.get_database()[collection_name]

    def check_database_health(self) -> bool:
        try:
            self._get_database_client().admin.command("ping")
            return True
        except Exception as e:
            logger.error(f"MongoDB health check failed: {e}")
            return False
