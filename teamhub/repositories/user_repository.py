import logging
from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from teamhub.exceptions.auth_exceptions import UserAlreadyExistsError
from teamhub.models.user import UserModel
from teamhub.repositories.common.mongo_repository import MongoRepository

logger = logging.getLogger(__name__)


class UserRepository(MongoRepository):
    collection_name = UserModel.collection_name

    @classmethod
    def get_by_id(cls, user_id: str) -> Optional[UserModel]:
        if not ObjectId.is_valid(user_id):
            return None
        collection = cls.get_collection()
        doc = collection.find_one({"_id": ObjectId(user_id)})
        return UserModel(**doc) if doc else None

    @classmethod
    def get_by_email(cls, email: str) -> Optional[UserModel]:
        collection = cls.get_collection()
        doc = collection.find_one({"email": email.lower()})
        return UserModel(**doc) if doc else None

    @classmethod
    def create(cls, user: UserModel) -> UserModel:
        collection = cls.get_collection()
        user.email = user.email.lower()
        user.createdAt = datetime.now(timezone.utc)
        user.updatedAt = user.createdAt

        user_dict = user.model_dump(by_alias=True, exclude_none=True)
        try:
            insert_result = collection.insert_one(user_dict)
        except DuplicateKeyError as e:
            logger.info(f"Unique index rejected user email {user.email!r}")
            raise UserAlreadyExistsError() from e
        user.id = insert_result.inserted_id
        return user
