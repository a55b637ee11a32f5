import logging
import re
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from teamhub.exceptions.team_exceptions import DuplicateTeamNameException, InvalidTeamIdException
from teamhub.models.team import TeamModel
from teamhub.repositories.common.mongo_repository import MongoRepository

logger = logging.getLogger(__name__)

LIST_SORT = [("displayOrder", ASCENDING), ("createdAt", DESCENDING), ("_id", ASCENDING)]


class TeamRepository(MongoRepository):
    collection_name = TeamModel.collection_name

    @classmethod
    def _to_object_id(cls, team_id: str) -> ObjectId:
        if isinstance(team_id, ObjectId):
            return team_id
        if not ObjectId.is_valid(team_id):
            raise InvalidTeamIdException(team_id)
        return ObjectId(team_id)

    @classmethod
    def _build_search_filter(cls, search: str | None) -> dict:
        if not search:
            return {}
        regex_pattern = {"$regex": re.escape(search), "$options": "i"}
        return {
            "$or": [
                {"teamName": regex_pattern},
                {"teamDescription": regex_pattern},
                {"members.name": regex_pattern},
            ]
        }

    @classmethod
    def create(cls, team: TeamModel) -> TeamModel:
        """
        Creates a new team in the repository.
        """
        teams_collection = cls.get_collection()
        team.createdAt = datetime.now(timezone.utc)
        team.updatedAt = team.createdAt

        team_dict = team.model_dump(by_alias=True, exclude_none=True)
        try:
            insert_result = teams_collection.insert_one(team_dict)
        except DuplicateKeyError as e:
            logger.info(f"Unique index rejected team name {team.teamName!r}: {e}")
            raise DuplicateTeamNameException() from e
        team.id = insert_result.inserted_id
        return team

    @classmethod
    def get_by_id(cls, team_id: str) -> Optional[TeamModel]:
        teams_collection = cls.get_collection()
        team_data = teams_collection.find_one({"_id": cls._to_object_id(team_id)})
        if team_data:
            return TeamModel(**team_data)
        return None

    @classmethod
    def get_by_name(cls, team_name: str, exclude_team_id: str | None = None) -> Optional[TeamModel]:
        """
        Exact, case-sensitive lookup by team name, optionally ignoring one team.
        """
        teams_collection = cls.get_collection()
        query: dict = {"teamName": team_name}
        if exclude_team_id:
            query["_id"] = {"$ne": cls._to_object_id(exclude_team_id)}
        team_data = teams_collection.find_one(query)
        if team_data:
            return TeamModel(**team_data)
        return None

    @classmethod
    def get_max_display_order(cls) -> Optional[int]:
        teams_collection = cls.get_collection()
        team_data = teams_collection.find_one({}, projection={"displayOrder": 1}, sort=[("displayOrder", DESCENDING)])
        if team_data is None:
            return None
        return team_data.get("displayOrder", 0)

    @classmethod
    def list(cls, search: str | None, page: int, limit: int) -> Tuple[List[TeamModel], int]:
        """
        Search teams by name, description or member name and return one page plus the total match count.
        """
        teams_collection = cls.get_collection()
        query_filter = cls._build_search_filter(search)
        skip = (page - 1) * limit

        total_count = teams_collection.count_documents(query_filter)
        cursor = teams_collection.find(query_filter).sort(LIST_SORT).skip(skip).limit(limit)
        teams = [TeamModel(**doc) for doc in cursor]
        return teams, total_count

    @classmethod
    def update(cls, team_id: str, update_data: dict) -> Optional[TeamModel]:
        """
        Merge ``update_data`` into the team and return the post-update document.
        """
        teams_collection = cls.get_collection()
        update_data = {**update_data, "updatedAt": datetime.now(timezone.utc)}
        try:
            updated_doc = teams_collection.find_one_and_update(
                {"_id": cls._to_object_id(team_id)},
                {"$set": update_data},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            logger.info(f"Unique index rejected update of team {team_id}: {e}")
            raise DuplicateTeamNameException() from e

        if updated_doc:
            return TeamModel(**updated_doc)
        return None

    @classmethod
    def shift_display_orders(cls, moved_team_id: str, old_order: int, new_order: int) -> int:
        """
        Close the gap left by moving one team from ``old_order`` to ``new_order``.

        Moving down (old < new) decrements every other team in (old, new];
        moving up (new < old) increments every other team in [new, old).
        Returns the number of teams shifted.
        """
        if old_order == new_order:
            return 0

        teams_collection = cls.get_collection()
        if old_order < new_order:
            order_range = {"$gt": old_order, "$lte": new_order}
            delta = -1
        else:
            order_range = {"$gte": new_order, "$lt": old_order}
            delta = 1

        result = teams_collection.update_many(
            {"_id": {"$ne": cls._to_object_id(moved_team_id)}, "displayOrder": order_range},
            {"$inc": {"displayOrder": delta}, "$set": {"updatedAt": datetime.now(timezone.utc)}},
        )
        return result.modified_count

    @classmethod
    def delete_by_id(cls, team_id: str) -> bool:
        teams_collection = cls.get_collection()
        result = teams_collection.delete_one({"_id": cls._to_object_id(team_id)})
        return result.deleted_count > 0

    @classmethod
    def delete_many(cls, team_ids: List[str]) -> int:
        """
        Delete every team whose id is listed. Ids that are malformed or no longer
        exist simply do not match; the number actually removed is returned.
        """
        object_ids = [ObjectId(team_id) for team_id in team_ids if ObjectId.is_valid(team_id)]
        if not object_ids:
            return 0

        teams_collection = cls.get_collection()
        result = teams_collection.delete_many({"_id": {"$in": object_ids}})
        return result.deleted_count
