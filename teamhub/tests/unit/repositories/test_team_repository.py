from unittest import TestCase
from unittest.mock import MagicMock, patch

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from teamhub.exceptions.team_exceptions import DuplicateTeamNameException, InvalidTeamIdException
from teamhub.models.team import TeamModel
from teamhub.repositories.team_repository import TeamRepository
from teamhub.tests.fixtures.team import team_document, team_model


class TeamRepositoryTests(TestCase):
    def setUp(self):
        self.mock_collection = MagicMock()
        self.mock_db_manager = MagicMock()
        self.mock_db_manager.get_collection.return_value = self.mock_collection
        patcher = patch("teamhub.repositories.common.mongo_repository.DatabaseManager")
        self.addCleanup(patcher.stop)
        patcher.start().return_value = self.mock_db_manager
        self.team_id = str(ObjectId())

    def test_create_sets_timestamps_and_id(self):
        inserted_id = ObjectId()
        self.mock_collection.insert_one.return_value = MagicMock(inserted_id=inserted_id)
        team = team_model()
        team.id = None
        team.createdAt = None

        created = TeamRepository.create(team)

        inserted_doc = self.mock_collection.insert_one.call_args[0][0]
        self.assertNotIn("_id", inserted_doc)
        self.assertEqual(inserted_doc["approvedByManager"], "pending")
        self.assertEqual(inserted_doc["members"][0]["gender"], "Female")
        self.assertIsNotNone(inserted_doc["createdAt"])
        self.assertEqual(inserted_doc["createdAt"], inserted_doc["updatedAt"])
        self.assertEqual(created.id, inserted_id)

    def test_create_maps_duplicate_key_to_duplicate_name(self):
        self.mock_collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key error")

        with self.assertRaises(DuplicateTeamNameException):
            TeamRepository.create(team_model())

    def test_get_by_id_returns_model(self):
        doc = team_document()
        self.mock_collection.find_one.return_value = doc

        result = TeamRepository.get_by_id(str(doc["_id"]))

        self.mock_collection.find_one.assert_called_once_with({"_id": doc["_id"]})
        self.assertIsInstance(result, TeamModel)
        self.assertEqual(result.teamName, "Team Alpha")

    def test_get_by_id_not_found(self):
        self.mock_collection.find_one.return_value = None

        self.assertIsNone(TeamRepository.get_by_id(self.team_id))

    def test_get_by_id_with_malformed_id(self):
        with self.assertRaises(InvalidTeamIdException):
            TeamRepository.get_by_id("not-an-id")

        self.mock_collection.find_one.assert_not_called()

    def test_get_by_name_excludes_own_team(self):
        self.mock_collection.find_one.return_value = None

        TeamRepository.get_by_name("Team Alpha", exclude_team_id=self.team_id)

        self.mock_collection.find_one.assert_called_once_with(
            {"teamName": "Team Alpha", "_id": {"$ne": ObjectId(self.team_id)}}
        )

    def test_get_max_display_order(self):
        self.mock_collection.find_one.return_value = {"_id": ObjectId(), "displayOrder": 7}

        self.assertEqual(TeamRepository.get_max_display_order(), 7)
        self.mock_collection.find_one.assert_called_once_with(
            {}, projection={"displayOrder": 1}, sort=[("displayOrder", DESCENDING)]
        )

    def test_get_max_display_order_on_empty_collection(self):
        self.mock_collection.find_one.return_value = None

        self.assertIsNone(TeamRepository.get_max_display_order())

    def test_list_paginates_with_stable_sort(self):
        docs = [team_document(team_name="Team Alpha"), team_document(team_name="Team Beta")]
        cursor = MagicMock()
        cursor.sort.return_value = cursor
        cursor.skip.return_value = cursor
        cursor.limit.return_value = cursor
        cursor.__iter__.return_value = iter(docs)
        self.mock_collection.find.return_value = cursor
        self.mock_collection.count_documents.return_value = 12

        teams, total = TeamRepository.list(search=None, page=2, limit=10)

        self.mock_collection.find.assert_called_once_with({})
        cursor.sort.assert_called_once_with(
            [("displayOrder", ASCENDING), ("createdAt", DESCENDING), ("_id", ASCENDING)]
        )
        cursor.skip.assert_called_once_with(10)
        cursor.limit.assert_called_once_with(10)
        self.assertEqual(total, 12)
        self.assertEqual([team.teamName for team in teams], ["Team Alpha", "Team Beta"])

    def test_list_search_escapes_regex_and_matches_member_names(self):
        cursor = MagicMock()
        cursor.sort.return_value = cursor
        cursor.skip.return_value = cursor
        cursor.limit.return_value = cursor
        cursor.__iter__.return_value = iter([])
        self.mock_collection.find.return_value = cursor
        self.mock_collection.count_documents.return_value = 0

        TeamRepository.list(search="a.b+", page=1, limit=10)

        expected_pattern = {"$regex": r"a\.b\+", "$options": "i"}
        expected_filter = {
            "$or": [
                {"teamName": expected_pattern},
                {"teamDescription": expected_pattern},
                {"members.name": expected_pattern},
            ]
        }
        self.mock_collection.count_documents.assert_called_once_with(expected_filter)
        self.mock_collection.find.assert_called_once_with(expected_filter)

    def test_update_returns_post_update_document(self):
        doc = team_document(teamDescription="Updated")
        self.mock_collection.find_one_and_update.return_value = doc

        result = TeamRepository.update(str(doc["_id"]), {"teamDescription": "Updated"})

        args, kwargs = self.mock_collection.find_one_and_update.call_args
        self.assertEqual(args[0], {"_id": doc["_id"]})
        self.assertEqual(args[1]["$set"]["teamDescription"], "Updated")
        self.assertIn("updatedAt", args[1]["$set"])
        self.assertEqual(kwargs["return_document"], ReturnDocument.AFTER)
        self.assertEqual(result.teamDescription, "Updated")

    def test_update_missing_team_returns_none(self):
        self.mock_collection.find_one_and_update.return_value = None

        self.assertIsNone(TeamRepository.update(self.team_id, {"teamDescription": "Updated"}))

    def test_update_maps_duplicate_key_to_duplicate_name(self):
        self.mock_collection.find_one_and_update.side_effect = DuplicateKeyError("E11000 duplicate key error")

        with self.assertRaises(DuplicateTeamNameException):
            TeamRepository.update(self.team_id, {"teamName": "Team Beta"})

    def test_shift_when_moving_down_decrements_band(self):
        self.mock_collection.update_many.return_value = MagicMock(modified_count=2)

        shifted = TeamRepository.shift_display_orders(self.team_id, 1, 3)

        query, update = self.mock_collection.update_many.call_args[0]
        self.assertEqual(query["_id"], {"$ne": ObjectId(self.team_id)})
        self.assertEqual(query["displayOrder"], {"$gt": 1, "$lte": 3})
        self.assertEqual(update["$inc"], {"displayOrder": -1})
        self.assertEqual(shifted, 2)

    def test_shift_when_moving_up_increments_band(self):
        self.mock_collection.update_many.return_value = MagicMock(modified_count=2)

        TeamRepository.shift_display_orders(self.team_id, 3, 1)

        query, update = self.mock_collection.update_many.call_args[0]
        self.assertEqual(query["displayOrder"], {"$gte": 1, "$lt": 3})
        self.assertEqual(update["$inc"], {"displayOrder": 1})

    def test_shift_with_same_order_writes_nothing(self):
        self.assertEqual(TeamRepository.shift_display_orders(self.team_id, 2, 2), 0)
        self.mock_collection.update_many.assert_not_called()

    def test_delete_by_id(self):
        self.mock_collection.delete_one.return_value = MagicMock(deleted_count=1)

        self.assertTrue(TeamRepository.delete_by_id(self.team_id))
        self.mock_collection.delete_one.assert_called_once_with({"_id": ObjectId(self.team_id)})

    def test_delete_by_id_nothing_deleted(self):
        self.mock_collection.delete_one.return_value = MagicMock(deleted_count=0)

        self.assertFalse(TeamRepository.delete_by_id(self.team_id))

    def test_delete_many_ignores_malformed_ids(self):
        self.mock_collection.delete_many.return_value = MagicMock(deleted_count=1)

        deleted = TeamRepository.delete_many([self.team_id, "not-an-id"])

        self.mock_collection.delete_many.assert_called_once_with({"_id": {"$in": [ObjectId(self.team_id)]}})
        self.assertEqual(deleted, 1)

    def test_delete_many_with_only_malformed_ids_skips_database(self):
        self.assertEqual(TeamRepository.delete_many(["bad", "worse"]), 0)
        self.mock_collection.delete_many.assert_not_called()
