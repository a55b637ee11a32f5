from datetime import datetime, timedelta, timezone
from http import HTTPStatus

from bson import ObjectId
from django.urls import reverse

from teamhub.constants.messages import ApiErrors, AuthErrorMessages
from teamhub.tests.fixtures.team import member_document, member_payload, team_document, team_payload
from teamhub.tests.integration.base_mongo_test import AuthenticatedMongoTestCase


class TeamCreateAndReadIntegrationTest(AuthenticatedMongoTestCase):
    def test_create_then_get_round_trip(self):
        payload = team_payload(
            team_name="  Team Alpha ",
            members=[member_payload(), member_payload(name="Bob Smith", gender="Male", contact_no="9876543210")],
        )

        create_response = self.client.post(reverse("teams"), payload, format="json")

        self.assertEqual(create_response.status_code, HTTPStatus.CREATED)
        created = create_response.data["data"]
        self.assertEqual(created["teamName"], "Team Alpha")
        self.assertEqual(created["displayOrder"], 1)
        self.assertEqual(created["approvedByManager"], "pending")
        self.assertEqual(created["approvedByDirector"], "pending")

        get_response = self.client.get(reverse("team_detail", args=[created["id"]]))

        self.assertEqual(get_response.status_code, HTTPStatus.OK)
        fetched = get_response.data["data"]
        self.assertEqual(fetched["teamName"], "Team Alpha")
        self.assertEqual([member["name"] for member in fetched["members"]], ["Alice Johnson", "Bob Smith"])
        self.assertTrue(fetched["members"][0]["dateOfBirth"].startswith("1990-05-15T00:00:00"))

    def test_new_team_goes_after_the_last_one(self):
        self.db.teams.insert_one(team_document(team_name="Team Beta", display_order=7))

        response = self.client.post(reverse("teams"), team_payload(), format="json")

        self.assertEqual(response.data["data"]["displayOrder"], 8)

    def test_duplicate_name_is_rejected_without_write(self):
        self.db.teams.insert_one(team_document(team_name="Team Alpha"))

        response = self.client.post(reverse("teams"), team_payload(team_name="Team Alpha"), format="json")

        self.assertEqual(response.status_code, HTTPStatus.BAD_REQUEST)
        self.assertEqual(response.data["message"], ApiErrors.TEAM_NAME_EXISTS)
        self.assertEqual(self.db.teams.count_documents({}), 1)

    def test_get_missing_team(self):
        response = self.client.get(reverse("team_detail", args=[str(ObjectId())]))

        self.assertEqual(response.status_code, HTTPStatus.NOT_FOUND)
        self.assertEqual(response.data["message"], ApiErrors.TEAM_NOT_FOUND)

    def test_requests_without_session_are_rejected(self):
        self.client.cookies.clear()

        response = self.client.get(reverse("teams"))

        self.assertEqual(response.status_code, HTTPStatus.UNAUTHORIZED)
        self.assertEqual(response.json()["message"], AuthErrorMessages.AUTHENTICATION_REQUIRED)


class TeamListIntegrationTest(AuthenticatedMongoTestCase):
    def test_search_matches_member_names_case_insensitively(self):
        self.db.teams.insert_many(
            [
                team_document(
                    team_name="Team Alpha",
                    display_order=1,
                    members=[member_document("Alice Johnson")],
                ),
                team_document(
                    team_name="Team Beta",
                    display_order=2,
                    teamDescription="Backend development team",
                    members=[member_document("Charlie Brown", "Male", "5555555555")],
                ),
            ]
        )

        response = self.client.get(reverse("teams"), {"search": "alice"})

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual([team["teamName"] for team in response.data["data"]], ["Team Alpha"])
        self.assertEqual(response.data["pagination"]["total"], 1)

    def test_search_treats_regex_characters_literally(self):
        self.db.teams.insert_many(
            [team_document(team_name="Team (A)", display_order=1), team_document(team_name="Team A", display_order=2)]
        )

        response = self.client.get(reverse("teams"), {"search": "(a)"})

        self.assertEqual([team["teamName"] for team in response.data["data"]], ["Team (A)"])

    def test_second_page_of_fifteen_teams(self):
        self.db.teams.insert_many([team_document(team_name=f"Team {i:02d}", display_order=i) for i in range(1, 16)])

        response = self.client.get(reverse("teams"), {"page": 2, "limit": 10})

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual(len(response.data["data"]), 5)
        self.assertEqual(response.data["data"][0]["teamName"], "Team 11")
        self.assertEqual(response.data["pagination"], {"page": 2, "limit": 10, "total": 15, "totalPages": 2})

    def test_equal_display_order_lists_newest_first(self):
        now = datetime.now(timezone.utc)
        self.db.teams.insert_many(
            [
                team_document(team_name="Older", display_order=1, created_at=now - timedelta(days=1)),
                team_document(team_name="Newer", display_order=1, created_at=now),
            ]
        )

        response = self.client.get(reverse("teams"))

        self.assertEqual([team["teamName"] for team in response.data["data"]], ["Newer", "Older"])


class TeamUpdateIntegrationTest(AuthenticatedMongoTestCase):
    def setUp(self):
        super().setUp()
        self.team = team_document(team_name="Team Alpha")
        self.db.teams.insert_one(self.team)
        self.url = reverse("team_detail", args=[str(self.team["_id"])])

    def test_partial_update_keeps_other_fields(self):
        response = self.client.patch(self.url, {"teamDescription": "Platform team"}, format="json")

        self.assertEqual(response.status_code, HTTPStatus.OK)
        stored = self.db.teams.find_one({"_id": self.team["_id"]})
        self.assertEqual(stored["teamDescription"], "Platform team")
        self.assertEqual(stored["teamName"], "Team Alpha")
        self.assertEqual(len(stored["members"]), 1)

    def test_removing_every_member_is_rejected(self):
        response = self.client.put(self.url, {"members": []}, format="json")

        self.assertEqual(response.status_code, HTTPStatus.BAD_REQUEST)
        self.assertEqual(response.data["message"], ApiErrors.LAST_MEMBER_REMOVAL)
        self.assertEqual(len(self.db.teams.find_one({"_id": self.team["_id"]})["members"]), 1)

    def test_rename_to_taken_name_is_rejected(self):
        self.db.teams.insert_one(team_document(team_name="Team Beta"))

        response = self.client.put(self.url, {"teamName": "Team Beta"}, format="json")

        self.assertEqual(response.status_code, HTTPStatus.BAD_REQUEST)
        self.assertEqual(response.data["message"], ApiErrors.TEAM_NAME_EXISTS)


class TeamDeleteIntegrationTest(AuthenticatedMongoTestCase):
    def test_delete_team(self):
        team = team_document()
        self.db.teams.insert_one(team)

        response = self.client.delete(reverse("team_detail", args=[str(team["_id"])]))

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertIsNone(self.db.teams.find_one({"_id": team["_id"]}))

        second_response = self.client.delete(reverse("team_detail", args=[str(team["_id"])]))
        self.assertEqual(second_response.status_code, HTTPStatus.NOT_FOUND)

    def test_bulk_delete_counts_only_existing_teams(self):
        team = team_document()
        self.db.teams.insert_one(team)

        response = self.client.delete(
            reverse("teams_bulk_delete"), {"teamIds": [str(team["_id"]), str(ObjectId()), "bogus"]}, format="json"
        )

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual(response.data["data"], {"deletedCount": 1})
        self.assertEqual(response.data["message"], "1 teams deleted successfully")
        self.assertEqual(self.db.teams.count_documents({}), 0)
