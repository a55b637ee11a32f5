from datetime import datetime, timezone
from unittest import TestCase
from unittest.mock import patch

from bson import ObjectId
from django.contrib.auth.hashers import check_password, make_password

from teamhub.constants.messages import AppMessages
from teamhub.constants.role import UserRole
from teamhub.dto.user_dto import RegisterUserDTO
from teamhub.exceptions.auth_exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundException,
)
from teamhub.models.user import UserModel
from teamhub.services.user_service import UserService


class UserServiceTests(TestCase):
    def setUp(self):
        self.user = UserModel(
            id=ObjectId(),
            email="manager@example.com",
            password=make_password("password123"),
            name="John Manager",
            role=UserRole.MANAGER,
            createdAt=datetime.now(timezone.utc),
        )

    @patch("teamhub.services.user_service.UserRepository.create")
    @patch("teamhub.services.user_service.UserRepository.get_by_email")
    def test_register_user_hashes_password(self, mock_get_by_email, mock_create):
        mock_get_by_email.return_value = None
        mock_create.side_effect = lambda user: user.model_copy(update={"id": ObjectId()})
        dto = RegisterUserDTO(email="new@example.com", password="secret1", name=" New User ", role="director")

        response = UserService.register_user(dto)

        stored_user = mock_create.call_args[0][0]
        self.assertNotEqual(stored_user.password, "secret1")
        self.assertTrue(check_password("secret1", stored_user.password))
        self.assertEqual(stored_user.name, "New User")
        self.assertEqual(response.data.role, "director")
        self.assertEqual(response.message, AppMessages.USER_REGISTERED)
        self.assertNotIn("password", response.model_dump())

    @patch("teamhub.services.user_service.UserRepository.create")
    @patch("teamhub.services.user_service.UserRepository.get_by_email")
    def test_register_existing_email_is_rejected(self, mock_get_by_email, mock_create):
        mock_get_by_email.return_value = self.user
        dto = RegisterUserDTO(email="manager@example.com", password="secret1", name="Someone", role="member")

        with self.assertRaises(UserAlreadyExistsError):
            UserService.register_user(dto)

        mock_create.assert_not_called()

    @patch("teamhub.services.user_service.UserRepository.get_by_email")
    def test_authenticate_with_correct_password(self, mock_get_by_email):
        mock_get_by_email.return_value = self.user

        user = UserService.authenticate("manager@example.com", "password123")

        self.assertEqual(user.id, str(self.user.id))
        self.assertEqual(user.role, "manager")

    @patch("teamhub.services.user_service.UserRepository.get_by_email")
    def test_authenticate_with_wrong_password(self, mock_get_by_email):
        mock_get_by_email.return_value = self.user

        with self.assertRaises(InvalidCredentialsError):
            UserService.authenticate("manager@example.com", "wrong-password")

    @patch("teamhub.services.user_service.UserRepository.get_by_email")
    def test_authenticate_unknown_email(self, mock_get_by_email):
        mock_get_by_email.return_value = None

        with self.assertRaises(InvalidCredentialsError):
            UserService.authenticate("nobody@example.com", "password123")

    @patch("teamhub.services.user_service.UserRepository.get_by_id")
    def test_get_user_by_id_not_found(self, mock_get_by_id):
        mock_get_by_id.return_value = None

        with self.assertRaises(UserNotFoundException):
            UserService.get_user_by_id(str(ObjectId()))
