import logging

from django.contrib.auth.hashers import check_password, make_password

from teamhub.constants.messages import AppMessages
from teamhub.dto.user_dto import RegisterUserDTO, UserDTO
from teamhub.dto.responses.user_response import UserResponse
from teamhub.exceptions.auth_exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundException,
)
from teamhub.models.user import UserModel
from teamhub.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    @classmethod
    def register_user(cls, dto: RegisterUserDTO) -> UserResponse:
        if UserRepository.get_by_email(dto.email):
            raise UserAlreadyExistsError()

        user = UserModel(
            email=dto.email,
            password=make_password(dto.password),
            name=dto.name.strip(),
            role=dto.role,
        )
        created_user = UserRepository.create(user)
        logger.info(f"Registered user {created_user.id} with role {created_user.role}")
        return UserResponse(data=UserDTO.from_model(created_user), message=AppMessages.USER_REGISTERED)

    @classmethod
    def authenticate(cls, email: str, password: str) -> UserDTO:
        """
        Check an email/password pair against the stored hash.

        Raises:
            InvalidCredentialsError: for an unknown email or a wrong password alike
        """
        user = UserRepository.get_by_email(email)
        if user is None or not check_password(password, user.password):
            logger.info("Rejected login attempt")
            raise InvalidCredentialsError()
        return UserDTO.from_model(user)

    @classmethod
    def get_user_by_id(cls, user_id: str) -> UserDTO:
        user = UserRepository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundException()
        return UserDTO.from_model(user)
