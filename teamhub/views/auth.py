from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.request import Request
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiResponse

from teamhub.constants.messages import AppMessages
from teamhub.dto.user_dto import RegisterUserDTO
from teamhub.dto.responses.error_response import ApiErrorResponse
from teamhub.dto.responses.team_response import MessageResponse
from teamhub.dto.responses.user_response import UserResponse
from teamhub.serializers.auth_serializer import LoginSerializer, RegisterSerializer
from teamhub.services.user_service import UserService
from teamhub.utils.cookie_utils import clear_auth_cookies, set_auth_cookies
from teamhub.utils.jwt_utils import generate_token_pair
from teamhub.utils.permissions import IsAuthenticatedSession


class RegisterView(APIView):
    @extend_schema(
        operation_id="register_user",
        summary="Register a user",
        description="Create a user account with a role of manager, director or member.",
        tags=["auth"],
        request=RegisterSerializer,
        responses={
            201: OpenApiResponse(response=UserResponse, description="User registered successfully"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Validation error or email already registered"),
        },
    )
    def post(self, request: Request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        response: UserResponse = UserService.register_user(RegisterUserDTO(**serializer.validated_data))
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_201_CREATED)


class LoginView(APIView):
    @extend_schema(
        operation_id="login",
        summary="Log in with email and password",
        description="Check the credentials and set the access and refresh token cookies.",
        tags=["auth"],
        request=LoginSerializer,
        responses={
            200: OpenApiResponse(response=UserResponse, description="Login successful"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Validation error"),
            401: OpenApiResponse(response=ApiErrorResponse, description="Invalid email or password"),
        },
    )
    def post(self, request: Request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = UserService.authenticate(serializer.validated_data["email"], serializer.validated_data["password"])
        tokens = generate_token_pair({"user_id": user.id})

        body = UserResponse(data=user, message=AppMessages.LOGIN_SUCCESSFUL)
        response = Response(data=body.model_dump(mode="json"), status=status.HTTP_200_OK)
        return set_auth_cookies(response, tokens)


class LogoutView(APIView):
    @extend_schema(
        operation_id="logout",
        summary="Log out",
        description="Clear the authentication cookies.",
        tags=["auth"],
        request=None,
        responses={200: OpenApiResponse(response=MessageResponse, description="Logout successful")},
    )
    def post(self, request: Request):
        body = MessageResponse(message=AppMessages.LOGOUT_SUCCESSFUL)
        response = Response(data=body.model_dump(mode="json"), status=status.HTTP_200_OK)
        return clear_auth_cookies(response)


class MeView(APIView):
    permission_classes = [IsAuthenticatedSession]

    @extend_schema(
        operation_id="get_current_user",
        summary="Get the logged-in user",
        tags=["auth"],
        responses={
            200: OpenApiResponse(response=UserResponse, description="Current user"),
            401: OpenApiResponse(response=ApiErrorResponse, description="Unauthorized"),
        },
    )
    def get(self, request: Request):
        user = UserService.get_user_by_id(request.user_id)
        body = UserResponse(data=user)
        return Response(data=body.model_dump(mode="json"), status=status.HTTP_200_OK)
