import logging

from django.conf import settings
from rest_framework import status
from django.http import JsonResponse
from teamhub.utils.jwt_utils import (
    validate_access_token,
    validate_refresh_token,
    generate_access_token,
)
from teamhub.utils.cookie_utils import get_cookie_config
from teamhub.exceptions.auth_exceptions import (
    TokenExpiredError,
    TokenInvalidError,
    RefreshTokenExpiredError,
    TokenMissingError,
)
from teamhub.constants.messages import AuthErrorMessages, ApiErrors
from teamhub.dto.responses.error_response import ApiErrorResponse, ApiErrorDetail, ApiErrorSource
from teamhub.repositories.user_repository import UserRepository
from teamhub.services.permission_service import PermissionService

logger = logging.getLogger(__name__)


class JWTAuthenticationMiddleware:
    """
    Session gate: every non-public path needs a valid access cookie, or a valid
    refresh cookie from which a new access cookie is issued.
    """

    def __init__(self, get_response) -> None:
        self.get_response = get_response

    def __call__(self, request):
        path = request.path

        if self._is_public_path(path):
            return self.get_response(request)

        try:
            if not self._try_authentication(request):
                raise TokenMissingError(AuthErrorMessages.AUTHENTICATION_REQUIRED)
        except (TokenMissingError, TokenExpiredError, TokenInvalidError, RefreshTokenExpiredError) as e:
            return self._handle_auth_error(e)
        except Exception:
            logger.exception("Unexpected failure while authenticating request")
            error_response = ApiErrorResponse(
                statusCode=status.HTTP_500_INTERNAL_SERVER_ERROR,
                message=ApiErrors.INTERNAL_SERVER_ERROR,
                errors=[ApiErrorDetail(detail=ApiErrors.INTERNAL_SERVER_ERROR)],
            )
            return JsonResponse(
                data=error_response.model_dump(mode="json", exclude_none=True),
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        response = self.get_response(request)
        return self._process_response(request, response)

    def _try_authentication(self, request) -> bool:
        access_token = request.COOKIES.get(settings.COOKIE_SETTINGS.get("ACCESS_COOKIE_NAME"))
        if access_token:
            try:
                payload = validate_access_token(access_token)
                self._set_user_data(request, payload)
                return True
            except (TokenExpiredError, TokenInvalidError):
                pass

        return self._try_refresh(request)

    def _try_refresh(self, request) -> bool:
        """Try to refresh access token"""
        refresh_token = request.COOKIES.get(settings.COOKIE_SETTINGS.get("REFRESH_COOKIE_NAME"))
        if not refresh_token:
            return False

        try:
            payload = validate_refresh_token(refresh_token)
        except (RefreshTokenExpiredError, TokenInvalidError):
            return False

        self._set_user_data(request, payload)
        request._new_access_token = generate_access_token({"user_id": payload["user_id"]})
        request._access_token_expires = settings.JWT_CONFIG["ACCESS_TOKEN_LIFETIME"]
        return True

    def _set_user_data(self, request, payload):
        """Set user data on request with database verification"""
        user_id = payload["user_id"]
        user = UserRepository.get_by_id(user_id)
        if not user:
            raise TokenInvalidError(AuthErrorMessages.TOKEN_INVALID)

        request.user_id = user_id
        request.user_email = user.email
        request.user_role = PermissionService.to_role(user.role)

    def _process_response(self, request, response):
        """Process response and set new cookies if token was refreshed"""
        if hasattr(request, "_new_access_token"):
            response.set_cookie(
                settings.COOKIE_SETTINGS.get("ACCESS_COOKIE_NAME"),
                request._new_access_token,
                max_age=request._access_token_expires,
                **get_cookie_config(),
            )
        return response

    def _is_public_path(self, path: str) -> bool:
        return any(path.startswith(public_path) for public_path in settings.PUBLIC_PATHS)

    def _handle_auth_error(self, exception):
        error_response = ApiErrorResponse(
            statusCode=status.HTTP_401_UNAUTHORIZED,
            message=str(exception),
            errors=[
                ApiErrorDetail(
                    source={ApiErrorSource.HEADER: "Cookie"},
                    title=ApiErrors.AUTHENTICATION_FAILED,
                    detail=str(exception),
                )
            ],
        )
        return JsonResponse(
            data=error_response.model_dump(mode="json", exclude_none=True),
            status=status.HTTP_401_UNAUTHORIZED,
        )

