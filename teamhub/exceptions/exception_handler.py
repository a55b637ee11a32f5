import logging
from typing import List

from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.response import Response
from rest_framework import status
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.utils.serializer_helpers import ReturnDict

from teamhub.dto.responses.error_response import ApiErrorDetail, ApiErrorResponse, ApiErrorSource
from teamhub.constants.messages import ApiErrors, AuthErrorMessages
from teamhub.exceptions.auth_exceptions import (
    BaseAuthException,
    InvalidCredentialsError,
    RefreshTokenExpiredError,
    TokenExpiredError,
    TokenInvalidError,
    TokenMissingError,
    UserAlreadyExistsError,
    UserNotFoundException,
)
from teamhub.exceptions.permission_exceptions import PermissionDeniedError
from teamhub.exceptions.team_exceptions import (
    BusinessRuleViolation,
    InvalidTeamIdException,
    TeamNotFoundException,
)

logger = logging.getLogger(__name__)


def format_validation_errors(errors, parent_field: str | None = None) -> List[ApiErrorDetail]:
    """
    Flatten DRF serializer errors into ApiErrorDetail entries. Nested member errors
    are reported against dotted fields such as ``members.0.contactNo``.
    """
    formatted_errors = []
    if isinstance(errors, ReturnDict | dict):
        for field, messages in errors.items():
            field_name = f"{parent_field}.{field}" if parent_field else str(field)
            details = messages if isinstance(messages, list) else [messages]
            for index, message_detail in enumerate(details):
                if isinstance(message_detail, dict):
                    nested_field = f"{field_name}.{index}" if isinstance(messages, list) else field_name
                    formatted_errors.extend(format_validation_errors(message_detail, nested_field))
                elif isinstance(message_detail, list):
                    formatted_errors.extend(format_validation_errors(message_detail, field_name))
                else:
                    formatted_errors.append(
                        ApiErrorDetail(detail=str(message_detail), source={ApiErrorSource.PARAMETER: field_name})
                    )
    elif isinstance(errors, list):
        for message_detail in errors:
            if isinstance(message_detail, (dict, list)):
                formatted_errors.extend(format_validation_errors(message_detail, parent_field))
            elif parent_field:
                formatted_errors.append(
                    ApiErrorDetail(detail=str(message_detail), source={ApiErrorSource.PARAMETER: parent_field})
                )
            else:
                formatted_errors.append(ApiErrorDetail(detail=str(message_detail)))
    return formatted_errors


def _team_id_source(context) -> dict | None:
    team_id = context.get("kwargs", {}).get("team_id")
    return {ApiErrorSource.PATH: "team_id"} if team_id else None


def handle_exception(exc, context):
    response = drf_exception_handler(exc, context)

    error_list = []
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    if isinstance(exc, TokenExpiredError | RefreshTokenExpiredError):
        status_code = status.HTTP_401_UNAUTHORIZED
        error_list.append(
            ApiErrorDetail(
                source={ApiErrorSource.HEADER: "Cookie"},
                title=AuthErrorMessages.TOKEN_EXPIRED_TITLE,
                detail=str(exc),
            )
        )
    elif isinstance(exc, TokenMissingError):
        status_code = status.HTTP_401_UNAUTHORIZED
        error_list.append(
            ApiErrorDetail(
                source={ApiErrorSource.HEADER: "Cookie"},
                title=AuthErrorMessages.AUTHENTICATION_REQUIRED,
                detail=str(exc),
            )
        )
    elif isinstance(exc, TokenInvalidError):
        status_code = status.HTTP_401_UNAUTHORIZED
        error_list.append(
            ApiErrorDetail(
                source={ApiErrorSource.HEADER: "Cookie"},
                title=AuthErrorMessages.INVALID_TOKEN_TITLE,
                detail=str(exc),
            )
        )
    elif isinstance(exc, InvalidCredentialsError):
        status_code = status.HTTP_401_UNAUTHORIZED
        error_list.append(ApiErrorDetail(title=ApiErrors.AUTHENTICATION_FAILED, detail=str(exc)))
    elif isinstance(exc, UserAlreadyExistsError):
        status_code = status.HTTP_400_BAD_REQUEST
        error_list.append(
            ApiErrorDetail(
                source={ApiErrorSource.PARAMETER: "email"},
                title=ApiErrors.BUSINESS_RULE_VIOLATION,
                detail=str(exc),
            )
        )
    elif isinstance(exc, UserNotFoundException):
        status_code = status.HTTP_404_NOT_FOUND
        error_list.append(ApiErrorDetail(title=ApiErrors.RESOURCE_NOT_FOUND_TITLE, detail=str(exc)))
    elif isinstance(exc, BaseAuthException):
        status_code = status.HTTP_401_UNAUTHORIZED
        error_list.append(ApiErrorDetail(title=ApiErrors.AUTHENTICATION_FAILED, detail=str(exc)))
    elif isinstance(exc, PermissionDeniedError):
        status_code = status.HTTP_403_FORBIDDEN
        error_list.append(ApiErrorDetail(title=ApiErrors.FORBIDDEN_TITLE, detail=ApiErrors.INSUFFICIENT_PERMISSIONS))
    elif isinstance(exc, TeamNotFoundException):
        status_code = status.HTTP_404_NOT_FOUND
        error_list.append(
            ApiErrorDetail(
                source=_team_id_source(context),
                title=ApiErrors.RESOURCE_NOT_FOUND_TITLE,
                detail=str(exc),
            )
        )
    elif isinstance(exc, InvalidTeamIdException):
        status_code = status.HTTP_400_BAD_REQUEST
        error_list.append(
            ApiErrorDetail(
                source=_team_id_source(context),
                title=ApiErrors.VALIDATION_ERROR,
                detail=str(exc),
            )
        )
    elif isinstance(exc, BusinessRuleViolation):
        status_code = status.HTTP_400_BAD_REQUEST
        error_list.append(ApiErrorDetail(title=ApiErrors.BUSINESS_RULE_VIOLATION, detail=str(exc)))
    elif isinstance(exc, DRFValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
        error_list = format_validation_errors(exc.detail)
        if not error_list and exc.detail:
            error_list.append(ApiErrorDetail(detail=str(exc.detail), title=ApiErrors.VALIDATION_ERROR))
    elif response is not None:
        status_code = response.status_code
        if isinstance(response.data, dict) and "detail" in response.data:
            detail_str = str(response.data["detail"])
            error_list.append(ApiErrorDetail(detail=detail_str, title=detail_str))
        else:
            error_list.append(ApiErrorDetail(detail=str(response.data), title=str(exc)))
    else:
        logger.exception("Unhandled exception while processing request", exc_info=exc)
        error_list.append(
            ApiErrorDetail(
                detail=ApiErrors.INTERNAL_SERVER_ERROR,
                title=ApiErrors.INTERNAL_SERVER_ERROR,
            )
        )

    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        message = ApiErrors.INTERNAL_SERVER_ERROR
    else:
        message = error_list[0].detail if error_list else str(exc)

    final_response_data = ApiErrorResponse(
        statusCode=status_code,
        message=message,
        errors=error_list,
    )
    return Response(data=final_response_data.model_dump(mode="json", exclude_none=True), status=status_code)
