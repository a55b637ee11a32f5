from rest_framework.permissions import BasePermission

from teamhub.constants.messages import AuthErrorMessages
from teamhub.exceptions.auth_exceptions import TokenMissingError
from teamhub.services.permission_service import PermissionService


class IsAuthenticatedSession(BasePermission):
    """Requires the user set on the request by the JWT session middleware."""

    def has_permission(self, request, view) -> bool:
        if not getattr(request, "user_id", None):
            raise TokenMissingError(AuthErrorMessages.AUTHENTICATION_REQUIRED)
        return True


class CanApproveTeams(IsAuthenticatedSession):
    """Only managers and directors may change a team's approval state."""

    def has_permission(self, request, view) -> bool:
        super().has_permission(request, view)
        PermissionService.require_approver(getattr(request, "user_role", None))
        return True
