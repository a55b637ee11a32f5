import logging
from typing import Iterable

from teamhub.constants.role import APPROVER_ROLES, UserRole
from teamhub.exceptions.permission_exceptions import InsufficientRoleError

logger = logging.getLogger(__name__)


class PermissionService:
    """Role-based authorization policy shared by route guards and services."""

    @classmethod
    def to_role(cls, value) -> UserRole | None:
        """Map a stored or token role value onto ``UserRole``; anything unknown maps to None."""
        if isinstance(value, UserRole):
            return value
        try:
            return UserRole(value)
        except ValueError:
            return None

    @classmethod
    def require_role(cls, role, allowed_roles: Iterable[UserRole], action: str) -> UserRole:
        """Return the caller's role or raise if it is not one of ``allowed_roles``."""
        allowed_roles = set(allowed_roles)
        user_role = cls.to_role(role)
        if user_role not in allowed_roles:
            logger.warning(f"Denied '{action}' for role {role!r}")
            raise InsufficientRoleError(
                required_roles=sorted(allowed.value for allowed in allowed_roles),
                current_role=user_role.value if user_role else None,
                action=action,
            )
        return user_role

    @classmethod
    def require_approver(cls, role) -> UserRole:
        return cls.require_role(role, APPROVER_ROLES, "change team approval")
