from enum import Enum


class UserRole(Enum):
    MANAGER = "manager"
    DIRECTOR = "director"
    MEMBER = "member"


APPROVER_ROLES = frozenset({UserRole.MANAGER, UserRole.DIRECTOR})
