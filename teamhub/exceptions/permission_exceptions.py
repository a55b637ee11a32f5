class PermissionDeniedError(Exception):
    """Base permission error"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InsufficientRoleError(PermissionDeniedError):
    """Insufficient role for action"""

    def __init__(self, required_roles: list[str], current_role: str | None, action: str):
        self.required_roles = required_roles
        self.current_role = current_role
        self.action = action
        message = (
            f"Insufficient role: '{action}' requires one of {required_roles}, "
            f"but user has '{current_role or 'none'}'"
        )
        super().__init__(message)
