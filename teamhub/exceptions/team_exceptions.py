from teamhub.constants.messages import ApiErrors, ValidationErrors


class BaseTeamException(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class TeamNotFoundException(BaseTeamException):
    def __init__(self, team_id: str | None = None, message: str = ApiErrors.TEAM_NOT_FOUND):
        self.team_id = team_id
        super().__init__(message)


class InvalidTeamIdException(BaseTeamException):
    def __init__(self, team_id: str):
        self.team_id = team_id
        super().__init__(ValidationErrors.INVALID_TEAM_ID.format(team_id))


class BusinessRuleViolation(BaseTeamException):
    """A well-formed request that breaks a team invariant."""


class DuplicateTeamNameException(BusinessRuleViolation):
    def __init__(self, message: str = ApiErrors.TEAM_NAME_EXISTS):
        super().__init__(message)


class LastMemberRemovalException(BusinessRuleViolation):
    def __init__(self, message: str = ApiErrors.LAST_MEMBER_REMOVAL):
        super().__init__(message)
