from teamhub.constants.messages import AuthErrorMessages, ApiErrors


class BaseAuthException(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class TokenExpiredError(BaseAuthException):
    def __init__(self, message: str = AuthErrorMessages.TOKEN_EXPIRED):
        super().__init__(message)


class TokenMissingError(BaseAuthException):
    def __init__(self, message: str = AuthErrorMessages.TOKEN_MISSING):
        super().__init__(message)


class TokenInvalidError(BaseAuthException):
    def __init__(self, message: str = AuthErrorMessages.TOKEN_INVALID):
        super().__init__(message)


class RefreshTokenExpiredError(BaseAuthException):
    def __init__(self, message: str = AuthErrorMessages.REFRESH_TOKEN_EXPIRED):
        super().__init__(message)


class InvalidCredentialsError(BaseAuthException):
    def __init__(self, message: str = ApiErrors.INVALID_CREDENTIALS):
        super().__init__(message)


class UserAlreadyExistsError(BaseAuthException):
    def __init__(self, message: str = ApiErrors.USER_ALREADY_EXISTS):
        super().__init__(message)


class UserNotFoundException(BaseAuthException):
    def __init__(self, message: str = ApiErrors.USER_NOT_FOUND):
        super().__init__(message)
