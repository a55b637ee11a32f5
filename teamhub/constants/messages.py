# Application Messages
class AppMessages:
    TEAM_CREATED = "Team created successfully"
    TEAM_UPDATED = "Team updated successfully"
    TEAM_DELETED = "Team deleted successfully"
    TEAMS_BULK_DELETED = "{0} teams deleted successfully"
    TEAM_APPROVAL_UPDATED = "Team approval status updated successfully"
    TEAM_ORDER_UPDATED = "Team order updated successfully"
    TEAM_ORDER_UNCHANGED = "Team order unchanged"
    USER_REGISTERED = "User registered successfully"
    LOGIN_SUCCESSFUL = "Login successful"
    LOGOUT_SUCCESSFUL = "Logged out successfully"


# API error messages
class ApiErrors:
    INTERNAL_SERVER_ERROR = "Internal server error"
    VALIDATION_ERROR = "Validation Error"
    RESOURCE_NOT_FOUND_TITLE = "Resource not found"
    BUSINESS_RULE_VIOLATION = "Business rule violation"
    AUTHENTICATION_FAILED = "Authentication Failed"
    FORBIDDEN_TITLE = "Forbidden"
    TEAM_NOT_FOUND = "Team not found"
    TEAM_NAME_EXISTS = "Team name already exists"
    LAST_MEMBER_REMOVAL = "A team must keep at least one member"
    INSUFFICIENT_PERMISSIONS = "Insufficient permissions"
    USER_NOT_FOUND = "User not found"
    USER_ALREADY_EXISTS = "A user with this email already exists"
    INVALID_CREDENTIALS = "Invalid email or password"


# Validation error messages
class ValidationErrors:
    TEAM_NAME_REQUIRED = "Team name is required"
    TEAM_DESCRIPTION_REQUIRED = "Team description is required"
    MEMBERS_REQUIRED = "At least one member is required"
    MEMBER_NAME_REQUIRED = "Member name is required"
    GENDER_REQUIRED = "Gender is required"
    INVALID_GENDER = "Gender must be one of: {0}"
    DATE_OF_BIRTH_REQUIRED = "Date of birth is required"
    INVALID_DATE = "Invalid date format"
    CONTACT_NO_REQUIRED = "Contact number is required"
    CONTACT_NO_DIGITS = "Contact number must contain only digits"
    INVALID_APPROVAL_TYPE = "Invalid approval type"
    INVALID_APPROVAL_STATUS = "Status must be one of: {0}"
    TEAM_IDS_REQUIRED = "At least one team must be selected"
    INVALID_TEAM_ID = "{0} is not a valid team id."
    ORDER_NON_NEGATIVE = "Order must be greater than or equal to 0"
    ORDER_NOT_INTEGER = "Order must be an integer"
    PAGE_POSITIVE = "page must be greater than or equal to 1"
    LIMIT_POSITIVE = "limit must be greater than or equal to 1"
    INVALID_EMAIL = "Invalid email address"
    PASSWORD_TOO_SHORT = "Password must be at least 6 characters"
    NAME_REQUIRED = "Name is required"
    ROLE_REQUIRED = "Role is required"


# Auth error messages
class AuthErrorMessages:
    TOKEN_MISSING = "Authentication token is required"
    TOKEN_EXPIRED = "Authentication token has expired"
    TOKEN_INVALID = "Invalid authentication token"
    REFRESH_TOKEN_EXPIRED = "Refresh token has expired"
    AUTHENTICATION_REQUIRED = "Authentication required"
    TOKEN_EXPIRED_TITLE = "Token Expired"
    INVALID_TOKEN_TITLE = "Invalid Token"
