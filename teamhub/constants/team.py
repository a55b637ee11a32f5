from enum import Enum


class ApprovalState(Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ApprovalType(Enum):
    MANAGER = "manager"
    DIRECTOR = "director"


class Gender(Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


APPROVAL_FIELD_BY_TYPE = {
    ApprovalType.MANAGER: "approvedByManager",
    ApprovalType.DIRECTOR: "approvedByDirector",
}

CONTACT_NO_PATTERN = r"^\d+$"

FIRST_DISPLAY_ORDER = 1
