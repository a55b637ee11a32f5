from pydantic import BaseModel, ConfigDict, Field
from typing import ClassVar, List
from datetime import datetime

from teamhub.constants.team import ApprovalState, Gender
from teamhub.models.common.document import Document
from teamhub.models.common.pyobjectid import PyObjectId


class MemberModel(BaseModel):
    """
    A person embedded in a team. Members have no identity of their own; their
    position in ``TeamModel.members`` is their display position.
    """

    name: str
    gender: Gender
    dateOfBirth: datetime
    contactNo: str

    model_config = ConfigDict(use_enum_values=True, from_attributes=True)


class TeamModel(Document):
    collection_name: ClassVar[str] = "teams"

    id: PyObjectId | None = Field(None, alias="_id")
    teamName: str
    teamDescription: str
    approvedByManager: ApprovalState = Field(ApprovalState.PENDING, validate_default=True)
    approvedByDirector: ApprovalState = Field(ApprovalState.PENDING, validate_default=True)
    members: List[MemberModel] = Field(..., min_length=1)
    displayOrder: int = 0
    createdAt: datetime | None = None
    updatedAt: datetime | None = None

    model_config = ConfigDict(use_enum_values=True)
