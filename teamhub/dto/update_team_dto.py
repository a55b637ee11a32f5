from typing import List, Optional

from pydantic import BaseModel, field_validator

from teamhub.constants.team import ApprovalState
from teamhub.dto.member_dto import MemberDTO


class UpdateTeamDTO(BaseModel):
    """
    Partial team update. Only fields that were sent are applied; ``members``
    always replaces the whole member list.
    """

    teamName: Optional[str] = None
    teamDescription: Optional[str] = None
    members: Optional[List[MemberDTO]] = None
    approvedByManager: Optional[ApprovalState] = None
    approvedByDirector: Optional[ApprovalState] = None
    displayOrder: Optional[int] = None

    @field_validator("teamName")
    @classmethod
    def validate_team_name(cls, value):
        """Validate that name is not blank if provided."""
        if value is not None and not value.strip():
            raise ValueError("Team name cannot be blank")
        return value.strip() if value else None

    @field_validator("teamDescription")
    @classmethod
    def validate_team_description(cls, value):
        if value is not None and not value.strip():
            raise ValueError("Team description cannot be blank")
        return value.strip() if value else None
