from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from teamhub.constants.team import ApprovalState
from teamhub.dto.member_dto import MemberDTO
from teamhub.models.team import TeamModel


class CreateTeamDTO(BaseModel):
    teamName: str
    teamDescription: str
    members: List[MemberDTO] = Field(..., min_length=1)


class TeamDTO(BaseModel):
    id: str
    teamName: str
    teamDescription: str
    approvedByManager: ApprovalState
    approvedByDirector: ApprovalState
    members: List[MemberDTO]
    displayOrder: int
    createdAt: datetime | None = None
    updatedAt: datetime | None = None

    model_config = ConfigDict(use_enum_values=True)

    @classmethod
    def from_model(cls, team: TeamModel) -> "TeamDTO":
        return cls(
            id=str(team.id),
            teamName=team.teamName,
            teamDescription=team.teamDescription,
            approvedByManager=team.approvedByManager,
            approvedByDirector=team.approvedByDirector,
            members=[MemberDTO.model_validate(member) for member in team.members],
            displayOrder=team.displayOrder,
            createdAt=team.createdAt,
            updatedAt=team.updatedAt,
        )
