from typing import List

from pydantic import BaseModel

from teamhub.dto.team_dto import TeamDTO
from teamhub.dto.responses.paginated_response import PaginatedResponse


class TeamResponse(BaseModel):
    success: bool = True
    data: TeamDTO
    message: str | None = None


class GetTeamsResponse(PaginatedResponse):
    data: List[TeamDTO] = []


class DeletedCountDTO(BaseModel):
    deletedCount: int


class BulkDeleteTeamsResponse(BaseModel):
    success: bool = True
    data: DeletedCountDTO
    message: str | None = None


class MessageResponse(BaseModel):
    success: bool = True
    message: str
