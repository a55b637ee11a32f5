from pydantic import BaseModel

from teamhub.dto.user_dto import UserDTO


class UserResponse(BaseModel):
    success: bool = True
    data: UserDTO
    message: str | None = None
